import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gostcrypto.gost3410.curve import Curve, point_size, uv_to_xy, xy_to_uv


def h(s: str) -> int:
    return int(s.replace(" ", ""), 16)


def le(s: str) -> int:
    return int.from_bytes(bytes.fromhex(s.replace(" ", "")), "little")


P256 = h("FF" * 30 + "FD97")


def curve_256_a() -> Curve:
    return Curve(
        P256,
        h("4000000000000000 0000000000000000 0FD8CDDFC87B6635 C115AF556C360C67"),
        h("C2173F1513981673 AF4892C23035A27C E25E2013BF95AA33 B22C656F277E7335"),
        h("295F9BAE7428ED9C CC20E7C359A9D41A 22FCCD9108E17BF7 BA9337A6F8AE9513"),
        h("91E38443A5E82C0D 880923425712B2BB 658B9196932E02C7 8B2582FE742DAA28"),
        h("32879423AB1A0375 895786C4BB46E956 5FDE0B5344766740 AF268ADB32322E5C"),
        1,
        h("0605F6B7C183FA81 578BC39CFAD51813 2B9DF62897009AF7 E522C32D6DC7BFFB"),
        4,
        name="id-tc26-gost-3410-12-256-paramSetA",
    )


def curve_256_b() -> Curve:
    return Curve(
        P256,
        h("FFFFFFFFFFFFFFFF FFFFFFFFFFFFFFFF 6C611070995AD100 45841B09B761B893"),
        h("FF" * 30 + "FD94"),
        0xA6,
        1,
        h("8D91E471E0989CDA 27DF505A453F2B76 35294F2DDF23E3B1 22ACC99C9E9F1E14"),
        name="id-tc26-gost-3410-12-256-paramSetB",
    )


P512_TEST = h(
    "4531ACD1FE0023C7 550D267B6B2FEE80 922B14B2FFB90F04 D4EB7C09B5D2D15D"
    "F1D852741AF4704A 0458047E80E4546D 35B8336FAC224DD8 1664BBF528BE6373"
)
Q512_TEST = h(
    "4531ACD1FE0023C7 550D267B6B2FEE80 922B14B2FFB90F04 D4EB7C09B5D2D15D"
    "A82F2D7ECB1DBAC7 19905C5EECC423F1 D86E25EDBE23C595 D644AAF187E6E6DF"
)
B512_TEST = h(
    "1CFF0806A31116DA 29D8CFA54E57EB74 8BC5F377E49400FD D788B649ECA1AC43"
    "61834013B2AD7322 480A89CA58E0CF74 BC9E540C2ADD6897 FAD0A3084F302ADC"
)
X512_TEST = h(
    "24D19CC64572EE30 F396BF6EBBFD7A6C 5213B3B3D7057CC8 25F91093A68CD762"
    "FD60611262CD838D C6B60AA7EEE804E2 8BC849977FAC33B4 B530F1B120248A9A"
)
Y512_TEST = h(
    "2BB312A43BD2CE6E 0D020613C857ACDD CFBF061E91E5F2C3 F32447C259F39B2C"
    "83AB156D77F1496B F7EB3351E1EE4E43 DC1A18B91B24640B 6DBB92CB1ADD371E"
)


def curve_512_test() -> Curve:
    return Curve(P512_TEST, Q512_TEST, 7, B512_TEST, X512_TEST, Y512_TEST)


def test_point_size_function():
    assert point_size(P256) == 32
    assert point_size(P512_TEST) == 64
    assert point_size(2**256 - 1) == 32
    assert point_size(2**256) == 64


def test_curve_point_size_and_defaults():
    c = curve_512_test()
    assert c.point_size() == 64
    assert c.name == "unknown"
    assert c.co == 1
    assert c.e is None and c.d is None
    assert not c.is_edwards()
    assert curve_256_b().point_size() == 32


def test_invalid_curve_parameters():
    with pytest.raises(ValueError):
        Curve(P512_TEST, Q512_TEST, 7, B512_TEST, X512_TEST, Y512_TEST + 1)


def test_edwards_needs_both_coefficients():
    c = Curve(P512_TEST, Q512_TEST, 7, B512_TEST, X512_TEST, Y512_TEST, e=1)
    assert c.e is None
    assert not c.is_edwards()


def test_exp_zero_degree_raises():
    c = curve_256_b()
    with pytest.raises(ValueError):
        c.exp(0, c.x, c.y)


def test_exp_degree_one_is_identity():
    c = curve_256_b()
    assert c.exp(1, c.x, c.y) == (c.x, c.y)


def test_exp_result_lies_on_curve():
    c = curve_256_a()
    x, y = c.exp(12345, c.x, c.y)
    assert (y * y - (x * x * x + c.a * x + c.b)) % c.p == 0


@settings(max_examples=20, deadline=None)
@given(st.integers(min_value=1, max_value=2000), st.integers(min_value=1, max_value=2000))
def test_exp_composes(m, n):
    c = curve_256_b()
    inner = c.exp(n, c.x, c.y)
    assert c.exp(m, *inner) == c.exp(m * n, c.x, c.y)


def test_gcl3_public_key_point():
    c = curve_512_test()
    prv = le(
        "D48DA11F826729C6 DFAA18FD7B6B63A2 14277E82D2DA2233 56A000223B12E872"
        "20108B508E50E70E 70694651E8A09130 C9D75677D43609A4 1B24AEAD8A04A60B"
    ) % c.q
    pub_x = le(
        "E1EF30D52C6133DD D99D1D5C41455CF7 DF4D8B4C925BBC69 AF1433D15658515A"
        "DD2146850C325C5B 81C133BE655AA8C4 D440E7B98A8D5948 7B0C7696BCC55D11"
    )
    pub_y = le(
        "ECBE7736A9EC357F F2FD39931F4E114C B8CDA359270AC7F0 E7FF43D9419419EA"
        "61FD2AB77F5D9F63 523D3B50A04F63E2 A0CF51B7C13ADC21 560F0BD40CC9C737"
    )
    assert c.exp(prv, c.x, c.y) == (pub_x, pub_y)


SESPAKE_VECTORS = [
    (
        curve_256_b,
        "A69D51CAF1A309FA9E9B66187759B0174C274E080356F23CFCBFE84D396AD7BB",
        "5D26F29ECC2E9AC0404DCF7986FA55FE94986362170F54B9616426A659786DAC",
        "BD04673F7149B18E98155BD1E2724E71D0099AA25174F792D3326C6F18127067",
        "59495655D1E7C7424C622485F575CCF121F3122D274101E8AB734CC9C9A9B45E",
        "48D1C311D33C9B701F3B03618562A4A07A044E3AF31E3999E67B487778B53C62",
        "1F2538097D5A031FA68BBB43C84D12B3DE47B7061C0D5E24993E0C873CDBA6B3",
        "BBC77CF42DC1E62D06227935379B4AA4D14FEA4F565DDF4CB4FA4D31579F9676",
        "8E16604A4AFDF28246684D4996274781F6CB80ABBBA1414C1513EC988509DABF",
        "DC497D9EF6324912FD367840EE509A2032AEDB1C0A890D133B45F596FCCBD45D",
        "6097341C1BE388E83E7CA2DF47FAB86E2271FD942E5B7B2EB2409E49F742BC29",
        "C81AA48BDB4CA6FA0EF18B9788AE25FE30857AA681B3942217F9FED151BAB7D0",
    ),
    (
        curve_256_a,
        "B51ADF93A40AB15792164FAD3352F95B66369EB2A4EF5EFAE32829320363350E",
        "74A358CC08593612F5955D249C96AFB7E8B0BB6D8BD2BBE491046650D822BE18",
        "BD04673F7149B18E98155BD1E2724E71D0099AA25174F792D3326C6F18127067",
        "DBF99827078956812FA48C6E695DF589DEF1D18A2D4D35A96D75BF6854237629",
        "9FDDD48BFBC57BEE1DA0CFF282884F284D471B388893C48F5ECB02FC18D67589",
        "147B72F6684FB8FD1B418A899F7DBECAF5FCE60B13685BAA95328654A7F0707F",
        "33FBAC14EAE538275A769417829C431BD9FA622B6F02427EF55BD60EE6BC2888",
        "22F2EBCF960A82E6CDB4042D3DDDA511B2FBA925383C2273D952EA2D406EAE46",
        "30D5CFADAA0E31B405E6734C03EC4C5DF0F02F4BA25C9A3B320EE6453567B4CB",
        "2B2D89FAB735433970564F2F28CFA1B57D640CB902BC6334A538F44155022CB2",
        "10EF6A82EEF1E70F942AA81D6B4CE5DEC0DDB9447512962874870E6F2849A96F",
    ),
]


@pytest.mark.parametrize("vector", SESPAKE_VECTORS)
def test_sespake_vectors(vector):
    (make_curve, q_x, q_y, f_pw, x_exp, y_exp,
     alpha, xa_exp, ya_exp, beta, xb_exp, yb_exp) = vector
    template = make_curve()
    c = Curve(
        template.p, template.q, template.a, template.b, template.x, template.y,
        template.e, template.d, template.co,
    )
    assert point_size(c.p) == 32
    f = le(f_pw)
    assert c.exp(f, h(q_x), h(q_y)) == (h(x_exp), h(y_exp))
    assert c.exp(h(alpha), c.x, c.y) == (h(xa_exp), h(ya_exp))
    assert c.exp(h(beta), c.x, c.y) == (h(xb_exp), h(yb_exp))


def test_uv_xy_conversion_256():
    c = curve_256_a()
    u = 0x0D
    v = h("60CA1E32AA475B348488C38FAB07649CE7EF8DBE87F22E81F92B2592DBA300E7")
    assert uv_to_xy(c, u, v) == (c.x, c.y)
    assert xy_to_uv(c, c.x, c.y) == (u, v)


def test_uv_xy_round_trip_other_point():
    c = curve_256_a()
    x, y = c.exp(777, c.x, c.y)
    u, v = xy_to_uv(c, x, y)
    assert uv_to_xy(c, u, v) == (x, y)


def test_edwards_st_is_cached():
    c = curve_256_a()
    first = c.edwards_st()
    assert c.edwards_st() is first
    s, t = first
    assert (4 * s - (c.e - c.d)) % c.p == 0
    assert (6 * t - (c.e + c.d)) % c.p == 0


def test_conversion_on_non_edwards_curve_raises():
    c = curve_256_b()
    with pytest.raises(ValueError):
        xy_to_uv(c, c.x, c.y)
    with pytest.raises(ValueError):
        uv_to_xy(c, 1, 2)
    with pytest.raises(ValueError):
        c.edwards_st()


def test_equality():
    assert curve_256_a() == curve_256_a()
    renamed = curve_256_b()
    renamed.name = "other"
    assert renamed == curve_256_b()
    assert curve_256_a() != curve_256_b()
    base = curve_512_test()
    other_co = Curve(P512_TEST, Q512_TEST, 7, B512_TEST, X512_TEST, Y512_TEST, co=4)
    assert base != other_co
    assert hash(curve_256_a()) == hash(curve_256_a())