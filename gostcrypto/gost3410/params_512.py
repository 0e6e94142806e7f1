"""Named 512-bit curve parameter sets for GOST R 34.10-2012."""

from __future__ import annotations

from gostcrypto.gost3410.curve import Curve

__all__ = [
    "curve_id_tc26_gost341012_512_paramset_test",
    "curve_id_tc26_gost341012_512_paramset_a",
    "curve_id_tc26_gost341012_512_paramset_b",
    "curve_id_tc26_gost341012_512_paramset_c",
    "curve_id_tc26_gost34102012_512_paramset_test",
    "curve_id_tc26_gost34102012_512_paramset_a",
    "curve_id_tc26_gost34102012_512_paramset_b",
    "curve_id_tc26_gost34102012_512_paramset_c",
]


def _h(text: str) -> int:
    return int("".join(text.split()), 16)


_FF = "FFFFFFFFFFFFFFFF "

_P_TC26_512_AC = _h(_FF * 7 + "FFFFFFFFFFFFFDC7")


def curve_id_tc26_gost341012_512_paramset_test() -> Curve:
    """id-tc26-gost-3410-12-512-paramSetTest."""
    return Curve(
        p=_h(
            "4531ACD1FE0023C7 550D267B6B2FEE80 922B14B2FFB90F04 D4EB7C09B5D2D15D "
            "F1D852741AF4704A 0458047E80E4546D 35B8336FAC224DD8 1664BBF528BE6373"
        ),
        q=_h(
            "4531ACD1FE0023C7 550D267B6B2FEE80 922B14B2FFB90F04 D4EB7C09B5D2D15D "
            "A82F2D7ECB1DBAC7 19905C5EECC423F1 D86E25EDBE23C595 D644AAF187E6E6DF"
        ),
        a=7,
        b=_h(
            "1CFF0806A31116DA 29D8CFA54E57EB74 8BC5F377E49400FD D788B649ECA1AC43 "
            "61834013B2AD7322 480A89CA58E0CF74 BC9E540C2ADD6897 FAD0A3084F302ADC"
        ),
        x=_h(
            "24D19CC64572EE30 F396BF6EBBFD7A6C 5213B3B3D7057CC8 25F91093A68CD762 "
            "FD60611262CD838D C6B60AA7EEE804E2 8BC849977FAC33B4 B530F1B120248A9A"
        ),
        y=_h(
            "2BB312A43BD2CE6E 0D020613C857ACDD CFBF061E91E5F2C3 F32447C259F39B2C "
            "83AB156D77F1496B F7EB3351E1EE4E43 DC1A18B91B24640B 6DBB92CB1ADD371E"
        ),
        name="id-tc26-gost-3410-12-512-paramSetTest",
    )


def curve_id_tc26_gost341012_512_paramset_a() -> Curve:
    """id-tc26-gost-3410-12-512-paramSetA."""
    return Curve(
        p=_P_TC26_512_AC,
        q=_h(
            _FF * 4
            + "27E69532F48D8911 6FF22B8D4E056060 9B4B38ABFAD2B85D CACDB1411F10B275"
        ),
        a=_h(_FF * 7 + "FFFFFFFFFFFFFDC4"),
        b=_h(
            "E8C2505DEDFC86DD C1BD0B2B6667F1DA 34B82574761CB0E8 79BD081CFD0B6265 "
            "EE3CB090F30D2761 4CB4574010DA90DD 862EF9D4EBEE4761 503190785A71C760"
        ),
        x=3,
        y=_h(
            "7503CFE87A836AE3 A61B8816E25450E6 CE5E1C93ACF1ABC1 778064FDCBEFA921 "
            "DF1626BE4FD036E9 3D75E6A50E3A41E9 8028FE5FC235F5B8 89A589CB5215F2A4"
        ),
        name="id-tc26-gost-3410-12-512-paramSetA",
    )


def curve_id_tc26_gost341012_512_paramset_b() -> Curve:
    """id-tc26-gost-3410-12-512-paramSetB."""
    return Curve(
        p=(1 << 511) + 0x6F,
        q=_h(
            "8000000000000000 0000000000000000 0000000000000000 0000000000000001 "
            "49A1EC142565A545 ACFDB77BD9D40CFA 8B996712101BEA0E C6346C54374F25BD"
        ),
        a=(1 << 511) + 0x6C,
        b=_h(
            "687D1B459DC84145 7E3E06CF6F5E2517 B97C7D614AF138BC BF85DC806C4B289F "
            "3E965D2DB1416D21 7F8B276FAD1AB69C 50F78BEE1FA3106E FB8CCBC7C5140116"
        ),
        x=2,
        y=_h(
            "1A8F7EDA389B094C 2C071E3647A8940F 3C123B697578C213 BE6DD9E6C8EC7335 "
            "DCB228FD1EDF4A39 152CBCAAF8C03988 28041055F94CEEEC 7E21340780FE41BD"
        ),
        name="id-tc26-gost-3410-12-512-paramSetB",
    )


def curve_id_tc26_gost341012_512_paramset_c() -> Curve:
    """id-tc26-gost-3410-12-512-paramSetC (has a twisted Edwards form)."""
    return Curve(
        p=_P_TC26_512_AC,
        q=_h(
            "3FFFFFFFFFFFFFFF "
            + _FF * 3
            + "C98CDBA46506AB00 4C33A9FF5147502C C8EDA9E7A769A126 94623CEF47F023ED"
        ),
        a=_h(
            "DC9203E514A72187 5485A529D2C722FB 187BC8980EB86664 4DE41C68E1430645 "
            "46E861C0E2C9EDD9 2ADE71F46FCF50FF 2AD97F951FDA9F2A 2EB6546F39689BD3"
        ),
        b=_h(
            "B4C4EE28CEBC6C2C 8AC12952CF37F16A C7EFB6A9F69F4B57 FFDA2E4F0DE5ADE0 "
            "38CBC2FFF719D2C1 8DE0284B8BFEF3B5 2B8CC7A5F5BF0A3C 8D2319A5312557E1"
        ),
        x=_h(
            "E2E31EDFC23DE7BD EBE241CE593EF5DE 2295B7A9CBAEF021 D385F7074CEA043A "
            "A27272A7AE602BF2 A7B9033DB9ED3610 C6FB85487EAE97AA C5BC7928C1950148"
        ),
        y=_h(
            "F5CE40D95B5EB899 ABBCCFF5911CB857 7939804D6527378B 8C108C3D2090FF9B "
            "E18E2D33E3021ED2 EF32D85822423B63 04F726AA854BAE07 D0396E9A9ADDC40F"
        ),
        e=1,
        d=_h(
            "9E4F5D8C017D8D9F 13A5CF3CDF5BFE4D AB402D54198E31EB DE28A0621050439C "
            "A6B39E0A515C06B3 04E2CE43E79E369E 91A0CFC2BC2A22B4 CA302DBB33EE7550"
        ),
        co=4,
        name="id-tc26-gost-3410-12-512-paramSetC",
    )


def _renamed(curve: Curve, name: str) -> Curve:
    curve.name = name
    return curve


def curve_id_tc26_gost34102012_512_paramset_test() -> Curve:
    """id-tc26-gost-3410-2012-512-paramSetTest."""
    return _renamed(
        curve_id_tc26_gost341012_512_paramset_test(),
        "id-tc26-gost-3410-2012-512-paramSetTest",
    )


def curve_id_tc26_gost34102012_512_paramset_a() -> Curve:
    """id-tc26-gost-3410-2012-512-paramSetA."""
    return _renamed(
        curve_id_tc26_gost341012_512_paramset_a(),
        "id-tc26-gost-3410-2012-512-paramSetA",
    )


def curve_id_tc26_gost34102012_512_paramset_b() -> Curve:
    """id-tc26-gost-3410-2012-512-paramSetB."""
    return _renamed(
        curve_id_tc26_gost341012_512_paramset_b(),
        "id-tc26-gost-3410-2012-512-paramSetB",
    )


def curve_id_tc26_gost34102012_512_paramset_c() -> Curve:
    """id-tc26-gost-3410-2012-512-paramSetC."""
    return _renamed(
        curve_id_tc26_gost341012_512_paramset_c(),
        "id-tc26-gost-3410-2012-512-paramSetC",
    )