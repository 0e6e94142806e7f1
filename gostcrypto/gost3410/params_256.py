"""Named 256-bit curve parameter sets for GOST R 34.10."""

from __future__ import annotations

from gostcrypto.gost3410.curve import Curve

__all__ = [
    "curve_gostr34102001_paramset_cc",
    "curve_id_gostr34102001_test_paramset",
    "curve_id_tc26_gost341012_256_paramset_a",
    "curve_id_tc26_gost341012_256_paramset_b",
    "curve_id_tc26_gost341012_256_paramset_c",
    "curve_id_tc26_gost341012_256_paramset_d",
    "curve_id_gostr34102001_cryptopro_a_paramset",
    "curve_id_gostr34102001_cryptopro_b_paramset",
    "curve_id_gostr34102001_cryptopro_c_paramset",
    "curve_id_gostr34102001_cryptopro_xcha_paramset",
    "curve_id_gostr34102001_cryptopro_xchb_paramset",
    "curve_id_tc26_gost34102012_256_paramset_a",
    "curve_id_tc26_gost34102012_256_paramset_b",
    "curve_id_tc26_gost34102012_256_paramset_c",
    "curve_id_tc26_gost34102012_256_paramset_d",
    "curve_default",
]


def _h(text: str) -> int:
    return int("".join(text.split()), 16)


_P_TC26_256_AB = _h(
    "FFFFFFFFFFFFFFFF FFFFFFFFFFFFFFFF FFFFFFFFFFFFFFFF FFFFFFFFFFFFFD97"
)


def curve_gostr34102001_paramset_cc() -> Curve:
    """GostR34102001ParamSetcc."""
    return Curve(
        p=_h("C000000000000000 0000000000000000 0000000000000000 00000000000003C7"),
        q=_h("5FFFFFFFFFFFFFFF FFFFFFFFFFFFFFFF 606117A2F4BDE428 B7458A54B6E87B85"),
        a=_h("C000000000000000 0000000000000000 0000000000000000 00000000000003C4"),
        b=_h("2D06B4265EBC749F F7D0F1F1F88232E8 1632E9088FD44B77 87D5E407E955080C"),
        x=2,
        y=_h("A20E034BF8813EF5 C18D01105E726A17 EB248B264AE9706F 440BEDC8CCB6B22C"),
        name="GostR34102001ParamSetcc",
    )


def curve_id_gostr34102001_test_paramset() -> Curve:
    """id-GostR3410-2001-TestParamSet."""
    return Curve(
        p=_h("8000000000000000 0000000000000000 0000000000000000 0000000000000431"),
        q=_h("8000000000000000 0000000000000001 50FE8A1892976154 C59CFC193ACCF5B3"),
        a=7,
        b=_h("5FBFF498AA938CE7 39B8E022FBAFEF40 563F6E6A3472FC2A 514C0CE9DAE23B7E"),
        x=2,
        y=_h("08E2A8A0E65147D4 BD6316030E16D19C 85C97F0A9CA26712 2B96ABBCEA7E8FC8"),
        name="id-GostR3410-2001-TestParamSet",
    )


def curve_id_tc26_gost341012_256_paramset_a() -> Curve:
    """id-tc26-gost-3410-12-256-paramSetA (has a twisted Edwards form)."""
    return Curve(
        p=_P_TC26_256_AB,
        q=_h("4000000000000000 0000000000000000 0FD8CDDFC87B6635 C115AF556C360C67"),
        a=_h("C2173F1513981673 AF4892C23035A27C E25E2013BF95AA33 B22C656F277E7335"),
        b=_h("295F9BAE7428ED9C CC20E7C359A9D41A 22FCCD9108E17BF7 BA9337A6F8AE9513"),
        x=_h("91E38443A5E82C0D 880923425712B2BB 658B9196932E02C7 8B2582FE742DAA28"),
        y=_h("32879423AB1A0375 895786C4BB46E956 5FDE0B5344766740 AF268ADB32322E5C"),
        e=1,
        d=_h("0605F6B7C183FA81 578BC39CFAD51813 2B9DF62897009AF7 E522C32D6DC7BFFB"),
        co=4,
        name="id-tc26-gost-3410-12-256-paramSetA",
    )


def curve_id_tc26_gost341012_256_paramset_b() -> Curve:
    """id-tc26-gost-3410-12-256-paramSetB."""
    return Curve(
        p=_P_TC26_256_AB,
        q=_h("FFFFFFFFFFFFFFFF FFFFFFFFFFFFFFFF 6C611070995AD100 45841B09B761B893"),
        a=_h("FFFFFFFFFFFFFFFF FFFFFFFFFFFFFFFF FFFFFFFFFFFFFFFF FFFFFFFFFFFFFD94"),
        b=0xA6,
        x=1,
        y=_h("8D91E471E0989CDA 27DF505A453F2B76 35294F2DDF23E3B1 22ACC99C9E9F1E14"),
        name="id-tc26-gost-3410-12-256-paramSetB",
    )


def curve_id_tc26_gost341012_256_paramset_c() -> Curve:
    """id-tc26-gost-3410-12-256-paramSetC."""
    return Curve(
        p=_h("8000000000000000 0000000000000000 0000000000000000 0000000000000C99"),
        q=_h("8000000000000000 0000000000000001 5F700CFFF1A624E5 E497161BCC8A198F"),
        a=_h("8000000000000000 0000000000000000 0000000000000000 0000000000000C96"),
        b=_h("3E1AF419A269A5F8 66A7D3C25C3DF80A E979259373FF2B18 2F49D4CE7E1BBC8B"),
        x=1,
        y=_h("3FA8124359F96680 B83D1C3EB2C070E5 C545C9858D03ECFB 744BF8D717717EFC"),
        name="id-tc26-gost-3410-12-256-paramSetC",
    )


def curve_id_tc26_gost341012_256_paramset_d() -> Curve:
    """id-tc26-gost-3410-12-256-paramSetD."""
    return Curve(
        p=_h("9B9F605F5A858107 AB1EC85E6B41C8AA CF846E86789051D3 7998F7B9022D759B"),
        q=_h("9B9F605F5A858107 AB1EC85E6B41C8AA 582CA3511EDDFB74 F02F3A6598980BB9"),
        a=_h("9B9F605F5A858107 AB1EC85E6B41C8AA CF846E86789051D3 7998F7B9022D7598"),
        b=0x805A,
        x=0,
        y=_h("41ECE55743711A8C 3CBF3783CD08C0EE 4D4DC440D4641A8F 366E550DFDB3BB67"),
        name="id-tc26-gost-3410-12-256-paramSetD",
    )


def _renamed(curve: Curve, name: str) -> Curve:
    curve.name = name
    return curve


def curve_id_gostr34102001_cryptopro_a_paramset() -> Curve:
    """id-GostR3410-2001-CryptoPro-A-ParamSet, same as tc26 256 paramSetB."""
    return _renamed(
        curve_id_tc26_gost341012_256_paramset_b(),
        "id-GostR3410-2001-CryptoPro-A-ParamSet",
    )


def curve_id_gostr34102001_cryptopro_b_paramset() -> Curve:
    """id-GostR3410-2001-CryptoPro-B-ParamSet, same as tc26 256 paramSetC."""
    return _renamed(
        curve_id_tc26_gost341012_256_paramset_c(),
        "id-GostR3410-2001-CryptoPro-B-ParamSet",
    )


def curve_id_gostr34102001_cryptopro_c_paramset() -> Curve:
    """id-GostR3410-2001-CryptoPro-C-ParamSet, same as tc26 256 paramSetD."""
    return _renamed(
        curve_id_tc26_gost341012_256_paramset_d(),
        "id-GostR3410-2001-CryptoPro-C-ParamSet",
    )


def curve_id_gostr34102001_cryptopro_xcha_paramset() -> Curve:
    """id-GostR3410-2001-CryptoPro-XchA-ParamSet, same as CryptoPro-A."""
    return _renamed(
        curve_id_gostr34102001_cryptopro_a_paramset(),
        "id-GostR3410-2001-CryptoPro-XchA-ParamSet",
    )


def curve_id_gostr34102001_cryptopro_xchb_paramset() -> Curve:
    """id-GostR3410-2001-CryptoPro-XchB-ParamSet, same as CryptoPro-C."""
    return _renamed(
        curve_id_gostr34102001_cryptopro_c_paramset(),
        "id-GostR3410-2001-CryptoPro-XchB-ParamSet",
    )


def curve_id_tc26_gost34102012_256_paramset_a() -> Curve:
    """id-tc26-gost-3410-2012-256-paramSetA."""
    return _renamed(
        curve_id_tc26_gost341012_256_paramset_a(),
        "id-tc26-gost-3410-2012-256-paramSetA",
    )


def curve_id_tc26_gost34102012_256_paramset_b() -> Curve:
    """id-tc26-gost-3410-2012-256-paramSetB."""
    return _renamed(
        curve_id_tc26_gost341012_256_paramset_b(),
        "id-tc26-gost-3410-2012-256-paramSetB",
    )


def curve_id_tc26_gost34102012_256_paramset_c() -> Curve:
    """id-tc26-gost-3410-2012-256-paramSetC."""
    return _renamed(
        curve_id_tc26_gost341012_256_paramset_c(),
        "id-tc26-gost-3410-2012-256-paramSetC",
    )


def curve_id_tc26_gost34102012_256_paramset_d() -> Curve:
    """id-tc26-gost-3410-2012-256-paramSetD."""
    return _renamed(
        curve_id_tc26_gost341012_256_paramset_d(),
        "id-tc26-gost-3410-2012-256-paramSetD",
    )


def curve_default() -> Curve:
    """The default curve: id-tc26-gost-3410-12-256-paramSetB."""
    return curve_id_tc26_gost341012_256_paramset_b()