"""GOST 28147-89 block cipher, substitution boxes, and ECB, CFB, CTR and MAC modes."""

__all__ = ["cipher", "modes", "sbox"]