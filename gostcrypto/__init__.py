"""GOST 28147-89 block cipher and GOST R 34.10 signatures and key agreement."""

__version__ = "0.1.0"