"""GOST R 34.10-2001/2012 curves, keys, signatures and VKO shared points."""

__all__ = ["curve", "keys", "params_256", "params_512"]