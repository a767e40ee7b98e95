"""Bit-exact double-precision math routines and small C runtime helpers."""

__version__ = "0.1.0"