"""Gudang: input validation for the spare-parts warehouse backend."""

__version__ = "0.1.0"
