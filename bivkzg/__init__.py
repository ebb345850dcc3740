"""Bivariate polynomial arithmetic over the BLS12-381 scalar field."""

__version__ = "0.1.0"
__all__ = ["polynomials"]