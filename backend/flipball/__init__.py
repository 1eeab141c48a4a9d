"""Flipball: account ledger and blue-box wagering backend."""

__version__ = "0.1.0"
__author__ = "Flipball Team"

__all__ = ["__version__", "__author__"]
