"""LureDB - search historical lure colors and models."""

__version__ = "0.3.0"
