"""Radio Data System helpers: block fields, AF sets, clock time, countries and station state."""

__version__ = "0.1.0"
__all__ = ["af", "blocks", "buffer", "clock", "country", "ecc"]