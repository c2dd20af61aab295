"""Terminal snake on a 10x10 wrapping board."""

__version__ = "0.1.0"
