"""Component tracking registry."""

__version__ = "0.1.0"
