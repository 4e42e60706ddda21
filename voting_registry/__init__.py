"""Single-election voting registry."""

__version__ = "0.1.0"
