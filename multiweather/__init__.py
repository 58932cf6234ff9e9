"""Average current temperatures reported by several weather providers."""

__version__ = "0.1.0"
