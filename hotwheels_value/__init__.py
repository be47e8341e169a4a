"""Hot Wheels market value service."""

__version__ = "0.1.0"
