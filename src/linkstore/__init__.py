"""linkstore — per-user link storage over a SQL backend."""

__version__ = "0.1.0"
