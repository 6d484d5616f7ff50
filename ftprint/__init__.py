"""A minimal printf-style formatter: per-value conversions and printf/render."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]