"""Feed-reader plugin that filters enclosures from API responses."""

__version__ = "1.0.0"
