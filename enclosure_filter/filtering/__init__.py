"""Enclosure filtering for API responses."""

from .enclosures import FilterEnclosures, filter_enclosures

__all__ = ["FilterEnclosures", "filter_enclosures"]
