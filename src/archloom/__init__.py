"""Archloom — C4-style architecture model: elements, tags, relationships."""

__version__ = "0.3.0"
