"""Offline viewer for tldr command pages."""

__version__ = "0.1.0"
