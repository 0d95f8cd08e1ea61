"""Pipelines tying connectors to the facet engine."""

from .directory_view import DirectoryView

__all__ = ["DirectoryView"]
