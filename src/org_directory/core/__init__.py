"""Core functionality for the organization directory."""

from . import models
from . import parsers
from . import facets
from . import connectors

__all__ = ["models", "parsers", "facets", "connectors"]
