"""Org Directory - Facet vocabulary and filtering for an organization directory."""

from .core.models import (
    CheckState,
    FacetKey,
    FacetNode,
    FacetVocabulary,
    FilterSelection,
    Organization,
    Organizations,
    YearRange,
)
from .core.facets import (
    apply_filters,
    build_vocabulary,
    check_state,
    get_descendants,
    reset_selection,
    toggle_selection,
)
from .core.connectors import (
    BaseConnector,
    ConnectorError,
    ConnectorFactory,
    JsonFileConnector,
    SupabaseConnector,
)
from .pipelines.directory_view import DirectoryView

__version__ = "0.1.0"

__all__ = [
    "CheckState",
    "FacetKey",
    "FacetNode",
    "FacetVocabulary",
    "FilterSelection",
    "Organization",
    "Organizations",
    "YearRange",
    "apply_filters",
    "build_vocabulary",
    "check_state",
    "get_descendants",
    "reset_selection",
    "toggle_selection",
    "BaseConnector",
    "ConnectorError",
    "ConnectorFactory",
    "JsonFileConnector",
    "SupabaseConnector",
    "DirectoryView",
]
