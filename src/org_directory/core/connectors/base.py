"""Base classes for organization data source connectors."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..models.organizations import Organizations


class ConnectorError(Exception):
    """Raised when a data source cannot deliver the organization records."""
    pass


class BaseConnector(ABC):
    """Abstract base class shared by connector implementations.

    A connector delivers one full, unfiltered snapshot of the organizations
    table per call. It does not page, stream or update incrementally.
    """

    @abstractmethod
    def fetch_raw(self) -> List[Dict[str, Any]]:
        """Fetch every organization row as a plain dictionary.

        Raises:
            ConnectorError: If the data source cannot be read.
        """

    def map_to_organizations(self, raw_results: List[Dict[str, Any]]) -> Organizations:
        """Convert raw rows into an ``Organizations`` collection."""
        return Organizations.from_dict(raw_results)

    def fetch_all_organizations(self) -> Organizations:
        """Fetch and validate the full organization record set."""
        return self.map_to_organizations(self.fetch_raw())
