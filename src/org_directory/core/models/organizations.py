"""Organizations collection class."""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError

from .organization import Organization

logger = logging.getLogger(__name__)


class Organizations(BaseModel):
    """A collection of Organization records, in data store order."""

    organizations: List[Organization] = Field(
        default_factory=list,
        description="List of Organization objects"
    )

    def __iter__(self):
        return iter(self.organizations)

    def __len__(self):
        return len(self.organizations)

    def __getitem__(self, index):
        return self.organizations[index]

    def append(self, item: Organization):
        self.organizations.append(item)

    def extend(self, items: List[Organization]):
        self.organizations.extend(items)

    @classmethod
    def from_dict(cls, data: List[Dict[str, Any]]) -> "Organizations":
        """Create Organizations from a list of row dictionaries.

        Rows that are not mappings or fail validation are skipped and logged
        rather than aborting the whole load.
        """
        organizations = []
        for index, item in enumerate(data or []):
            if not isinstance(item, dict):
                logger.warning("Skipping organization row %d: not an object", index)
                continue
            try:
                organizations.append(Organization.from_dict(item))
            except ValidationError as exc:
                logger.warning("Skipping organization row %d: %s", index, exc)
        return cls(organizations=organizations)
