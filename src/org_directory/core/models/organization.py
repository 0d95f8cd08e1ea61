"""Organization data model for the directory."""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from .facets import FacetKey
from .validators import to_str, to_delimited, to_text, to_year, empty_to_none, normalize
from ..parsers import delimited

OptionalText = Optional[
    Annotated[
        str,
        BeforeValidator(to_str),
        AfterValidator(empty_to_none),
        AfterValidator(normalize),
    ]
]

DelimitedText = Optional[
    Annotated[
        str,
        BeforeValidator(to_delimited),
        AfterValidator(empty_to_none),
        AfterValidator(normalize),
    ]
]

# Descriptive columns are passed through as stored
PlainText = Optional[
    Annotated[
        str,
        BeforeValidator(to_text),
        AfterValidator(empty_to_none),
    ]
]


class Organization(BaseModel):
    """A row of the organizations table.

    Only the facet fields are interpreted; any other column the data store
    returns is kept as an extra attribute and passed through untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Annotated[str, BeforeValidator(to_str), AfterValidator(empty_to_none)]] = Field(
        None, description="Unique identifier."
    )
    name: OptionalText = Field(None, description="Display name.")
    type: DelimitedText = Field(
        None, description="Comma-separated types, each optionally 'Main/Sub'."
    )
    areas_of_operation: DelimitedText = Field(
        None, description="Comma-separated areas, each optionally 'Main/Level2 (Level3)'."
    )
    status: OptionalText = Field(None, description="Single status value.")
    visibility: OptionalText = Field(
        None, description="Single visibility value, optionally with a '(...)' annotation."
    )
    tags: DelimitedText = Field(None, description="Comma-separated flat tag list.")
    founded_year: Annotated[Optional[int], BeforeValidator(to_year)] = Field(
        None, description="Year the organization was founded."
    )
    description_english: PlainText = Field(None, description="English description.")
    email: PlainText = None
    phone: PlainText = None
    website: PlainText = None

    def facet_values(self, facet: FacetKey) -> List[str]:
        """Canonical value-strings this record contributes to ``facet``."""
        facet = FacetKey(facet)
        return delimited.record_values(facet, getattr(self, facet.field_name))

    def type_values(self) -> List[str]:
        return self.facet_values(FacetKey.TYPE)

    def area_values(self) -> List[str]:
        return self.facet_values(FacetKey.AREAS)

    def tag_values(self) -> List[str]:
        return self.facet_values(FacetKey.TAGS)

    def status_value(self) -> Optional[str]:
        values = self.facet_values(FacetKey.STATUS)
        return values[0] if values else None

    def visibility_value(self) -> Optional[str]:
        values = self.facet_values(FacetKey.VISIBILITY)
        return values[0] if values else None

    def search_text(self) -> str:
        """Lower-cased haystack for free-text search."""
        parts = [self.name, self.description_english, self.type, self.tags]
        return " ".join(part for part in parts if part).lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Organization":
        return cls.model_validate(data)
