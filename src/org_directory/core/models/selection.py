"""Filter selection data model."""

from typing import Annotated, Dict, FrozenSet, Iterable, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .facets import FacetKey, YearRange
from .validators import to_frozenset
from ..parsers import delimited


def _canonical(facet: FacetKey, values: Iterable[str]) -> FrozenSet[str]:
    canonical = (delimited.canonical_value(facet, v) for v in values)
    return frozenset(v for v in canonical if v)


def _to_facet_values(value: object) -> Dict[FacetKey, FrozenSet[str]]:
    if not value:
        return {}
    selected = {
        FacetKey(key): _canonical(FacetKey(key), to_frozenset(values))
        for key, values in dict(value).items()
    }
    return {key: values for key, values in selected.items() if values}


class FilterSelection(BaseModel):
    """The user's current filter choices.

    Immutable: every change returns a new selection. Selected values are
    stored in canonical form, so ``"NGO / Legal"`` is kept as ``"NGO/Legal"``.
    ``year_range`` of ``None`` means no year restriction.
    """

    model_config = ConfigDict(frozen=True)

    selected: Annotated[
        Dict[FacetKey, FrozenSet[str]],
        BeforeValidator(_to_facet_values),
    ] = Field(default_factory=dict, description="Selected value-strings per facet.")
    search: str = Field("", description="Free-text search term.")
    year_range: Optional[YearRange] = Field(None, description="Inclusive founding-year range.")

    @classmethod
    def empty(cls, year_bounds: Optional[YearRange] = None) -> "FilterSelection":
        """Reset state: no facet values, no search, full year bounds."""
        return cls(year_range=year_bounds)

    def values(self, facet: FacetKey) -> FrozenSet[str]:
        return self.selected.get(FacetKey(facet), frozenset())

    def with_values(self, facet: FacetKey, values: Iterable[str]) -> "FilterSelection":
        facet = FacetKey(facet)
        selected = dict(self.selected)
        values = _canonical(facet, values)
        if values:
            selected[facet] = values
        else:
            selected.pop(facet, None)
        return self.model_copy(update={"selected": selected})

    def with_search(self, search: Optional[str]) -> "FilterSelection":
        return self.model_copy(update={"search": (search or "").strip()})

    def with_year_range(self, year_range: Optional[YearRange]) -> "FilterSelection":
        return self.model_copy(update={"year_range": year_range})

    @property
    def active_count(self) -> int:
        """Number of selected facet values across all facets."""
        return sum(len(values) for values in self.selected.values())

    @property
    def is_empty(self) -> bool:
        return self.active_count == 0 and not self.search
