"""Facet vocabulary data models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class FacetKey(str, Enum):
    """A named filterable dimension of the directory."""

    TYPE = "Type"
    AREAS = "Areas of Operation"
    STATUS = "Status"
    VISIBILITY = "Visibility"
    TAGS = "Tags"

    @property
    def field_name(self) -> str:
        """Name of the organization record field backing this facet."""
        return _FIELD_NAMES[self]

    @property
    def hierarchical(self) -> bool:
        return self in (FacetKey.TYPE, FacetKey.AREAS)

    @property
    def multi_valued(self) -> bool:
        return self in (FacetKey.TYPE, FacetKey.AREAS, FacetKey.TAGS)


_FIELD_NAMES = {
    FacetKey.TYPE: "type",
    FacetKey.AREAS: "areas_of_operation",
    FacetKey.STATUS: "status",
    FacetKey.VISIBILITY: "visibility",
    FacetKey.TAGS: "tags",
}


class CheckState(str, Enum):
    """Display state of a facet checkbox."""

    CHECKED = "checked"
    INDETERMINATE = "indeterminate"
    UNCHECKED = "unchecked"


class FacetNode(BaseModel):
    """A node in a facet tree. Leaves have no children."""

    name: str = Field(..., description="Segment name at this level, e.g. 'NGO' or 'Medical'.")
    children: List["FacetNode"] = Field(default_factory=list)

    def child(self, name: str) -> Optional["FacetNode"]:
        for node in self.children:
            if node.name == name:
                return node
        return None


class YearRange(BaseModel):
    """Inclusive founding-year range."""

    start: int
    end: int

    @model_validator(mode="after")
    def order_bounds(self) -> "YearRange":
        if self.start > self.end:
            self.start, self.end = self.end, self.start
        return self

    def contains(self, year: int) -> bool:
        return self.start <= year <= self.end


class FacetVocabulary(BaseModel):
    """Selectable values per facet, derived from the current record set.

    Every facet is stored as a list of root ``FacetNode`` objects. Flat facets
    (Status, Visibility, Tags) are lists of leaves; Type has two levels and
    Areas of Operation up to three. All levels are sorted alphabetically.
    """

    facets: Dict[FacetKey, List[FacetNode]] = Field(
        default_factory=lambda: {key: [] for key in FacetKey}
    )
    year_bounds: YearRange

    def nodes(self, facet: FacetKey) -> List[FacetNode]:
        return self.facets.get(FacetKey(facet), [])

    def find(self, facet: FacetKey, path: tuple) -> Optional[FacetNode]:
        """Walk the tree of ``facet`` along ``path``; None if absent."""
        if not path:
            return None
        level = self.nodes(facet)
        node = None
        for segment in path:
            node = next((n for n in level if n.name == segment), None)
            if node is None:
                return None
            level = node.children
        return node

    def values(self, facet: FacetKey) -> List[str]:
        """Every selectable value-string of ``facet`` in display order."""
        from ..parsers.delimited import format_path

        facet = FacetKey(facet)
        values: List[str] = []

        def walk(nodes: List[FacetNode], prefix: tuple) -> None:
            for node in nodes:
                path = prefix + (node.name,)
                values.append(format_path(facet, path))
                walk(node.children, path)

        walk(self.nodes(facet), ())
        return values

    def as_options(self) -> Dict[str, Any]:
        """Nested plain-data form keyed by facet label.

        ``Type`` maps main -> [subs], ``Areas of Operation`` maps
        main -> {level2: [level3]}, flat facets are sorted lists.
        """
        options: Dict[str, Any] = {}
        for facet in FacetKey:
            nodes = self.nodes(facet)
            if facet is FacetKey.TYPE:
                options[facet.value] = {n.name: [c.name for c in n.children] for n in nodes}
            elif facet is FacetKey.AREAS:
                options[facet.value] = {
                    n.name: {c.name: [g.name for g in c.children] for c in n.children}
                    for n in nodes
                }
            else:
                options[facet.value] = [n.name for n in nodes]
        return options
