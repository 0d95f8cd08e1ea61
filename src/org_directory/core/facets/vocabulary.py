"""Facet vocabulary builder.

Scans the full organization record set once and derives the selectable
values of every facet as explicit, alphabetically sorted trees, plus the
founding-year bounds.
"""

import datetime
import logging
from typing import Dict, Iterable, List, Optional

from ..models.facets import FacetKey, FacetNode, FacetVocabulary, YearRange
from ..models.organization import Organization
from ..parsers.delimited import parse_token, split_delimited

logger = logging.getLogger(__name__)

DEFAULT_MIN_YEAR = 1900

# Nested dicts: segment -> children, built before sorting into FacetNodes
_Tree = Dict[str, "_Tree"]


def default_year_bounds() -> YearRange:
    return YearRange(start=DEFAULT_MIN_YEAR, end=datetime.date.today().year)


def _insert(tree: _Tree, path: tuple) -> None:
    for segment in path:
        tree = tree.setdefault(segment, {})


def _to_nodes(tree: _Tree) -> List[FacetNode]:
    return [FacetNode(name=name, children=_to_nodes(tree[name])) for name in sorted(tree)]


def _tokens(facet: FacetKey, raw: Optional[str]) -> List[str]:
    if raw is None:
        return []
    return split_delimited(raw) if facet.multi_valued else [raw]


def build_vocabulary(
    records: Iterable[Organization],
    default_bounds: Optional[YearRange] = None,
) -> FacetVocabulary:
    """Build the facet vocabulary for ``records``.

    Pure and deterministic: the same records always give a deep-equal
    vocabulary. Malformed tokens contribute fewer levels (or nothing) rather
    than raising.

    Args:
        records: Organization records, in any order.
        default_bounds: Year bounds to use when no record has a founding
            year. Defaults to 1900 through the current year.

    Returns:
        FacetVocabulary with sorted trees for every facet and year bounds.
    """
    trees: Dict[FacetKey, _Tree] = {facet: {} for facet in FacetKey}
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    count = 0

    for record in records:
        count += 1
        for facet in FacetKey:
            for token in _tokens(facet, getattr(record, facet.field_name, None)):
                path = parse_token(facet, token)
                if path:
                    _insert(trees[facet], path)

        year = record.founded_year
        if year is not None:
            min_year = year if min_year is None else min(min_year, year)
            max_year = year if max_year is None else max(max_year, year)

    if min_year is None or max_year is None:
        year_bounds = default_bounds or default_year_bounds()
    else:
        year_bounds = YearRange(start=min_year, end=max_year)

    vocabulary = FacetVocabulary(
        facets={facet: _to_nodes(tree) for facet, tree in trees.items()},
        year_bounds=year_bounds,
    )
    logger.debug(
        "Built vocabulary from %d records: %s, years %d-%d",
        count,
        ", ".join(f"{facet.value}={len(trees[facet])}" for facet in FacetKey),
        year_bounds.start,
        year_bounds.end,
    )
    return vocabulary
