"""Filter/query engine over organization records.

AND across facets, OR within a facet. Every function here is total: records
with missing or malformed optional fields either do not contribute to a
facet or pass it, and nothing raises.
"""

import unicodedata
from typing import Iterable, List

from ..models.facets import FacetKey
from ..models.organization import Organization
from ..models.selection import FilterSelection


def _name_key(record: Organization) -> tuple:
    """Sort key approximating a locale-aware name comparison.

    Accents and case are ignored first, then used to order otherwise equal
    names deterministically.
    """
    name = record.name or ""
    folded = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in folded if not unicodedata.combining(ch)).casefold()
    return (base, name.casefold(), name)


def matches_search(record: Organization, search: str) -> bool:
    if not search:
        return True
    return search.lower() in record.search_text()


def matches_facet(record: Organization, facet: FacetKey, selected: frozenset) -> bool:
    """True if ``record`` passes ``facet`` for the selected values.

    An empty selection never restricts. Otherwise at least one of the
    record's canonical value-strings must be selected.
    """
    if not selected:
        return True
    return any(value in selected for value in record.facet_values(facet))


def matches_year(record: Organization, selection: FilterSelection) -> bool:
    if selection.year_range is None or record.founded_year is None:
        return True
    return selection.year_range.contains(record.founded_year)


def matches(record: Organization, selection: FilterSelection) -> bool:
    """True if ``record`` passes search, every facet and the year range."""
    if not matches_search(record, selection.search):
        return False
    for facet in FacetKey:
        if not matches_facet(record, facet, selection.values(facet)):
            return False
    return matches_year(record, selection)


def apply_filters(records: Iterable[Organization], selection: FilterSelection) -> List[Organization]:
    """Return the records passing ``selection``, sorted by name.

    The sort is stable, so records with identical names keep input order.
    """
    return sorted((r for r in records if matches(r, selection)), key=_name_key)
