"""Hierarchical selection propagation and tri-state checkbox display."""

from typing import List

from ..models.facets import CheckState, FacetKey, FacetNode, FacetVocabulary
from ..models.selection import FilterSelection
from ..parsers.delimited import canonical_value, format_path, parse_value


def get_descendants(vocabulary: FacetVocabulary, facet: FacetKey, value: str) -> List[str]:
    """The value itself followed by every value-string beneath it.

    Descendants come from the vocabulary tree in pre-order, so ``"NGO"`` never
    picks up ``"NGO2/X"``. Values missing from the vocabulary, and values of
    flat facets, have no descendants.
    """
    facet = FacetKey(facet)
    path = parse_value(facet, value)
    node = vocabulary.find(facet, path)
    values = [canonical_value(facet, value) or value]
    if node is None:
        return values

    def walk(children: List[FacetNode], prefix: tuple) -> None:
        for child in children:
            child_path = prefix + (child.name,)
            values.append(format_path(facet, child_path))
            walk(child.children, child_path)

    walk(node.children, path)
    return values


def toggle_selection(
    selection: FilterSelection,
    vocabulary: FacetVocabulary,
    facet: FacetKey,
    value: str,
    propagate: bool = False,
) -> FilterSelection:
    """Toggle ``value`` in ``selection`` and return the new selection.

    With ``propagate`` the value is toggled together with all its
    descendants: if every one of them is already selected they are all
    removed, otherwise the missing ones are added. Without ``propagate`` only
    the single value is toggled.

    Args:
        selection: Current selection. It is not modified.
        vocabulary: Vocabulary used to find descendants.
        facet: Facet the value belongs to.
        value: Value-string that was clicked.
        propagate: True for a parent-level (branch) click.

    Returns:
        A new FilterSelection.
    """
    facet = FacetKey(facet)
    value = canonical_value(facet, value) or value
    current = selection.values(facet)

    if not propagate:
        if value in current:
            return selection.with_values(facet, current - {value})
        return selection.with_values(facet, current | {value})

    group = set(get_descendants(vocabulary, facet, value))
    if group <= current:
        return selection.with_values(facet, current - group)
    return selection.with_values(facet, current | group)


def check_state(
    vocabulary: FacetVocabulary,
    selection: FilterSelection,
    facet: FacetKey,
    value: str,
) -> CheckState:
    """Derive the checkbox state of ``value`` from the selection alone."""
    group = get_descendants(vocabulary, facet, value)
    current = selection.values(facet)
    selected = sum(1 for v in group if v in current)
    if selected == 0:
        return CheckState.UNCHECKED
    if selected == len(group):
        return CheckState.CHECKED
    return CheckState.INDETERMINATE


def reset_selection(vocabulary: FacetVocabulary) -> FilterSelection:
    """Empty selection with the year range set to the vocabulary's bounds."""
    return FilterSelection.empty(vocabulary.year_bounds)
