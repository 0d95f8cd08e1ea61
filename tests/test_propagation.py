"""Tests for hierarchical selection propagation and tri-state display."""

import pytest

from org_directory.core.facets import (
    build_vocabulary,
    check_state,
    get_descendants,
    reset_selection,
    toggle_selection,
)
from org_directory.core.models import CheckState, FacetKey, FilterSelection, Organization


class TestGetDescendants:
    """Tests for get_descendants."""

    def test_type_branch(self, scenario_records):
        vocabulary = build_vocabulary(scenario_records)

        assert get_descendants(vocabulary, FacetKey.TYPE, "NGO") == ["NGO", "NGO/Legal", "NGO/Medical"]

    def test_area_main(self, directory_vocabulary):
        assert get_descendants(directory_vocabulary, FacetKey.AREAS, "Sudan") == [
            "Sudan",
            "Sudan/Darfur",
            "Sudan/Darfur (North)",
            "Sudan/Darfur (South)",
            "Sudan/Khartoum",
        ]

    def test_area_level2(self, directory_vocabulary):
        assert get_descendants(directory_vocabulary, FacetKey.AREAS, "Sudan / Darfur") == [
            "Sudan/Darfur",
            "Sudan/Darfur (North)",
            "Sudan/Darfur (South)",
        ]

    def test_leaf_and_unknown_values(self, directory_vocabulary):
        assert get_descendants(directory_vocabulary, FacetKey.AREAS, "Sudan/Darfur (North)") == ["Sudan/Darfur (North)"]
        assert get_descendants(directory_vocabulary, FacetKey.TYPE, "Unknown") == ["Unknown"]
        assert get_descendants(directory_vocabulary, FacetKey.TAGS, "health") == ["health"]

    def test_no_prefix_collisions(self):
        vocabulary = build_vocabulary([
            Organization(type="NGO/Legal"),
            Organization(type="NGO2/X"),
        ])

        assert get_descendants(vocabulary, FacetKey.TYPE, "NGO") == ["NGO", "NGO/Legal"]


class TestToggleSelection:
    """Tests for toggle_selection."""

    def test_leaf_toggle(self, directory_vocabulary):
        selection = toggle_selection(FilterSelection(), directory_vocabulary, FacetKey.TAGS, "health")
        assert selection.values(FacetKey.TAGS) == {"health"}

        selection = toggle_selection(selection, directory_vocabulary, FacetKey.TAGS, "health")
        assert selection.values(FacetKey.TAGS) == frozenset()

    def test_leaf_toggle_ignores_descendants(self, directory_vocabulary):
        selection = toggle_selection(FilterSelection(), directory_vocabulary, FacetKey.TYPE, "NGO")

        assert selection.values(FacetKey.TYPE) == {"NGO"}

    def test_spaced_leaf_toggle(self, directory_vocabulary):
        """Test a leaf clicked with extra spacing toggles its canonical value."""
        selection = toggle_selection(FilterSelection(), directory_vocabulary, FacetKey.TYPE, "NGO / Legal")

        assert selection.values(FacetKey.TYPE) == {"NGO/Legal"}
        assert check_state(directory_vocabulary, selection, FacetKey.TYPE, "NGO/Legal") is CheckState.CHECKED
        assert check_state(directory_vocabulary, selection, FacetKey.TYPE, "NGO / Legal") is CheckState.CHECKED

        selection = toggle_selection(selection, directory_vocabulary, FacetKey.TYPE, "NGO / Legal")
        assert selection.values(FacetKey.TYPE) == frozenset()

    def test_partial_branch_becomes_fully_selected(self, directory_vocabulary):
        start = FilterSelection(selected={"Areas of Operation": ["Sudan/Darfur (North)"]})
        selection = toggle_selection(start, directory_vocabulary, FacetKey.AREAS, "Sudan/Darfur", propagate=True)

        assert selection.values(FacetKey.AREAS) == {
            "Sudan/Darfur",
            "Sudan/Darfur (North)",
            "Sudan/Darfur (South)",
        }

    def test_full_branch_is_removed(self, directory_vocabulary):
        start = FilterSelection(selected={"Areas of Operation": [
            "Chad",
            "Sudan/Darfur",
            "Sudan/Darfur (North)",
            "Sudan/Darfur (South)",
        ]})
        selection = toggle_selection(start, directory_vocabulary, FacetKey.AREAS, "Sudan/Darfur", propagate=True)

        assert selection.values(FacetKey.AREAS) == {"Chad"}

    @pytest.mark.parametrize("value", ["Sudan", "Sudan/Darfur", "Chad", "Sudan/Darfur (South)"])
    def test_double_click_restores_selection(self, directory_vocabulary, value):
        """Test two identical branch clicks return to the starting selection."""
        empty = FilterSelection(selected={"Tags": ["health"]})
        full = toggle_selection(empty, directory_vocabulary, FacetKey.AREAS, value, propagate=True)

        once = toggle_selection(full, directory_vocabulary, FacetKey.AREAS, value, propagate=True)
        twice = toggle_selection(once, directory_vocabulary, FacetKey.AREAS, value, propagate=True)

        assert once == empty
        assert twice == full

    def test_input_is_not_mutated(self, directory_vocabulary):
        start = FilterSelection(selected={"Type": ["NGO/Legal"]})
        toggle_selection(start, directory_vocabulary, FacetKey.TYPE, "NGO", propagate=True)

        assert start.values(FacetKey.TYPE) == {"NGO/Legal"}

    def test_other_facets_untouched(self, directory_vocabulary):
        start = FilterSelection(selected={"Tags": ["health"]}, search="relief")
        selection = toggle_selection(start, directory_vocabulary, FacetKey.TYPE, "NGO", propagate=True)

        assert selection.values(FacetKey.TAGS) == {"health"}
        assert selection.search == "relief"


class TestCheckState:
    """Tests for tri-state display derived from the selection."""

    def test_none_some_all(self, directory_vocabulary):
        none = FilterSelection()
        some = FilterSelection(selected={"Areas of Operation": ["Sudan/Darfur (North)"]})
        every = toggle_selection(none, directory_vocabulary, FacetKey.AREAS, "Sudan/Darfur", propagate=True)

        assert check_state(directory_vocabulary, none, FacetKey.AREAS, "Sudan/Darfur") is CheckState.UNCHECKED
        assert check_state(directory_vocabulary, some, FacetKey.AREAS, "Sudan/Darfur") is CheckState.INDETERMINATE
        assert check_state(directory_vocabulary, every, FacetKey.AREAS, "Sudan/Darfur") is CheckState.CHECKED

    def test_parent_of_fully_selected_child_is_indeterminate(self, directory_vocabulary):
        selection = toggle_selection(FilterSelection(), directory_vocabulary, FacetKey.AREAS, "Sudan/Darfur", propagate=True)

        assert check_state(directory_vocabulary, selection, FacetKey.AREAS, "Sudan") is CheckState.INDETERMINATE

    def test_leaf(self, directory_vocabulary):
        selection = FilterSelection(selected={"Tags": ["health"]})

        assert check_state(directory_vocabulary, selection, FacetKey.TAGS, "health") is CheckState.CHECKED
        assert check_state(directory_vocabulary, selection, FacetKey.TAGS, "legal") is CheckState.UNCHECKED


class TestResetSelection:
    """Tests for reset_selection."""

    def test_reset_uses_full_bounds(self, directory_vocabulary):
        selection = reset_selection(directory_vocabulary)

        assert selection.is_empty
        assert selection.year_range == directory_vocabulary.year_bounds
