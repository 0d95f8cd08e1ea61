"""Per-view state for browsing the organization directory.

A ``DirectoryView`` owns the records fetched for one view, the vocabulary
built from them and the current selection. Filtering itself is delegated
to the pure functions in ``core.facets``; the view only swaps in the new
selection each engine call returns.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future
from typing import List, Optional

from org_directory.core.connectors import BaseConnector
from org_directory.core.facets import (
    apply_filters,
    build_vocabulary,
    check_state,
    reset_selection,
    toggle_selection,
)
from org_directory.core.models import (
    CheckState,
    FacetKey,
    FacetVocabulary,
    FilterSelection,
    Organization,
    Organizations,
    YearRange,
)

logger = logging.getLogger(__name__)


class DirectoryView:
    """Records, vocabulary and selection for one directory view."""

    def __init__(self, connector: BaseConnector) -> None:
        self.connector = connector
        self.records: List[Organization] = []
        self.vocabulary: FacetVocabulary = build_vocabulary([])
        self.selection: FilterSelection = reset_selection(self.vocabulary)
        self.loaded = False
        self.closed = False
        self._generation = 0
        self._lock = threading.Lock()

    def load(self) -> List[Organization]:
        """Fetch records synchronously and return the initial unfiltered results."""
        token = self._begin_load()
        organizations = self.connector.fetch_all_organizations()
        self._apply_loaded(token, organizations)
        return self.results()

    def load_async(self, executor: Executor) -> Future:
        """Fetch records on ``executor``.

        The returned future resolves to True if the records were applied, or
        False if the view was closed or reloaded while the fetch was in
        flight. Fetch errors propagate through the future.
        """
        token = self._begin_load()

        def _worker() -> bool:
            organizations = self.connector.fetch_all_organizations()
            return self._apply_loaded(token, organizations)

        return executor.submit(_worker)

    def close(self) -> None:
        """Tear the view down; results of in-flight fetches are discarded."""
        with self._lock:
            self.closed = True
            self._generation += 1

    def _begin_load(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def _apply_loaded(self, token: int, organizations: Organizations) -> bool:
        with self._lock:
            if self.closed or token != self._generation:
                logger.info("Discarding stale organization fetch (load %d)", token)
                return False
            self.records = list(organizations)
            self.vocabulary = build_vocabulary(self.records)
            self.selection = reset_selection(self.vocabulary)
            self.loaded = True
        logger.info("Loaded %d organizations", len(self.records))
        return True

    def results(self) -> List[Organization]:
        return apply_filters(self.records, self.selection)

    def toggle(self, facet: FacetKey, value: str, propagate: bool = False) -> FilterSelection:
        self.selection = toggle_selection(self.selection, self.vocabulary, facet, value, propagate)
        return self.selection

    def set_search(self, search: Optional[str]) -> FilterSelection:
        self.selection = self.selection.with_search(search)
        return self.selection

    def set_year_range(self, start: int, end: int) -> FilterSelection:
        self.selection = self.selection.with_year_range(YearRange(start=start, end=end))
        return self.selection

    def reset(self) -> FilterSelection:
        self.selection = reset_selection(self.vocabulary)
        return self.selection

    def check_state(self, facet: FacetKey, value: str) -> CheckState:
        return check_state(self.vocabulary, self.selection, facet, value)
