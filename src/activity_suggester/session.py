"""Per-session state: the catalog, the filter selection and derived results."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from .filters import apply_filters
from .models import DEFAULT_FILTERS, Activity, FilterSelection
from .preferences import FilterStore
from .selection import RandomSource, pick_random
from .stats import ActivityStats, compute_stats, option_counts

logger = logging.getLogger(__name__)


class SuggestionSession:
    """Own the catalog and filters of one user session.

    The filtered list is computed on demand and cached until either the
    catalog or the filter selection changes.
    """

    def __init__(
        self,
        catalog: Iterable[Activity] = (),
        filters: Optional[FilterSelection] = None,
        store: Optional[FilterStore] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._store = store
        self._catalog: tuple[Activity, ...] = tuple(catalog)
        if filters is None:
            filters = store.load() if store is not None else DEFAULT_FILTERS
        self._filters = filters
        self._filtered: Optional[list[Activity]] = None
        self._current: Optional[Activity] = None

    @property
    def catalog(self) -> tuple[Activity, ...]:
        return self._catalog

    @property
    def filters(self) -> FilterSelection:
        return self._filters

    @property
    def current_activity(self) -> Optional[Activity]:
        return self._current

    @property
    def filtered_activities(self) -> list[Activity]:
        with self._lock:
            if self._filtered is None:
                self._filtered = apply_filters(self._catalog, self._filters)
            return list(self._filtered)

    def replace_catalog(self, activities: Iterable[Activity]) -> None:
        with self._lock:
            self._catalog = tuple(activities)
            self._filtered = None
            self._current = None
        logger.debug("Catalog replaced with %d activities", len(self._catalog))

    def set_filters(self, selection: FilterSelection) -> FilterSelection:
        with self._lock:
            if selection != self._filters:
                self._filters = selection
                self._filtered = None
            if self._store is not None:
                self._store.save(selection)
        return selection

    def update_filters(
        self, *, duration: Optional[str] = None, category: Optional[str] = None
    ) -> FilterSelection:
        """Change one or both filter dimensions; raises ``ValueError`` on bad values."""
        with self._lock:
            return self.set_filters(
                self._filters.replace(duration=duration, category=category)
            )

    def reset_filters(self) -> FilterSelection:
        return self.set_filters(DEFAULT_FILTERS)

    def suggest(self, random_source: Optional[RandomSource] = None) -> Optional[Activity]:
        """Pick a random activity matching the current filters."""
        with self._lock:
            activity = pick_random(self.filtered_activities, random_source)
            self._current = activity
        return activity

    def stats(self, *, filtered: bool = False) -> ActivityStats:
        return compute_stats(self.filtered_activities if filtered else self._catalog)

    def option_counts(self) -> dict[str, dict[str, int]]:
        return option_counts(self._catalog)
