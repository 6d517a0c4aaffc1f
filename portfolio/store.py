# portfolio/store.py: canonical project list + the filtered view
# --------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from portfolio.errors import CatalogError, InvalidFilterValue
from portfolio.models import FILTER_ALL, Category, Project

logger = logging.getLogger(__name__)

FilterValue = Union[str, Category]


def parse_filter(value: FilterValue) -> FilterValue:
    """Normalise a filter value to ``FILTER_ALL`` or a Category, or raise InvalidFilterValue."""
    if isinstance(value, Category):
        return value
    if value == FILTER_ALL:
        return FILTER_ALL
    try:
        return Category(value)
    except ValueError:
        raise InvalidFilterValue(value) from None


def filter_projects(projects: Iterable[Project], active_filter: FilterValue) -> Tuple[Project, ...]:
    """Stable filter: keeps catalog order, never re-sorts."""
    if active_filter == FILTER_ALL:
        return tuple(projects)
    return tuple(p for p in projects if p.category == active_filter)


class CatalogStore:
    """Holds the immutable catalog and the active category filter."""

    def __init__(self, projects: Sequence[Project], active_filter: FilterValue = FILTER_ALL):
        self._projects: Tuple[Project, ...] = tuple(projects)
        self._by_id: Dict[str, Project] = {}
        for p in self._projects:
            if p.id in self._by_id:
                raise CatalogError(f"duplicate project id: {p.id!r}")
            self._by_id[p.id] = p
        self._active_filter = parse_filter(active_filter)

    @property
    def projects(self) -> Tuple[Project, ...]:
        return self._projects

    @property
    def active_filter(self) -> FilterValue:
        return self._active_filter

    def set_filter(self, value: FilterValue) -> None:
        """Replace the active filter. Unknown values raise and leave the filter as it was."""
        try:
            parsed = parse_filter(value)
        except InvalidFilterValue:
            logger.warning("Rejected filter value %r; keeping %r", value, self._active_filter)
            raise
        logger.debug("Filter %r -> %r", self._active_filter, parsed)
        self._active_filter = parsed

    def visible_projects(self) -> Tuple[Project, ...]:
        return filter_projects(self._projects, self._active_filter)

    def get(self, project_id: str) -> Optional[Project]:
        return self._by_id.get(str(project_id)) if project_id is not None else None

    def __contains__(self, project_id) -> bool:
        return self.get(project_id) is not None

    def __len__(self) -> int:
        return len(self._projects)

    def counts(self) -> Dict[FilterValue, int]:
        """Number of projects behind each filter tab."""
        out: Dict[FilterValue, int] = {FILTER_ALL: len(self._projects)}
        for c in Category:
            out[c] = sum(1 for p in self._projects if p.category == c)
        return out

    def next_visible_id(self, project_id: Optional[str]) -> Optional[str]:
        """Id after ``project_id`` in the visible order (wraps). First visible id if it isn't visible."""
        ids = [p.id for p in self.visible_projects()]
        if not ids:
            return None
        if project_id not in ids:
            return ids[0]
        return ids[(ids.index(project_id) + 1) % len(ids)]
