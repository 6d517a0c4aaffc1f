# portfolio/browser.py: the object the UI keeps in session state
# --------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Optional, Sequence, Tuple, Union

from portfolio import selection
from portfolio.defaults import DEFAULT_DETAIL_PROJECT
from portfolio.errors import CatalogError, InvalidFilterValue
from portfolio.models import Project, Section
from portfolio.selection import SelectionState
from portfolio.store import CatalogStore, FilterValue

logger = logging.getLogger(__name__)


class CatalogBrowser:
    """Catalog store + selection state behind the four inbound UI events.

    ``set_filter``, ``open``, ``select_section`` and ``close`` are the whole
    mutating surface. Everything else is read-only output for rendering.
    """

    def __init__(self, projects: Sequence[Project], default_project: Project = DEFAULT_DETAIL_PROJECT):
        self.store = CatalogStore(projects)
        clash = self.store.get(default_project.id)
        if clash is not None and clash != default_project:
            raise CatalogError(f"default project id {default_project.id!r} collides with a catalog project")
        self.default_project = default_project
        self._selection: SelectionState = selection.CLOSED

    # -- outputs --------------------------------------------------------
    @property
    def active_filter(self) -> FilterValue:
        return self.store.active_filter

    @property
    def selection(self) -> SelectionState:
        return self._selection

    def visible_projects(self) -> Tuple[Project, ...]:
        return self.store.visible_projects()

    def current_project(self) -> Optional[Project]:
        if not self._selection.is_detail_open:
            return None
        return selection.resolve(self._selection.selected_project_id, self.store, self.default_project)

    # -- events ---------------------------------------------------------
    def set_filter(self, value: FilterValue) -> bool:
        """False (and no state change) when ``value`` is not a known filter."""
        try:
            self.store.set_filter(value)
        except InvalidFilterValue:
            return False
        return True

    def open(self, project_id: Optional[str]) -> Project:
        self._selection = selection.open_project(self._selection, project_id, self.store, self.default_project)
        return self.current_project()

    def select_section(self, section: Union[Section, str]) -> SelectionState:
        self._selection = selection.select_section(self._selection, section)
        return self._selection

    def close(self) -> SelectionState:
        self._selection = selection.close(self._selection)
        return self._selection

    def open_next(self) -> Optional[Project]:
        """Open the project after the current one in the visible order."""
        next_id = self.store.next_visible_id(self._selection.selected_project_id)
        if next_id is None:
            return None
        return self.open(next_id)
