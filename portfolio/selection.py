# portfolio/selection.py: which project is open + which detail section is shown
# -----------------------------------------------------------------------------
# Reducer: SelectionState is immutable and every transition returns a new state.
#
#   Closed --open(id)--> Open(id, overview)
#   Open   --open(id')-> Open(id', overview)
#   Open   --select_section(s)--> Open(id, s)
#   Open   --close()--> Closed

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from portfolio.models import Project, Section
from portfolio.store import CatalogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    selected_project_id: Optional[str] = None
    is_detail_open: bool = False
    active_section: Section = Section.OVERVIEW


CLOSED = SelectionState()


def resolve(project_id: Optional[str], store: CatalogStore, default_project: Project) -> Project:
    """Total lookup: the catalog project with ``project_id``, otherwise ``default_project``."""
    project = store.get(project_id)
    if project is not None:
        return project
    if project_id is not None and str(project_id) == default_project.id:
        return default_project
    logger.warning("Project %r not in catalog; showing default project %r", project_id, default_project.id)
    return default_project


def open_project(state: SelectionState, project_id: Optional[str], store: CatalogStore,
                 default_project: Project) -> SelectionState:
    project = resolve(project_id, store, default_project)
    logger.debug("Open project %r (was %r)", project.id, state.selected_project_id)
    return SelectionState(selected_project_id=project.id, is_detail_open=True,
                          active_section=Section.OVERVIEW)


def select_section(state: SelectionState, section: Union[Section, str]) -> SelectionState:
    section = Section(section)
    if not state.is_detail_open or section == state.active_section:
        return state
    return replace(state, active_section=section)


def close(state: SelectionState) -> SelectionState:
    if state.is_detail_open:
        logger.debug("Close project %r", state.selected_project_id)
    return CLOSED
