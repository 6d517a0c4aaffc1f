# portfolio/views.py: display-ready data for cards, tabs and detail sections
# ---------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from portfolio.models import FILTER_ALL, Category, Project, Section
from portfolio.store import CatalogStore, FilterValue

FILTER_LABELS = {
    FILTER_ALL: "All Projects",
    Category.VISUALIZATION: "Visualization",
    Category.ANALYSIS: "Analysis",
    Category.DASHBOARD: "Dashboards",
}


@dataclass(frozen=True)
class SectionContent:
    heading: Optional[str]
    text: str = ""
    items: Tuple[str, ...] = ()


def card_badges(project: Project, max_tools: int = 2) -> List[str]:
    """Category, the first ``max_tools`` tools, then ``+N`` for the rest."""
    badges = [project.category.value] + list(project.tools[:max_tools])
    extra = len(project.tools) - max_tools
    if extra > 0:
        badges.append(f"+{extra}")
    return badges


def filter_tabs(store: Optional[CatalogStore] = None) -> List[Tuple[FilterValue, str]]:
    """(value, label) per tab; labels carry counts when a store is given."""
    counts = store.counts() if store is not None else {}
    tabs = []
    for value in (FILTER_ALL, *Category):
        label = FILTER_LABELS[value]
        if value in counts:
            label = f"{label} ({counts[value]})"
        tabs.append((value, label))
    return tabs


def section_content(project: Project, section: Section) -> SectionContent:
    section = Section(section)
    if section is Section.OVERVIEW:
        return SectionContent(heading="Objectives", text=project.description, items=project.objectives)
    elif section is Section.METHODOLOGY:
        return SectionContent(heading=None, text=project.methodology)
    elif section is Section.FINDINGS:
        return SectionContent(heading=None, items=project.findings)
    elif section is Section.CONCLUSION:
        return SectionContent(heading=None, text=project.conclusion)
    raise ValueError(f"unhandled section: {section!r}")


def detail_actions(project: Project) -> List[str]:
    actions = []
    if project.link:
        actions.append("View Project")
    if project.download_link:
        actions.append("Download Report")
    actions.append("Share")
    return actions
