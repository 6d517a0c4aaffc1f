"""Pytest fixtures for the portfolio catalog tests."""

import pytest

from portfolio import CatalogBrowser, CatalogStore, Category, Project
from portfolio.defaults import DEFAULT_DETAIL_PROJECT

SCENARIO_CATEGORIES = [
    Category.DASHBOARD, Category.ANALYSIS, Category.VISUALIZATION,
    Category.ANALYSIS, Category.DASHBOARD, Category.VISUALIZATION,
]


def make_project(pid, category, **extra):
    fields = dict(
        id=str(pid),
        title=f"Project {pid}",
        description=f"Description {pid}",
        category=category,
        image=f"https://example.com/{pid}.png",
        tools=("Python", "SQL"),
    )
    fields.update(extra)
    return Project(**fields)


@pytest.fixture
def scenario_projects():
    """Six projects, ids 1-6: dashboard, analysis, visualization, analysis, dashboard, visualization."""
    return tuple(make_project(i + 1, c) for i, c in enumerate(SCENARIO_CATEGORIES))


@pytest.fixture
def store(scenario_projects):
    return CatalogStore(scenario_projects)


@pytest.fixture
def default_project():
    return DEFAULT_DETAIL_PROJECT


@pytest.fixture
def browser(scenario_projects):
    return CatalogBrowser(scenario_projects)


@pytest.fixture(name="make_project")
def make_project_fixture():
    return make_project
