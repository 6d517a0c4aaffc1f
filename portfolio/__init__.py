"""Project catalog browser: filterable gallery state + detail-view state machine."""

from portfolio.browser import CatalogBrowser
from portfolio.errors import CatalogError, InvalidFilterValue, PortfolioError
from portfolio.models import FILTER_ALL, Category, Project, Section
from portfolio.selection import SelectionState
from portfolio.store import CatalogStore

__all__ = [
    "CatalogBrowser", "CatalogStore", "SelectionState",
    "Project", "Category", "Section", "FILTER_ALL",
    "PortfolioError", "InvalidFilterValue", "CatalogError",
]
