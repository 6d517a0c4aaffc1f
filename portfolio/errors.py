"""Exceptions raised by the portfolio catalog core."""

from __future__ import annotations
from typing import Any


class PortfolioError(Exception):
    """Base class for catalog browser errors."""


class InvalidFilterValue(PortfolioError, ValueError):
    """A filter outside ``all`` plus the category enumeration was requested."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"invalid filter value: {value!r}")


class CatalogError(PortfolioError, ValueError):
    """The supplied catalog content is malformed."""
