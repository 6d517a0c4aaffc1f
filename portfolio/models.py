# portfolio/models.py: catalog entries and the closed enumerations
# ----------------------------------------------------------------

from __future__ import annotations
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

FILTER_ALL = "all"


class Category(str, Enum):
    VISUALIZATION = "visualization"
    ANALYSIS = "analysis"
    DASHBOARD = "dashboard"


class Section(str, Enum):
    """Tabs of the detail view, in display order."""
    OVERVIEW = "overview"
    METHODOLOGY = "methodology"
    FINDINGS = "findings"
    CONCLUSION = "conclusion"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Project(BaseModel):
    """Catalog entry. Content files use camelCase ``downloadLink``; Python code uses ``download_link``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str
    category: Category
    image: str
    tools: Tuple[str, ...] = ()
    # detail view only
    objectives: Tuple[str, ...] = ()
    methodology: str = ""
    findings: Tuple[str, ...] = ()
    conclusion: str = ""
    link: Optional[str] = None
    download_link: Optional[str] = Field(None, alias="downloadLink")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v: Any) -> Any:
        # JSON content often numbers its projects
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v
