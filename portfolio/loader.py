# portfolio/loader.py: external catalog input (JSON content file)
# ----------------------------------------------------------------

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Set, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from portfolio.browser import CatalogBrowser
from portfolio.defaults import DEFAULT_PROJECTS
from portfolio.errors import CatalogError
from portfolio.models import Project

logger = logging.getLogger(__name__)

_PROJECTS = TypeAdapter(list[Project])


def catalog_from_records(records: Iterable[Any]) -> Tuple[Project, ...]:
    """Validate parsed records into an ordered tuple of Projects with unique ids."""
    try:
        projects = _PROJECTS.validate_python(list(records))
    except ValidationError as exc:
        raise CatalogError(f"invalid project records: {exc}") from exc
    seen: Set[str] = set()
    for p in projects:
        if p.id in seen:
            raise CatalogError(f"duplicate project id: {p.id!r}")
        seen.add(p.id)
    return tuple(projects)


def load_catalog(path: Union[str, Path]) -> Tuple[Project, ...]:
    """Read ``[{...}, ...]`` or ``{"projects": [{...}, ...]}`` from a JSON file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CatalogError(f"catalog file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"{path}: cannot read catalog ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"{path}: invalid JSON ({exc})") from exc

    if isinstance(raw, dict):
        raw = raw.get("projects")
    if not isinstance(raw, list):
        raise CatalogError(f"{path}: expected a list of projects")

    try:
        projects = catalog_from_records(raw)
    except CatalogError as exc:
        raise CatalogError(f"{path}: {exc}") from exc
    logger.info("Loaded %d projects from %s", len(projects), path)
    return projects


def load_browser(path: Optional[Union[str, Path]],
                 fallback: Sequence[Project] = DEFAULT_PROJECTS) -> Tuple[CatalogBrowser, Optional[str]]:
    """Browser over the catalog file, or over ``fallback`` plus the error text when the file is unusable.

    A missing file is not an error: the site simply runs on ``fallback``.
    """
    if path is None or not Path(path).exists():
        return CatalogBrowser(fallback), None
    try:
        return CatalogBrowser(load_catalog(path)), None
    except CatalogError as exc:
        logger.error("Falling back to built-in projects: %s", exc)
        return CatalogBrowser(fallback), str(exc)
