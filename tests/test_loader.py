"""Tests for loading the catalog from a JSON content file."""

import json

import pytest

from portfolio import CatalogError, Category, Project
from portfolio.defaults import DEFAULT_DETAIL_PROJECT, DEFAULT_PROJECTS
from portfolio.loader import catalog_from_records, load_browser, load_catalog

RECORDS = [
    {
        "id": "a", "title": "Churn model", "description": "Who leaves and why",
        "category": "analysis", "image": "img/a.png", "tools": ["Python", "Python", "SQL"],
        "objectives": ["Predict churn"], "methodology": "Gradient boosting",
        "findings": ["Tenure matters"], "conclusion": "Retention up",
        "link": "https://example.com/a", "downloadLink": "/files/a.pdf",
    },
    {"id": "b", "title": "KPI board", "description": "Weekly KPIs", "category": "dashboard", "image": "img/b.png"},
]


def write(tmp_path, payload, name="projects.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestCatalogFromRecords:
    """Tests for record validation."""

    def test_full_record(self):
        """Extended fields and camelCase downloadLink are read."""
        a, b = catalog_from_records(RECORDS)
        assert a.category is Category.ANALYSIS
        assert a.tools == ("Python", "Python", "SQL")
        assert a.download_link == "/files/a.pdf"
        assert a.findings == ("Tenure matters",)
        assert b.objectives == () and b.link is None and b.conclusion == ""

    def test_missing_key(self):
        """Required keys must be present."""
        with pytest.raises(CatalogError, match="category"):
            catalog_from_records([{"id": "x", "title": "t", "description": "d", "image": "i"}])

    def test_bad_category(self):
        """Categories outside the enumeration are rejected."""
        bad = dict(RECORDS[1], category="maps")
        with pytest.raises(CatalogError, match="maps"):
            catalog_from_records([bad])

    def test_duplicate_ids(self):
        """Ids must be unique."""
        with pytest.raises(CatalogError, match="duplicate"):
            catalog_from_records([RECORDS[1], RECORDS[1]])

    def test_non_object_record(self):
        """Every record must be an object."""
        with pytest.raises(CatalogError):
            catalog_from_records([RECORDS[1], "oops"])

    def test_dump_round_trip(self):
        """Content-file dumps (camelCase, no nulls) validate back to the same project."""
        a = catalog_from_records(RECORDS)[0]
        dumped = a.model_dump(by_alias=True, exclude_none=True)
        assert dumped["downloadLink"] == "/files/a.pdf"
        assert Project.model_validate(dumped) == a

    def test_numeric_id_becomes_text(self):
        """Numbered ids from JSON are stored as strings."""
        (p,) = catalog_from_records([dict(RECORDS[1], id=7)])
        assert p.id == "7"

    def test_non_string_title(self):
        """Field types are checked, not just presence."""
        with pytest.raises(CatalogError, match="title"):
            catalog_from_records([dict(RECORDS[1], title={"x": 1})])

    def test_non_list_tools(self):
        """tools must be a list of strings."""
        with pytest.raises(CatalogError, match="tools"):
            catalog_from_records([dict(RECORDS[1], tools=5)])


class TestLoadCatalog:
    """Tests for load_catalog()."""

    def test_list_payload(self, tmp_path):
        """A bare list of projects loads in order."""
        projects = load_catalog(write(tmp_path, RECORDS))
        assert [p.id for p in projects] == ["a", "b"]

    def test_wrapped_payload(self, tmp_path):
        """{"projects": [...]} is accepted too."""
        projects = load_catalog(write(tmp_path, {"projects": RECORDS}))
        assert len(projects) == 2

    def test_missing_file(self, tmp_path):
        """Missing files raise CatalogError naming the path."""
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Malformed JSON raises CatalogError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError, match="invalid JSON"):
            load_catalog(path)

    def test_wrong_shape(self, tmp_path):
        """Objects without a projects list are rejected."""
        with pytest.raises(CatalogError, match="expected a list"):
            load_catalog(write(tmp_path, {"items": RECORDS}))

    def test_record_error_mentions_file(self, tmp_path):
        """Record errors carry the file path."""
        path = write(tmp_path, [dict(RECORDS[1], category="maps")])
        with pytest.raises(CatalogError, match="projects.json"):
            load_catalog(path)

    def test_undecodable_file(self, tmp_path):
        """Bytes that are not UTF-8 raise CatalogError naming the path."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"id": "a", "title": "Caf\xe9"}]')
        with pytest.raises(CatalogError, match="latin1.json"):
            load_catalog(path)

    def test_directory_path(self, tmp_path):
        """A directory is not a catalog file."""
        with pytest.raises(CatalogError, match="cannot read"):
            load_catalog(tmp_path)

    def test_wrong_field_type_in_file(self, tmp_path):
        """Type errors inside the file surface as CatalogError."""
        path = write(tmp_path, [dict(RECORDS[1], tools=5)])
        with pytest.raises(CatalogError, match="projects.json"):
            load_catalog(path)


class TestLoadBrowser:
    """Tests for load_browser()."""

    def test_missing_file_uses_builtin(self, tmp_path):
        """No content file: built-in projects, no error."""
        browser, error = load_browser(tmp_path / "projects.json")
        assert error is None
        assert browser.store.projects == DEFAULT_PROJECTS

    def test_valid_file(self, tmp_path):
        """A valid file backs the browser."""
        browser, error = load_browser(write(tmp_path, RECORDS))
        assert error is None
        assert [p.id for p in browser.visible_projects()] == ["a", "b"]

    @pytest.mark.parametrize("payload", [[dict(RECORDS[1], tools=5)], {"items": []}])
    def test_bad_file_falls_back(self, tmp_path, payload):
        """Unusable content falls back to the built-in projects with the error text."""
        browser, error = load_browser(write(tmp_path, payload))
        assert error and "projects.json" in error
        assert browser.store.projects == DEFAULT_PROJECTS

    def test_default_project_clash_falls_back(self, tmp_path):
        """A catalog entry shadowing the default project's id is a load error, not a crash."""
        clash = dict(RECORDS[1], id=DEFAULT_DETAIL_PROJECT.id)
        browser, error = load_browser(write(tmp_path, [clash]))
        assert error and DEFAULT_DETAIL_PROJECT.id in error
        assert browser.store.projects == DEFAULT_PROJECTS
