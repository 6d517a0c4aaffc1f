"""Tests for the selection/detail reducer."""

import logging

import pytest

from portfolio import Section, SelectionState
from portfolio.selection import CLOSED, close, open_project, resolve, select_section


class TestResolve:
    """Tests for resolve()."""

    def test_known_id(self, store, default_project):
        """Catalog ids resolve to their project."""
        assert resolve("3", store, default_project) is store.get("3")

    @pytest.mark.parametrize("pid", ["nonexistent-id", "", None, "7"])
    def test_unknown_id_falls_back(self, store, default_project, pid):
        """Unknown ids resolve to the default project, never None."""
        assert resolve(pid, store, default_project) is default_project

    def test_fallback_is_logged(self, store, default_project, caplog):
        """Falling back is a warning, not an exception."""
        with caplog.at_level(logging.WARNING, logger="portfolio.selection"):
            resolve("ghost", store, default_project)
        assert "ghost" in caplog.text

    def test_default_id_resolves_to_default(self, store, default_project):
        """The default project's own id resolves without a warning path."""
        assert resolve(default_project.id, store, default_project) is default_project


class TestTransitions:
    """Tests for open/select_section/close."""

    def test_initial_state_closed(self):
        """Closed: no selection, detail not open."""
        assert CLOSED == SelectionState()
        assert CLOSED.selected_project_id is None
        assert CLOSED.is_detail_open is False
        assert CLOSED.active_section is Section.OVERVIEW

    def test_scenario_b(self, store, default_project):
        """open(3), select findings, open(5) resets to overview."""
        s = open_project(CLOSED, "3", store, default_project)
        assert (s.selected_project_id, s.is_detail_open, s.active_section) == ("3", True, Section.OVERVIEW)
        s = select_section(s, Section.FINDINGS)
        assert s.active_section is Section.FINDINGS
        assert s.selected_project_id == "3"
        s = open_project(s, "5", store, default_project)
        assert s.selected_project_id == "5"
        assert s.active_section is Section.OVERVIEW

    @pytest.mark.parametrize("section", list(Section))
    def test_open_resets_section(self, store, default_project, section):
        """Whatever section was active, open() lands on overview."""
        s = select_section(open_project(CLOSED, "1", store, default_project), section)
        for pid in ("1", "2", "missing"):
            assert open_project(s, pid, store, default_project).active_section is Section.OVERVIEW

    def test_open_unknown_uses_default(self, store, default_project):
        """open('nonexistent-id') enters Open on the default project."""
        s = open_project(CLOSED, "nonexistent-id", store, default_project)
        assert s.is_detail_open
        assert s.selected_project_id == default_project.id

    def test_select_section_same_is_noop(self, store, default_project):
        """Selecting the active section returns the very same state."""
        s = open_project(CLOSED, "2", store, default_project)
        assert select_section(s, Section.OVERVIEW) is s

    def test_select_section_when_closed_is_noop(self):
        """Section changes are ignored while closed."""
        assert select_section(CLOSED, Section.CONCLUSION) is CLOSED

    def test_select_section_accepts_string(self, store, default_project):
        """Section string values are accepted."""
        s = open_project(CLOSED, "2", store, default_project)
        assert select_section(s, "methodology").active_section is Section.METHODOLOGY

    def test_select_section_unknown_rejected(self, store, default_project):
        """The section enumeration is closed."""
        s = open_project(CLOSED, "2", store, default_project)
        with pytest.raises(ValueError):
            select_section(s, "appendix")

    @pytest.mark.parametrize("section", list(Section))
    def test_close_clears_selection(self, store, default_project, section):
        """close() always returns to Closed with overview reset."""
        s = select_section(open_project(CLOSED, "4", store, default_project), section)
        closed = close(s)
        assert closed.selected_project_id is None
        assert closed.is_detail_open is False
        assert closed.active_section is Section.OVERVIEW

    def test_close_when_closed(self):
        """Closing twice is harmless."""
        assert close(close(CLOSED)) == CLOSED

    def test_scenario_c(self, store, default_project):
        """After close, open(5) starts at overview again."""
        s = select_section(open_project(CLOSED, "5", store, default_project), Section.CONCLUSION)
        s = close(s)
        assert s == CLOSED
        s = open_project(s, "5", store, default_project)
        assert s.active_section is Section.OVERVIEW

    def test_states_are_immutable(self, store, default_project):
        """Transitions never mutate the input state."""
        s = open_project(CLOSED, "1", store, default_project)
        select_section(s, Section.FINDINGS)
        close(s)
        assert s.active_section is Section.OVERVIEW and s.is_detail_open
