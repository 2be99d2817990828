"""Tests for demonlist.ui.models – rows, details and editor panel models."""

from __future__ import annotations

import pytest

from demonlist.core.levels import Editor, Failed, Level, Loaded, Record, Role
from demonlist.core.session import ListSession
from demonlist.ui.models import (
    FREE_TO_COPY,
    ROLE_ICONS,
    build_details,
    build_editor_rows,
    build_rows,
)


def _level(level_id: int, name: str, **kwargs) -> Level:
    fields = dict(
        id=level_id,
        name=name,
        author="Author",
        creators=[],
        verifier="Verifier",
        percent_to_qualify=55,
    )
    fields.update(kwargs)
    return Level(**fields)


def _session_with_ranks(count: int) -> ListSession:
    return ListSession([Loaded(_level(i, f"Level {i}")) for i in range(1, count + 1)])


# ===========================================================================
# build_rows
# ===========================================================================

class TestBuildRows:
    def test_rows_for_full_list(self):
        session = ListSession([Loaded(_level(1, "Alpha")), Failed("beta"), Loaded(_level(3, "Gamma"))])
        rows = build_rows(session)
        assert [r.rank_label for r in rows] == ["#1", "#2", "#3"]
        assert [r.title for r in rows] == ["Alpha", "Error (beta.json)", "Gamma"]
        assert [r.error for r in rows] == [False, True, False]

    def test_active_row_follows_selection(self):
        session = _session_with_ranks(3)
        session.select(2)
        assert [r.active for r in build_rows(session)] == [False, False, True]

    def test_filtered_rows_keep_absolute_rank(self):
        session = _session_with_ranks(12)
        session.set_query("level 1")
        rows = build_rows(session)
        assert [r.rank_label for r in rows] == ["#1", "#10", "#11", "#12"]
        assert [r.index for r in rows] == [0, 1, 2, 3]
        assert rows[0].active

    def test_legacy_label(self):
        session = _session_with_ranks(151)
        rows = build_rows(session)
        assert rows[149].rank_label == "#150"
        assert rows[150].rank_label == "Legacy"

    def test_no_rows(self):
        session = _session_with_ranks(2)
        session.set_query("missing")
        assert build_rows(session) == []


# ===========================================================================
# build_details
# ===========================================================================

class TestBuildDetails:
    def test_no_selection(self):
        session = _session_with_ranks(2)
        session.select(5)
        assert build_details(session) is None

    def test_fields(self):
        records = [Record(percent=100, user="u", link="https://x", mobile=True)]
        level = _level(
            7,
            "Tidal Wave",
            password="1234",
            verification="https://verify",
            records=records,
        )
        session = ListSession([Loaded(_level(1, "Other")), Loaded(level)])
        session.set_query("tidal")
        details = build_details(session, score=lambda rank, percent, minimum: float(rank))
        assert details.name == "Tidal Wave"
        assert details.points == 2.0
        assert details.level_id == "7"
        assert details.password == "1234"
        assert details.video == "https://verify"
        assert details.qualification == "55% or better to qualify"
        assert details.records == records

    def test_showcase_preferred_over_verification(self):
        level = _level(1, "A", showcase="https://show", verification="https://verify")
        details = build_details(ListSession([Loaded(level)]))
        assert details.video == "https://show"

    def test_rank_looked_up_once(self, monkeypatch: pytest.MonkeyPatch):
        session = _session_with_ranks(80)
        session.select(77)
        calls = []
        original = ListSession.original_rank_of

        def counting(self, level):
            calls.append(level.id)
            return original(self, level)

        monkeypatch.setattr(ListSession, "original_rank_of", counting)
        details = build_details(session)
        assert calls == [78]
        assert details.qualification == "100% or better to qualify"

    def test_password_absent(self):
        details = build_details(ListSession([Loaded(_level(1, "A"))]))
        assert details.password == FREE_TO_COPY

    @pytest.mark.parametrize(
        "rank,text",
        [
            (75, "55% or better to qualify"),
            (76, "100% or better to qualify"),
            (151, "This level does not accept new records."),
        ],
    )
    def test_qualification_by_rank(self, rank: int, text: str):
        session = _session_with_ranks(rank)
        session.select(rank - 1)
        assert build_details(session).qualification == text


# ===========================================================================
# build_editor_rows
# ===========================================================================

class TestEditorRows:
    def test_failed_roster_omits_panel(self):
        assert build_editor_rows(None) is None

    def test_rows(self):
        rows = build_editor_rows([Editor(name="Boss", role=Role.OWNER, link="https://x")])
        assert rows[0].icon == "crown"
        assert rows[0].link == "https://x"

    def test_every_role_has_icon(self):
        assert set(ROLE_ICONS) == set(Role)
        assert ROLE_ICONS[Role.TRIAL] == "user-lock"
