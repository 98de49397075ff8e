"""Tests for the view projection and selection reconciliation."""

import pytest

from lucidenotes.note import Note
from lucidenotes.projection import (
    Selection,
    count_by_category,
    filter_counts,
    project,
    reconcile,
    sort_for_display,
)


@pytest.fixture
def notes():
    return (
        Note(id="1", favorited=True, trashed=False, category_id="work", last_modified=10),
        Note(id="2", favorited=True, trashed=False, category_id="home", last_modified=30),
        Note(id="3", favorited=False, trashed=False, category_id="work", last_modified=20),
        Note(id="4", favorited=True, trashed=True, category_id="work", last_modified=40),
        Note(id="5", favorited=False, trashed=False, last_modified=50),
    )


class TestProject:
    def test_notes_filter_hides_trash(self, notes):
        assert [n.id for n in project(notes, "Notes")] == ["1", "2", "3", "5"]

    def test_favorites_filter(self, notes):
        assert [n.id for n in project(notes, "Favorites")] == ["1", "2"]

    def test_trash_filter(self, notes):
        assert [n.id for n in project(notes, "Trash")] == ["4"]

    def test_unknown_filter_behaves_like_notes(self, notes):
        assert project(notes, "Whatever") == project(notes, "Notes")

    def test_favorites_within_category(self, notes):
        assert [n.id for n in project(notes[:3], "Favorites", "work")] == ["1"]

    def test_category_composes_with_trash(self, notes):
        assert [n.id for n in project(notes, "Trash", "work")] == ["4"]
        assert [n.id for n in project(notes, "Notes", "work")] == ["1", "3"]

    def test_projection_is_pure(self, notes):
        assert project(notes, "Notes", "work") == project(notes, "Notes", "work")

    def test_display_sort_is_newest_first(self, notes):
        assert [n.id for n in sort_for_display(project(notes))] == ["5", "2", "3", "1"]


class TestReconcile:
    def test_visible_active_note_is_kept(self, notes):
        selection = Selection(active_note_id="3")
        assert reconcile(selection, project(notes)) is selection

    def test_hidden_active_note_moves_to_first_visible(self, notes):
        selection = Selection(filter="Favorites", active_note_id="3")
        result = reconcile(selection, project(notes, "Favorites"))
        assert result.active_note_id == "1"
        assert result.filter == "Favorites"

    def test_empty_projection_clears_active_note(self):
        result = reconcile(Selection(active_note_id="x"), ())
        assert result.active_note_id is None


class TestCounts:
    def test_count_by_category_ignores_trash(self, notes):
        assert count_by_category(notes) == {"work": 2, "home": 1}

    def test_filter_counts(self, notes):
        assert filter_counts(notes) == {"Notes": 4, "Favorites": 2, "Trash": 1}
