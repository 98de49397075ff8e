"""Tests for driving the engine through application actions."""

import pytest
from gi.repository import Gio, GLib

from lucidenotes.application import NotesApplication
from lucidenotes.prompts import Prompts


@pytest.fixture
def app(make_engine, sample_notes, sample_categories):
    engine = make_engine(sample_notes, sample_categories)
    application = NotesApplication(
        engine=engine,
        prompts=Prompts(ask_text=lambda message: "Travel"),
        application_id="io.github.lucidenotes.Test",
        flags=Gio.ApplicationFlags.NON_UNIQUE,
    )
    application.register(None)
    return application


def activate(app, name, value=None):
    app.activate_action(name, value)


def test_all_actions_are_registered(app):
    assert sorted(app.list_actions()) == sorted([
        "new-note", "toggle-favorite", "trash-note", "restore-note", "delete-note",
        "empty-trash", "assign-category", "new-category", "rename-category",
        "delete-category", "select-note", "select-filter", "select-category",
    ])


def test_note_actions(app):
    engine = app.engine
    activate(app, "toggle-favorite", GLib.Variant("s", "n1"))
    assert engine.get_note("n1").favorited is True
    activate(app, "trash-note", GLib.Variant("s", "n1"))
    assert engine.get_note("n1").trashed is True
    activate(app, "restore-note", GLib.Variant("s", "n1"))
    assert engine.get_note("n1").trashed is False
    activate(app, "delete-note", GLib.Variant("s", "n1"))
    assert engine.get_note("n1") is None
    activate(app, "empty-trash")
    assert engine.get_note("n3") is None


def test_new_note_action(app):
    activate(app, "new-note")
    assert app.engine.active_note.title == "New Note"


def test_category_actions(app):
    engine = app.engine
    activate(app, "new-category")
    travel = engine.categories[-1]
    assert travel.name == "Travel"
    assert engine.active_category_id == travel.id

    activate(app, "assign-category", GLib.Variant("(ss)", ("n2", travel.id)))
    assert engine.get_note("n2").category_id == travel.id
    activate(app, "assign-category", GLib.Variant("(ss)", ("n2", "")))
    assert engine.get_note("n2").category_id is None

    activate(app, "rename-category", GLib.Variant("(ss)", (travel.id, "Trips")))
    assert engine.get_category(travel.id).name == "Trips"
    activate(app, "delete-category", GLib.Variant("s", travel.id))
    assert engine.get_category(travel.id) is None


def test_selection_actions(app):
    engine = app.engine
    activate(app, "select-category", GLib.Variant("s", "work"))
    assert engine.active_category_id == "work"
    activate(app, "select-category", GLib.Variant("s", ""))
    assert engine.active_category_id is None
    activate(app, "select-filter", GLib.Variant("s", "Favorites"))
    assert engine.active_filter == "Favorites"
    assert engine.active_note_id == "n2"
    activate(app, "select-filter", GLib.Variant("s", "Notes"))
    activate(app, "select-note", GLib.Variant("s", "n2"))
    assert engine.active_note_id == "n2"
