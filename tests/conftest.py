import itertools

import pytest

from lucidenotes.engine import NotesEngine
from lucidenotes.kv_store import KeyValueStore
from lucidenotes.note import Category, Note
from lucidenotes.note_store import NoteStore


class FakeClock:
    """Logical clock: every call moves time forward by one second."""

    def __init__(self, start=1_000_000):
        self.now = start

    def __call__(self):
        self.now += 1000
        return self.now


@pytest.fixture
def kv(tmp_path):
    store = KeyValueStore(str(tmp_path / "notes.db"))
    yield store
    store.close()


@pytest.fixture
def store(kv):
    return NoteStore(kv)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def make_engine(store, clock, id_factory):
    def _make(notes=(), categories=()):
        if notes:
            store.save_notes(notes)
        if categories:
            store.save_categories(categories)
        return NotesEngine(store=store, clock=clock, id_factory=id_factory)

    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()


@pytest.fixture
def sample_notes():
    return (
        Note(id="n1", title="Groceries", body="milk", last_modified=300, category_id="work"),
        Note(id="n2", title="Ideas", body="", last_modified=200, favorited=True),
        Note(id="n3", title="Old", body="gone", last_modified=100, trashed=True, category_id="work"),
    )


@pytest.fixture
def sample_categories():
    return (Category(id="work", name="Work"), Category(id="home", name="Home"))
