# SPDX-License-Identifier: GPL-3.0-or-later

"""Pure transforms over the note and category collections.

Every function takes the whole prior collection and returns a whole new
one. An id that matches nothing gives back an equal collection.
"""

from dataclasses import replace

from lucidenotes.constants import NEW_NOTE_TITLE
from lucidenotes.note import Category, Note


def _map_note(notes, note_id, change):
    return tuple(change(n) if n.id == note_id else n for n in notes)


# --- Notes ---

def find_reusable_draft(notes):
    """Return the most recently modified note if it is still an untouched draft."""
    if not notes:
        return None
    latest = max(notes, key=lambda n: n.last_modified)
    if latest.title == NEW_NOTE_TITLE and not latest.body.strip() and not latest.trashed:
        return latest
    return None


def create_note(notes, note_id, now, category_id=None):
    note = Note(
        id=note_id,
        title=NEW_NOTE_TITLE,
        body='',
        last_modified=now,
        favorited=False,
        trashed=False,
        category_id=category_id,
    )
    return (note,) + tuple(notes)


def update_note(notes, updated):
    return _map_note(notes, updated.id, lambda n: updated)


def toggle_favorite(notes, note_id):
    return _map_note(notes, note_id, lambda n: replace(n, favorited=not n.favorited))


def soft_delete(notes, note_id):
    return _map_note(notes, note_id, lambda n: replace(n, trashed=True))


def restore(notes, note_id):
    return _map_note(notes, note_id, lambda n: replace(n, trashed=False))


def permanent_delete(notes, note_id):
    return tuple(n for n in notes if n.id != note_id)


def count_trashed(notes) -> int:
    return sum(1 for n in notes if n.trashed)


def empty_trash(notes):
    return tuple(n for n in notes if not n.trashed)


def assign_category(notes, note_id, category_id, now):
    return _map_note(
        notes, note_id,
        lambda n: replace(n, category_id=category_id, last_modified=now),
    )


# --- Categories ---

def create_category(categories, category_id, name):
    """Append a category named ``name``; blank names leave the collection as is.

    Returns ``(categories, created)`` where ``created`` is None on rejection.
    """
    name = (name or '').strip()
    if not name:
        return tuple(categories), None
    category = Category(id=category_id, name=name)
    return tuple(categories) + (category,), category


def rename_category(categories, category_id, name):
    name = (name or '').strip()
    if not name:
        return tuple(categories)
    return tuple(
        replace(c, name=name) if c.id == category_id else c
        for c in categories
    )


def delete_category(notes, categories, category_id):
    """Remove a category and uncategorize its notes in one step."""
    notes = tuple(
        replace(n, category_id=None) if n.category_id == category_id else n
        for n in notes
    )
    categories = tuple(c for c in categories if c.id != category_id)
    return notes, categories
