# SPDX-License-Identifier: GPL-3.0-or-later

from collections import Counter
from dataclasses import dataclass
from typing import Optional

from lucidenotes.constants import FILTER_FAVORITES, FILTER_NOTES, FILTER_TRASH, FILTERS


@dataclass(frozen=True)
class Selection:
    filter: str = FILTER_NOTES
    category_id: Optional[str] = None
    active_note_id: Optional[str] = None


def _in_filter(note, filter_name) -> bool:
    if filter_name == FILTER_FAVORITES:
        return note.favorited and not note.trashed
    if filter_name == FILTER_TRASH:
        return note.trashed
    return not note.trashed


def project(notes, filter_name=FILTER_NOTES, category_id=None):
    """Return the notes visible under a filter and optional category, in collection order."""
    visible = tuple(n for n in notes if _in_filter(n, filter_name))
    if category_id:
        visible = tuple(n for n in visible if n.category_id == category_id)
    return visible


def sort_for_display(notes):
    return sorted(notes, key=lambda n: n.last_modified, reverse=True)


def reconcile(selection, visible):
    """Point the active note at something in ``visible``, or at nothing if it's empty."""
    if any(n.id == selection.active_note_id for n in visible):
        return selection
    active_id = visible[0].id if visible else None
    if active_id == selection.active_note_id:
        return selection
    return Selection(selection.filter, selection.category_id, active_id)


def count_by_category(notes) -> dict:
    return dict(Counter(
        n.category_id for n in notes
        if n.category_id is not None and not n.trashed
    ))


def filter_counts(notes) -> dict:
    return {name: len(project(notes, name)) for name in FILTERS}
