# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import time
import uuid
from dataclasses import replace

from gi.repository import GObject

from lucidenotes import operations
from lucidenotes.constants import FILTER_NOTES, FILTERS
from lucidenotes.note_store import NoteStore
from lucidenotes.projection import (
    Selection,
    count_by_category,
    project,
    reconcile,
    sort_for_display,
)

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_uuid() -> str:
    return str(uuid.uuid4())


class NotesEngine(GObject.Object):
    """Owns the notes, the categories and the selection.

    Collections are exposed as tuples of frozen dataclasses. Every mutation
    goes through ``_commit``, which installs the new state, reconciles the
    selection against the new projection, writes the changed collections
    back to the store and then emits signals.
    """

    __gsignals__ = {
        'state-changed': (GObject.SignalFlags.RUN_LAST, None, ()),
        'selection-changed': (GObject.SignalFlags.RUN_LAST, None, ()),
        'note-created': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'note-changed': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'note-trashed': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'note-restored': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'note-deleted': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'trash-emptied': (GObject.SignalFlags.RUN_LAST, None, (int,)),
        'category-created': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'category-changed': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'category-deleted': (GObject.SignalFlags.RUN_LAST, None, (str,)),
    }

    def __init__(self, store=None, clock=None, id_factory=None):
        super().__init__()
        self._store = store if store is not None else NoteStore()
        self._clock = clock or _now_ms
        self._id_factory = id_factory or _new_uuid

        notes, categories = self._store.load()
        self._notes = tuple(notes)
        self._categories = tuple(categories)
        self._issued_ids = {n.id for n in self._notes} | {c.id for c in self._categories}
        self._selection = reconcile(Selection(), project(self._notes))

    # --- Read API ---

    @property
    def notes(self):
        return self._notes

    @property
    def categories(self):
        return self._categories

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def active_note_id(self):
        return self._selection.active_note_id

    @property
    def active_filter(self) -> str:
        return self._selection.filter

    @property
    def active_category_id(self):
        return self._selection.category_id

    @property
    def filtered_notes(self):
        return project(self._notes, self._selection.filter, self._selection.category_id)

    @property
    def display_notes(self):
        return sort_for_display(self.filtered_notes)

    @property
    def active_note(self):
        return self.get_note(self._selection.active_note_id)

    def get_note(self, note_id):
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def get_category(self, category_id):
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def category_counts(self) -> dict:
        return count_by_category(self._notes)

    # --- Note actions ---

    def new_note(self):
        """Create a draft note and select it, or select the existing untouched draft."""
        category_id = self._selection.category_id
        draft = operations.find_reusable_draft(self._notes)
        if draft is not None:
            if draft.category_id != category_id:
                category_id = None
            self._set_selection(Selection(FILTER_NOTES, category_id, draft.id))
            return draft

        note_id = self._next_id()
        notes = operations.create_note(self._notes, note_id, self._clock(), category_id)
        self._commit(notes=notes, selection=Selection(FILTER_NOTES, category_id, note_id))
        self.emit('note-created', note_id)
        return self.get_note(note_id)

    def update_note(self, note):
        if self.get_note(note.id) is None:
            logger.debug('update_note: no note %s', note.id)
            return
        if note.category_id is not None and self.get_category(note.category_id) is None:
            logger.debug('update_note: dropping unknown category %s', note.category_id)
            note = replace(note, category_id=None)
        if self._commit(notes=operations.update_note(self._notes, note)):
            self.emit('note-changed', note.id)

    def toggle_favorite(self, note_id):
        if self._commit(notes=operations.toggle_favorite(self._notes, note_id)):
            self.emit('note-changed', note_id)

    def trash_note(self, note_id):
        if self._commit(notes=operations.soft_delete(self._notes, note_id)):
            self.emit('note-trashed', note_id)

    def restore_note(self, note_id):
        if self._commit(notes=operations.restore(self._notes, note_id)):
            self.emit('note-restored', note_id)

    def delete_note(self, note_id):
        """Remove a note for good. Callers are expected to have confirmed."""
        if self._commit(notes=operations.permanent_delete(self._notes, note_id)):
            self.emit('note-deleted', note_id)

    def empty_trash(self) -> int:
        """Drop every trashed note and return how many went; 0 means it was already empty."""
        count = operations.count_trashed(self._notes)
        if count == 0:
            logger.info('Trash is already empty')
            return 0
        self._commit(notes=operations.empty_trash(self._notes))
        self.emit('trash-emptied', count)
        return count

    def assign_category(self, note_id, category_id):
        if category_id is not None and self.get_category(category_id) is None:
            logger.debug('assign_category: no category %s', category_id)
            return
        if self.get_note(note_id) is None:
            logger.debug('assign_category: no note %s', note_id)
            return
        notes = operations.assign_category(self._notes, note_id, category_id, self._clock())
        if self._commit(notes=notes):
            self.emit('note-changed', note_id)

    # --- Category actions ---

    def new_category(self, name):
        categories, category = operations.create_category(
            self._categories, self._next_id(), name,
        )
        if category is None:
            return None
        self._commit(
            categories=categories,
            selection=Selection(FILTER_NOTES, category.id, self._selection.active_note_id),
        )
        self.emit('category-created', category.id)
        return category

    def rename_category(self, category_id, name):
        categories = operations.rename_category(self._categories, category_id, name)
        if self._commit(categories=categories):
            self.emit('category-changed', category_id)

    def delete_category(self, category_id):
        if self.get_category(category_id) is None:
            logger.debug('delete_category: no category %s', category_id)
            return
        notes, categories = operations.delete_category(
            self._notes, self._categories, category_id,
        )
        selection = self._selection
        if selection.category_id == category_id:
            selection = replace(selection, category_id=None)
        self._commit(notes=notes, categories=categories, selection=selection)
        self.emit('category-deleted', category_id)

    # --- Selection ---

    def select_note(self, note_id):
        self._set_selection(replace(self._selection, active_note_id=note_id))

    def select_filter(self, filter_name):
        if filter_name not in FILTERS:
            logger.warning('Ignoring unknown filter %r', filter_name)
            return
        self._set_selection(replace(self._selection, filter=filter_name, category_id=None))

    def select_category(self, category_id):
        if category_id is not None and self.get_category(category_id) is None:
            logger.warning('Ignoring unknown category %r', category_id)
            return
        self._set_selection(
            replace(self._selection, filter=FILTER_NOTES, category_id=category_id)
        )

    # --- Internals ---

    def _next_id(self) -> str:
        new_id = self._id_factory()
        while new_id in self._issued_ids:
            new_id = self._id_factory()
        self._issued_ids.add(new_id)
        return new_id

    def _set_selection(self, selection):
        self._commit(selection=selection)

    def _commit(self, notes=None, categories=None, selection=None) -> bool:
        """Install new state, reconcile the selection, persist, notify.

        Returns True if the notes or categories changed.
        """
        notes_changed = notes is not None and notes != self._notes
        categories_changed = categories is not None and categories != self._categories
        if notes_changed:
            self._notes = tuple(notes)
        if categories_changed:
            self._categories = tuple(categories)

        previous = self._selection
        selection = selection if selection is not None else previous
        self._selection = reconcile(
            selection,
            project(self._notes, selection.filter, selection.category_id),
        )

        if notes_changed:
            self._store.save_notes(self._notes)
        if categories_changed:
            self._store.save_categories(self._categories)

        if notes_changed or categories_changed:
            self.emit('state-changed')
        if self._selection != previous:
            self.emit('selection-changed')
        return notes_changed or categories_changed
