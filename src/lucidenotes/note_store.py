# SPDX-License-Identifier: GPL-3.0-or-later

import json
import logging
import sqlite3
from dataclasses import replace

from lucidenotes.constants import CATEGORIES_KEY, NOTES_KEY
from lucidenotes.kv_store import KeyValueStore
from lucidenotes.note import Category, Note

logger = logging.getLogger(__name__)


class NoteStore:
    """Loads and saves the note and category collections as JSON arrays."""

    def __init__(self, kv=None):
        self._kv = kv if kv is not None else KeyValueStore()

    # --- Loading ---

    def load_notes(self) -> list[Note]:
        return self._load(NOTES_KEY, Note.from_dict)

    def load_categories(self) -> list[Category]:
        return self._load(CATEGORIES_KEY, Category.from_dict)

    def load(self) -> tuple[list[Note], list[Category]]:
        """Load both collections and drop note references to unknown categories."""
        notes = self.load_notes()
        categories = self.load_categories()
        known = {c.id for c in categories}
        repaired = []
        for note in notes:
            if note.category_id is not None and note.category_id not in known:
                logger.warning(
                    'Note %s referenced missing category %s; uncategorizing',
                    note.id, note.category_id,
                )
                note = replace(note, category_id=None)
            repaired.append(note)
        return repaired, categories

    def _load(self, key, from_dict) -> list:
        try:
            raw = self._kv.get(key)
        except sqlite3.Error:
            logger.warning('Could not read %r from the store', key, exc_info=True)
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError):
            logger.warning('Stored %r is not valid JSON; starting empty', key)
            return []
        if not isinstance(data, list):
            logger.warning('Stored %r is not a JSON array; starting empty', key)
            return []

        items = []
        seen = set()
        for entry in data:
            try:
                item = from_dict(entry)
            except ValueError as e:
                logger.warning('Skipping malformed %s entry: %s', key, e)
                continue
            if item.id in seen:
                logger.warning('Skipping duplicate %s id %s', key, item.id)
                continue
            seen.add(item.id)
            items.append(item)
        return items

    # --- Saving ---

    def save_notes(self, notes):
        self._save(NOTES_KEY, [n.to_dict() for n in notes])

    def save_categories(self, categories):
        self._save(CATEGORIES_KEY, [c.to_dict() for c in categories])

    def _save(self, key, payload):
        # Best effort: the in-memory state stays authoritative on failure.
        try:
            self._kv.set(key, json.dumps(payload).encode('utf-8'))
        except (sqlite3.Error, OSError):
            logger.warning('Failed to persist %r', key, exc_info=True)

    def close(self):
        self._kv.close()
