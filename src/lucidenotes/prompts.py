# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from lucidenotes.constants import TRASH_EMPTY_MESSAGE

logger = logging.getLogger(__name__)


def _always_yes(message):
    return True


def _no_text(message):
    return None


def _log_notice(message):
    logger.info('%s', message)


@dataclass
class Prompts:
    """Callables supplied by the presentation layer.

    ``confirm`` answers yes/no, ``ask_text`` returns the entered text or None
    when cancelled, ``notify`` shows an informational message.
    """
    confirm: Callable[[str], bool] = _always_yes
    ask_text: Callable[[str], Optional[str]] = _no_text
    notify: Callable[[str], None] = _log_notice


class NotesController:
    """Puts the confirmation and input prompts in front of engine actions."""

    def __init__(self, engine, prompts=None, confirm_destructive=True):
        self._engine = engine
        self._prompts = prompts or Prompts()
        self._confirm_destructive = confirm_destructive

    def _confirm(self, message) -> bool:
        if not self._confirm_destructive:
            return True
        return bool(self._prompts.confirm(message))

    def new_category(self):
        name = self._prompts.ask_text('Enter new category name:')
        if name is None:
            return None
        return self._engine.new_category(name)

    def permanently_delete(self, note_id) -> bool:
        if self._engine.get_note(note_id) is None:
            return False
        if not self._confirm('Are you sure you want to permanently delete this note?'):
            return False
        self._engine.delete_note(note_id)
        return True

    def empty_trash(self) -> int:
        trashed = sum(1 for n in self._engine.notes if n.trashed)
        if trashed == 0:
            self._prompts.notify(TRASH_EMPTY_MESSAGE)
            return 0
        if not self._confirm(
            f'Are you sure you want to permanently delete {trashed} note(s)?'
        ):
            return 0
        return self._engine.empty_trash()

    def delete_category(self, category_id) -> bool:
        category = self._engine.get_category(category_id)
        if category is None:
            return False
        if not self._confirm(
            f'Are you sure you want to delete the category "{category.name}"? '
            'Notes in this category will become uncategorized.'
        ):
            return False
        self._engine.delete_category(category_id)
        return True
