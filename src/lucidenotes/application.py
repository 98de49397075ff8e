# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import sys

from gi.repository import Gio, GLib

from lucidenotes.config import configure_logging, confirm_destructive_enabled
from lucidenotes.constants import APP_ID
from lucidenotes.engine import NotesEngine
from lucidenotes.prompts import NotesController

logger = logging.getLogger(__name__)


def _optional_id(value):
    return value or None


class NotesApplication(Gio.Application):
    """Exposes the engine's operations as application actions.

    A presentation layer activates ``app.<name>`` actions and listens to the
    engine's signals; it never touches the collections directly.
    """

    def __init__(self, engine=None, prompts=None, **kwargs):
        kwargs.setdefault('application_id', APP_ID)
        kwargs.setdefault('flags', Gio.ApplicationFlags.DEFAULT_FLAGS)
        super().__init__(**kwargs)
        self.engine = engine
        self.controller = None
        self._prompts = prompts

    def do_startup(self):
        Gio.Application.do_startup(self)
        configure_logging()
        if self.engine is None:
            self.engine = NotesEngine()
        self.controller = NotesController(
            self.engine, self._prompts,
            confirm_destructive=confirm_destructive_enabled(),
        )
        self._setup_actions()

    def do_activate(self):
        logger.info(
            '%d notes, %d categories loaded',
            len(self.engine.notes), len(self.engine.categories),
        )

    def _setup_actions(self):
        string = GLib.VariantType.new('s')
        pair = GLib.VariantType.new('(ss)')
        actions = [
            ('new-note', self._on_new_note, None),
            ('toggle-favorite', self._on_toggle_favorite, string),
            ('trash-note', self._on_trash_note, string),
            ('restore-note', self._on_restore_note, string),
            ('delete-note', self._on_delete_note, string),
            ('empty-trash', self._on_empty_trash, None),
            ('assign-category', self._on_assign_category, pair),
            ('new-category', self._on_new_category, None),
            ('rename-category', self._on_rename_category, pair),
            ('delete-category', self._on_delete_category, string),
            ('select-note', self._on_select_note, string),
            ('select-filter', self._on_select_filter, string),
            ('select-category', self._on_select_category, string),
        ]
        for name, callback, param_type in actions:
            action = Gio.SimpleAction.new(name, param_type)
            action.connect('activate', callback)
            self.add_action(action)

    def _on_new_note(self, action, param):
        self.engine.new_note()

    def _on_toggle_favorite(self, action, param):
        self.engine.toggle_favorite(param.get_string())

    def _on_trash_note(self, action, param):
        self.engine.trash_note(param.get_string())

    def _on_restore_note(self, action, param):
        self.engine.restore_note(param.get_string())

    def _on_delete_note(self, action, param):
        self.controller.permanently_delete(param.get_string())

    def _on_empty_trash(self, action, param):
        self.controller.empty_trash()

    def _on_assign_category(self, action, param):
        note_id, category_id = param.unpack()
        self.engine.assign_category(note_id, _optional_id(category_id))

    def _on_new_category(self, action, param):
        self.controller.new_category()

    def _on_rename_category(self, action, param):
        category_id, name = param.unpack()
        self.engine.rename_category(category_id, name)

    def _on_delete_category(self, action, param):
        self.controller.delete_category(param.get_string())

    def _on_select_note(self, action, param):
        self.engine.select_note(_optional_id(param.get_string()))

    def _on_select_filter(self, action, param):
        self.engine.select_filter(param.get_string())

    def _on_select_category(self, action, param):
        self.engine.select_category(_optional_id(param.get_string()))


def main(argv=None):
    app = NotesApplication()
    return app.run(sys.argv if argv is None else argv)
