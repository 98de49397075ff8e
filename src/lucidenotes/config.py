# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import os

from gi.repository import Gio, GLib

from lucidenotes.constants import (
    APP_ID,
    APP_NAME,
    DATA_DIR_ENV,
    DB_FILENAME,
    LOG_LEVEL_ENV,
)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def get_data_dir() -> str:
    """Return the directory holding the notes database, creating it if needed.

    ``$LUCIDENOTES_DATA_DIR`` wins over the XDG user data directory.
    """
    data_dir = os.environ.get(DATA_DIR_ENV)
    if not data_dir:
        data_dir = os.path.join(GLib.get_user_data_dir(), APP_NAME)
    os.makedirs(data_dir, exist_ok=True)
    return data_dir


def get_db_path() -> str:
    return os.path.join(get_data_dir(), DB_FILENAME)


def get_settings():
    """Return the application's Gio.Settings, or None if the schema isn't installed."""
    schema_source = Gio.SettingsSchemaSource.get_default()
    if schema_source and schema_source.lookup(APP_ID, True):
        return Gio.Settings.new(APP_ID)
    return None


def confirm_destructive_enabled() -> bool:
    settings = get_settings()
    if settings is None:
        return True
    return settings.get_boolean('confirm-destructive')


def configure_logging(level=None):
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, 'WARNING')
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(APP_NAME).setLevel(level)
