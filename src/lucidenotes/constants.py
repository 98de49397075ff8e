# SPDX-License-Identifier: GPL-3.0-or-later

APP_ID = 'io.github.lucidenotes'
APP_NAME = 'lucidenotes'

DATA_DIR_ENV = 'LUCIDENOTES_DATA_DIR'
LOG_LEVEL_ENV = 'LUCIDENOTES_LOG_LEVEL'
DB_FILENAME = 'notes.db'

NOTES_KEY = 'notes'
CATEGORIES_KEY = 'categories'

FILTER_NOTES = 'Notes'
FILTER_FAVORITES = 'Favorites'
FILTER_TRASH = 'Trash'
FILTERS = (FILTER_NOTES, FILTER_FAVORITES, FILTER_TRASH)

NEW_NOTE_TITLE = 'New Note'
UNTITLED_TITLE = 'Untitled Note'
EMPTY_PREVIEW = 'No additional text'
PREVIEW_LENGTH = 50

TRASH_EMPTY_MESSAGE = 'The trash is already empty.'
