# SPDX-License-Identifier: GPL-3.0-or-later

import sqlite3

from lucidenotes.config import get_db_path


class KeyValueStore:
    """Durable name -> bytes mapping kept in a single SQLite table."""

    def __init__(self, db_path=None):
        if db_path is None:
            db_path = get_db_path()

        self._db = sqlite3.connect(db_path)
        if db_path != ':memory:':
            self._db.execute('PRAGMA journal_mode=WAL')
        self._create_tables()

    def _create_tables(self):
        self._db.executescript('''
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value BLOB NOT NULL
            );
        ''')

    def get(self, key) -> bytes | None:
        row = self._db.execute(
            'SELECT value FROM kv WHERE key = ?', (key,)
        ).fetchone()
        if row is None:
            return None
        value = row[0]
        if isinstance(value, str):
            value = value.encode('utf-8')
        return bytes(value)

    def set(self, key, value: bytes):
        self._db.execute(
            'INSERT INTO kv (key, value) VALUES (?, ?) '
            'ON CONFLICT(key) DO UPDATE SET value = excluded.value',
            (key, sqlite3.Binary(value)),
        )
        self._db.commit()

    def close(self):
        self._db.close()
