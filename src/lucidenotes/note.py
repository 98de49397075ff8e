# SPDX-License-Identifier: GPL-3.0-or-later

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from lucidenotes.constants import EMPTY_PREVIEW, PREVIEW_LENGTH, UNTITLED_TITLE


@dataclass(frozen=True)
class Note:
    id: str
    title: str = ''
    body: str = ''
    last_modified: int = 0  # milliseconds since the epoch
    favorited: bool = False
    trashed: bool = False
    category_id: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.title or UNTITLED_TITLE

    @property
    def preview_text(self) -> str:
        """Short slice of the body shown under the title in note lists."""
        return self.body[:PREVIEW_LENGTH] or EMPTY_PREVIEW

    @property
    def date_label(self) -> str:
        try:
            modified = datetime.fromtimestamp(self.last_modified / 1000)
        except (OverflowError, OSError, ValueError):
            return ''
        return f'{modified.day} {modified.strftime("%b %Y")}'

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'body': self.body,
            'lastModified': self.last_modified,
            'favorited': self.favorited,
            'trashed': self.trashed,
            'categoryId': self.category_id,
        }

    @classmethod
    def from_dict(cls, data) -> 'Note':
        if not isinstance(data, dict) or not isinstance(data.get('id'), str):
            raise ValueError(f'not a note object: {data!r}')
        category_id = data.get('categoryId')
        last_modified = data.get('lastModified', 0)
        if isinstance(last_modified, bool) or not isinstance(last_modified, (int, float)):
            last_modified = 0
        elif not math.isfinite(last_modified):
            last_modified = 0
        return cls(
            id=data['id'],
            title=str(data.get('title') or ''),
            body=str(data.get('body') or ''),
            last_modified=int(last_modified),
            favorited=data.get('favorited') is True,
            trashed=data.get('trashed') is True,
            category_id=category_id if isinstance(category_id, str) and category_id else None,
        )


@dataclass(frozen=True)
class Category:
    id: str
    name: str

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data) -> 'Category':
        if not isinstance(data, dict) or not isinstance(data.get('id'), str):
            raise ValueError(f'not a category object: {data!r}')
        name = str(data.get('name') or '').strip()
        if not name:
            raise ValueError(f'category {data["id"]!r} has no name')
        return cls(id=data['id'], name=name)
