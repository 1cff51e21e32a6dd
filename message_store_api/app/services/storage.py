"""
Storage backends for messages.

A backend is a keyed map from message id to :class:`Message` that
supports point lookup, enumeration in insertion order, insert or
replace, and removal.  Validation and timestamping live in
:mod:`message_store`; backends only hold data.

Two backends are provided: :class:`InMemoryMessageStorage`, which
keeps messages in a dictionary for the lifetime of the process, and
:class:`SqliteMessageStorage`, which persists them in the ``messages``
table.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from message_store_api.app.core.config import Settings
from message_store_api.app.core.db import get_cursor, init_db
from message_store_api.app.schemas.message import Message


class MessageStorage(ABC):
    """Interface for keeping message records (Repository Pattern)."""

    @abstractmethod
    def values(self) -> List[Message]:
        """Return all stored messages in insertion order."""

    @abstractmethod
    def get(self, message_id: str) -> Optional[Message]:
        """Return the message stored under ``message_id`` or ``None``."""

    @abstractmethod
    def insert(self, message: Message) -> None:
        """Store ``message`` under its id, replacing any existing record.

        A replaced record keeps its position in :meth:`values`.
        """

    @abstractmethod
    def remove(self, message_id: str) -> Optional[Message]:
        """Remove and return the message stored under ``message_id``."""

    def close(self) -> None:
        """Release resources held by the backend."""


class InMemoryMessageStorage(MessageStorage):
    """Messages held in an insertion ordered dictionary."""

    def __init__(self) -> None:
        self._messages: Dict[str, Message] = {}

    def values(self) -> List[Message]:
        return list(self._messages.values())

    def get(self, message_id: str) -> Optional[Message]:
        return self._messages.get(message_id)

    def insert(self, message: Message) -> None:
        self._messages[message.id] = message

    def remove(self, message_id: str) -> Optional[Message]:
        return self._messages.pop(message_id, None)

    def close(self) -> None:
        self._messages.clear()


class SqliteMessageStorage(MessageStorage):
    """Messages persisted in the SQLite ``messages`` table.

    A connection is opened per call.  Rows are listed by ``rowid`` so
    enumeration follows insertion order, and replacements use
    ``UPDATE`` so a row keeps its position.
    """

    _COLUMNS = "id, title, body, attachment_url, created_at, updated_at"

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        init_db(database_url)

    def values(self) -> List[Message]:
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute(
                f"SELECT {self._COLUMNS} FROM messages ORDER BY rowid"
            ).fetchall()
        return [self._row_to_message(row) for row in rows]

    def get(self, message_id: str) -> Optional[Message]:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                f"SELECT {self._COLUMNS} FROM messages WHERE id = ?",
                (message_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_message(row)

    def insert(self, message: Message) -> None:
        params = (
            message.title,
            message.body,
            message.attachment_url,
            message.created_at,
            message.updated_at,
            message.id,
        )
        with get_cursor(self.database_url) as cursor:
            cursor.execute(
                """
                UPDATE messages
                SET title = ?, body = ?, attachment_url = ?, created_at = ?, updated_at = ?
                WHERE id = ?
                """,
                params,
            )
            if cursor.rowcount == 0:
                cursor.execute(
                    """
                    INSERT INTO messages (title, body, attachment_url, created_at, updated_at, id)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    params,
                )

    def remove(self, message_id: str) -> Optional[Message]:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute(
                f"SELECT {self._COLUMNS} FROM messages WHERE id = ?",
                (message_id,),
            ).fetchone()
            if not row:
                return None
            cursor.execute("DELETE FROM messages WHERE id = ?", (message_id,))
        return self._row_to_message(row)

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> Message:
        """Convert a database row to a Message instance."""
        return Message(
            id=row["id"],
            title=row["title"],
            body=row["body"],
            attachment_url=row["attachment_url"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


def build_storage(settings: Settings) -> MessageStorage:
    """Create the backend named by ``settings.storage_backend``."""
    logger = logging.getLogger(__name__)
    backend = settings.storage_backend.lower()
    if backend == "memory":
        logger.info("Using in-memory message storage")
        return InMemoryMessageStorage()
    if backend == "sqlite":
        logger.info("Using SQLite message storage at %s", settings.database_url)
        return SqliteMessageStorage(settings.database_url)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend!r}")
