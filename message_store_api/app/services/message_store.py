"""
Service layer for messages.

:class:`MessageStore` owns every message record and implements the
five operations of the API: list, get, create, update and delete.  It
validates caller input, stamps identifiers and timestamps, and
delegates keeping the records to a :class:`MessageStorage` backend.

Operations return :class:`Ok` or :class:`Err` values and never raise.
Invalid input and unknown ids are detected before the backend is
touched, so a failed call leaves the store unchanged.  A fault inside
the backend is logged and reported as an internal error.

All operations run under a single lock; concurrent callers cannot
interleave writes to the same record.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from message_store_api.app.core.collaborators import Clock, IdGenerator, SystemClock, UUIDGenerator
from message_store_api.app.core.errors import Err, Ok, Result, StoreError
from message_store_api.app.schemas.message import Message, MessagePayload
from message_store_api.app.services.storage import MessageStorage


logger = logging.getLogger(__name__)

INVALID_ID = "Invalid ID"


class MessageStore:
    """Keyed collection of all live messages."""

    def __init__(
        self,
        storage: MessageStorage,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.storage = storage
        self.id_generator = id_generator or UUIDGenerator()
        self.clock = clock or SystemClock()
        self._lock = threading.RLock()

    def list(self) -> Result[List[Message]]:
        """Return every stored message in insertion order."""
        with self._lock:
            try:
                return Ok(self.storage.values())
            except Exception as exc:
                logger.exception("Failed to list messages")
                return Err(StoreError.internal(f"Error retrieving messages: {exc}"))

    def get(self, message_id: str) -> Result[Message]:
        """Retrieve a single message by its id."""
        if not message_id:
            return Err(StoreError.invalid_argument(INVALID_ID))
        with self._lock:
            try:
                message = self.storage.get(message_id)
            except Exception as exc:
                logger.exception("Failed to retrieve message %s", message_id)
                return Err(StoreError.internal(f"Error retrieving message: {exc}"))
        if message is None:
            return Err(StoreError.not_found(f"Message with id={message_id} not found"))
        return Ok(message)

    def create(self, payload: MessagePayload) -> Result[Message]:
        """Store a new message built from ``payload``.

        Title, body and attachment URL must all be non‑empty.  The new
        message receives a fresh id, ``created_at`` is set to the
        current time and ``updated_at`` is left unset.
        """
        if not payload.is_complete():
            return Err(StoreError.invalid_argument("All data must be added"))
        with self._lock:
            try:
                message_id = self.id_generator.new_id()
                if self.storage.get(message_id) is not None:
                    logger.error("Generated id %s is already in use", message_id)
                    return Err(StoreError.internal(f"Failed to add message: id collision on {message_id}"))
                message = Message(
                    id=message_id,
                    title=payload.title,
                    body=payload.body,
                    attachment_url=payload.attachment_url,
                    created_at=self.clock.now(),
                    updated_at=None,
                )
                self.storage.insert(message)
            except Exception as exc:
                logger.exception("Failed to add message")
                return Err(StoreError.internal(f"Failed to add message: {exc}"))
        logger.info("Created message %s", message.id)
        return Ok(message)

    def update(self, message_id: str, payload: MessagePayload) -> Result[Message]:
        """Replace the title, body and attachment URL of a message.

        The update is rejected only when all three payload fields are
        empty.  Otherwise all three are overwritten as given, including
        empty ones; fields are not merged.  ``id`` and ``created_at``
        are kept and ``updated_at`` is set to the current time.
        """
        if not message_id:
            return Err(StoreError.invalid_argument(INVALID_ID))
        with self._lock:
            try:
                current = self.storage.get(message_id)
                if current is None:
                    return Err(StoreError.not_found(f"Message with id={message_id} not found. Couldn't update."))
                if payload.is_empty():
                    return Err(StoreError.invalid_argument("At least one field must be updated"))
                message = current.model_copy(
                    update={
                        "title": payload.title,
                        "body": payload.body,
                        "attachment_url": payload.attachment_url,
                        "updated_at": self.clock.now(),
                    }
                )
                self.storage.insert(message)
            except Exception as exc:
                logger.exception("Failed to update message %s", message_id)
                return Err(StoreError.internal(f"Error updating message: {exc}"))
        logger.info("Updated message %s", message_id)
        return Ok(message)

    def delete(self, message_id: str) -> Result[Message]:
        """Remove a message and return it as it was before removal."""
        if not message_id:
            return Err(StoreError.invalid_argument(INVALID_ID))
        with self._lock:
            try:
                message = self.storage.remove(message_id)
            except Exception as exc:
                logger.exception("Failed to delete message %s", message_id)
                return Err(StoreError.internal(f"Error deleting message: {exc}"))
        if message is None:
            return Err(StoreError.not_found(f"Message with id={message_id} not found. Couldn't delete."))
        logger.info("Deleted message %s", message_id)
        return Ok(message)

    def close(self) -> None:
        """Release the storage backend."""
        with self._lock:
            self.storage.close()
