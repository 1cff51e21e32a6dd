"""
Pydantic schemas for messages.

A message carries a title, a body and an attachment URL (opaque text,
not validated as a URL).  Identifiers and timestamps are assigned by
the store.  Attributes use snake_case in Python and camelCase on the
wire (``attachmentURL``, ``createdAt``, ``updatedAt``).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessagePayload(BaseModel):
    """Caller supplied fields for creating or updating a message.

    Every field defaults to an empty string and ``null`` is read as
    one, so a missing field is treated like an empty one by the
    store's own validation, which reports it as an invalid argument.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field("", description="Message title")
    body: str = Field("", description="Message body text")
    attachment_url: str = Field("", alias="attachmentURL", description="Attachment location, stored verbatim")

    @field_validator("title", "body", "attachment_url", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        # JSON null counts as a missing field
        return "" if v is None else v

    def is_complete(self) -> bool:
        return bool(self.title and self.body and self.attachment_url)

    def is_empty(self) -> bool:
        return not (self.title or self.body or self.attachment_url)


class Message(BaseModel):
    """A stored message.

    Instances are frozen; updating a message produces a new instance.
    ``updated_at`` is ``None`` until the first update.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    body: str
    attachment_url: str = Field(..., alias="attachmentURL")
    created_at: int = Field(..., alias="createdAt", description="Creation time, ns since epoch")
    updated_at: Optional[int] = Field(None, alias="updatedAt", description="Last update time, ns since epoch")
