"""
Message endpoints for API v1.

These routes expose the message store over HTTP: list all messages,
retrieve, create, update and delete one.  The store is taken from
``app.state`` so each application instance works against its own
store.  Store errors are translated to HTTP errors: invalid arguments
to 400, unknown ids to 404 and storage faults to 500.
"""

from typing import List, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, status

from message_store_api.app.core.errors import Err, ErrorKind, StoreError
from message_store_api.app.schemas.message import Message, MessagePayload
from message_store_api.app.services.message_store import MessageStore


router = APIRouter()

_STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_store(request: Request) -> MessageStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def raise_for_error(error: StoreError) -> NoReturn:
    raise HTTPException(status_code=_STATUS_BY_KIND[error.kind], detail=error.message)


@router.get("/", response_model=List[Message], operation_id="getMessages")
async def list_messages(store: MessageStore = Depends(get_store)) -> List[Message]:
    """List all messages."""
    result = store.list()
    if isinstance(result, Err):
        raise_for_error(result.error)
    return result.value


@router.get("/{message_id}", response_model=Message, operation_id="getMessage")
async def get_message(message_id: str, store: MessageStore = Depends(get_store)) -> Message:
    """Retrieve a single message by id.

    Returns HTTP 404 if the message is not found.
    """
    result = store.get(message_id)
    if isinstance(result, Err):
        raise_for_error(result.error)
    return result.value


@router.post("/", response_model=Message, status_code=status.HTTP_201_CREATED, operation_id="addMessage")
async def add_message(payload: MessagePayload, store: MessageStore = Depends(get_store)) -> Message:
    """Create a new message.

    ``title``, ``body`` and ``attachmentURL`` are all required; a
    missing or empty one yields HTTP 400.
    """
    result = store.create(payload)
    if isinstance(result, Err):
        raise_for_error(result.error)
    return result.value


@router.put("/{message_id}", response_model=Message, operation_id="updateMessage")
async def update_message(
    message_id: str,
    payload: MessagePayload,
    store: MessageStore = Depends(get_store),
) -> Message:
    """Replace the title, body and attachment URL of a message.

    All three fields are overwritten as sent.  HTTP 400 is returned
    only when every one of them is empty.
    """
    result = store.update(message_id, payload)
    if isinstance(result, Err):
        raise_for_error(result.error)
    return result.value


@router.delete("/{message_id}", response_model=Message, operation_id="deleteMessage")
async def delete_message(message_id: str, store: MessageStore = Depends(get_store)) -> Message:
    """Delete a message and return what was deleted."""
    result = store.delete(message_id)
    if isinstance(result, Err):
        raise_for_error(result.error)
    return result.value
