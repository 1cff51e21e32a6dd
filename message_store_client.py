"""Message Store API client.

This module defines a small client wrapper around the Message Store
REST API.  The client uses the ``requests`` library internally to make
HTTP calls and exposes one method per store operation:

* :meth:`get_messages` – return all stored messages.
* :meth:`get_message` – fetch a single message by its identifier.
* :meth:`add_message` – create a message.
* :meth:`update_message` – replace the fields of a message.
* :meth:`delete_message` – delete a message and return it.

Each method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with keys ``status_code`` and ``message``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
store behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MessageStoreClient:
    """Client for interacting with the Message Store API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1/messages",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            prefix: Path under which the message routes are mounted.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server on each request.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _item_path(self, message_id: str) -> str:
        return f"{self.prefix}/{quote(message_id, safe='')}"

    @staticmethod
    def _payload(title: str, body: str, attachment_url: str) -> Dict[str, str]:
        return {"title": title, "body": body, "attachmentURL": attachment_url}

    # ------------------------------------------------------------------
    # Message operations
    # ------------------------------------------------------------------
    def get_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all messages."""
        data, error = self._request("GET", f"{self.prefix}/")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_message(self, message_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single message by ID.

        An empty ``message_id`` is rejected locally; the server would
        treat the request as a listing instead.
        """
        if not message_id:
            return None, {"status_code": None, "message": "Invalid ID"}
        return self._request("GET", self._item_path(message_id))

    def add_message(
        self, title: str, body: str, attachment_url: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a message and return it as stored by the server."""
        return self._request("POST", f"{self.prefix}/", json_body=self._payload(title, body, attachment_url))

    def update_message(
        self, message_id: str, title: str, body: str, attachment_url: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the title, body and attachment URL of a message."""
        if not message_id:
            return None, {"status_code": None, "message": "Invalid ID"}
        return self._request(
            "PUT", self._item_path(message_id), json_body=self._payload(title, body, attachment_url)
        )

    def delete_message(self, message_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a message and return the deleted record."""
        if not message_id:
            return None, {"status_code": None, "message": "Invalid ID"}
        return self._request("DELETE", self._item_path(message_id))
