# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Async HTTP client for the AnkiConnect API.

AnkiConnect is a single POST endpoint: the body names an action, its params
and the API version, and the reply is ``{"result": ..., "error": ...}``.
Every tool goes through ``AnkiConnectClient.invoke``.
"""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any

import httpx

from .config import AnkiConnectSettings, get_settings
from .exceptions import AnkiConnectError

logger = logging.getLogger(__name__)

_UPSTREAM_PREFIX = "Anki-Connect: "


def explain_error(action: str, message: str) -> str:
    """Rewrite a raw AnkiConnect error into an actionable message.

    Known failure shapes point at the parameter that fixes them; anything
    else passes through verbatim, prefixed with the action name.
    """
    if message.startswith(_UPSTREAM_PREFIX):
        message = message[len(_UPSTREAM_PREFIX) :]

    if "duplicate" in message:
        if "allowDuplicate" in message:
            hint = "Set allowDuplicate:true to bypass this check."
        else:
            hint = "Use allowDuplicate parameter or modify the note content."
        return f"{action}: Note already exists with this content. {hint}"
    if "deck" in message and "not found" in message:
        return f"{action}: Deck not found. Create the deck first or check the deck name spelling."
    if "model" in message and "not found" in message:
        return f"{action}: Note type (model) not found. Check the modelName parameter."
    if "field" in message:
        return (
            f"{action}: Field error - {message}. "
            "Check that field names match the note type exactly (case-sensitive)."
        )
    return f"{action}: {message}"


class AnkiConnectClient:
    """Thin async client for AnkiConnect.

    The endpoint comes from the settings value passed in; there is no
    process-wide URL to mutate. Use as an async context manager so the
    underlying connection pool is closed::

        async with AnkiConnectClient(load_settings(url=url)) as client:
            decks = await client.invoke("deckNames")
    """

    def __init__(
        self,
        settings: AnkiConnectSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings if settings is not None else get_settings()
        self.url = self.settings.url
        self.version = self.settings.version
        self.timeout = self.settings.timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> AnkiConnectClient:
        self._get_http()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._http

    async def aclose(self) -> None:
        """Close the HTTP connection pool."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def invoke(self, action: str, params: dict[str, Any] | None = None) -> Any:
        """Invoke an AnkiConnect action and return its ``result``.

        Params whose value is None are left out of the request body, the same
        way an absent optional argument would be.

        Raises:
            AnkiConnectError: on transport failure, malformed response, or an
                error reported by AnkiConnect.
        """
        payload = {
            "action": action,
            "version": self.version,
            "params": {key: value for key, value in (params or {}).items() if value is not None},
        }
        logger.debug("AnkiConnect request: %s", action, extra={"extra_data": payload})

        try:
            # Serialised here rather than via json=: NaN ids must reach AnkiConnect unchanged
            response = await self._get_http().post(self.url, content=json.dumps(payload))
            data = response.json()
        except httpx.HTTPError as e:
            raise AnkiConnectError(action, f"Anki-Connect connection error: {e or type(e).__name__}") from e
        except ValueError as e:
            raise AnkiConnectError(action, f"Anki-Connect connection error: invalid JSON response ({e})") from e

        if not isinstance(data, dict):
            raise AnkiConnectError(action, f"Anki-Connect connection error: unexpected response {data!r}")

        error = data.get("error")
        if error:
            message = explain_error(action, str(error))
            logger.debug("AnkiConnect error for %s: %s", action, message)
            raise AnkiConnectError(action, message)

        return data.get("result")

    async def check_connection(self) -> bool:
        """Return True if AnkiConnect answers the ``version`` action."""
        try:
            await self.invoke("version")
            return True
        except AnkiConnectError as e:
            logger.warning("AnkiConnect unavailable at %s: %s", self.url, e.message)
            return False
