from __future__ import annotations
import asyncio
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from core.config import NOTION_API_KEY, CLIENT_CACHE_SIZE
from core.errors import ArgumentError, MissingCredentialError
from core.io_utils import pretty_json
from core.notion_api import NotionAPI
from . import dispatch

# Per-call credential override, used when no static key is configured.
CREDENTIAL_FIELD = "NOTION_API_KEY"


def success_envelope(payload: Any) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": pretty_json(payload)}], "isError": False}


def error_envelope(message: str) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": f"Error: {message}"}], "isError": True}


class ToolInvoker:
    """
    Boundary between the protocol layer and the dispatcher.

    Resolves the credential, picks a client for it, dispatches, and wraps
    the outcome in a text envelope. Nothing raised below escapes invoke().

    Clients are kept in a small LRU keyed by credential, so a call never
    sees a client built for somebody else's token.
    """

    def __init__(
        self,
        api_key: Optional[str] = NOTION_API_KEY,
        client_factory: Callable[[str], Any] = NotionAPI,
        cache_size: int = CLIENT_CACHE_SIZE,
    ) -> None:
        self.api_key = (api_key or "").strip() or None
        self._client_for = lru_cache(maxsize=max(1, cache_size))(client_factory)

    @property
    def connected(self) -> bool:
        return self.api_key is not None

    def resolve_credential(self, args: Dict[str, Any]) -> str:
        if self.api_key:
            return self.api_key
        token = args.get(CREDENTIAL_FIELD)
        if isinstance(token, str) and token.strip():
            return token.strip()
        raise MissingCredentialError()

    def client_for(self, token: str):
        return self._client_for(token)

    def invoke_sync(self, tool_name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            if args is None:
                args = {}
            if not isinstance(args, dict):
                raise ArgumentError(tool_name, "arguments must be an object")
            args = dict(args)
            token = self.resolve_credential(args)
            args.pop(CREDENTIAL_FIELD, None)
            result = dispatch(tool_name, args, self.client_for(token))
            envelope = success_envelope(result)
        except Exception as e:
            logging.warning(f"Tool {tool_name} failed: {e}")
            return error_envelope(str(e))

        logging.info(f"Tool {tool_name} ok")
        return envelope

    async def invoke(self, tool_name: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        # requests blocks; keep the event loop free for other calls.
        return await asyncio.to_thread(self.invoke_sync, tool_name, args)
