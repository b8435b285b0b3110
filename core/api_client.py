# core/api_client.py
"""
Thin async HTTP wrapper around the institute's REST API.

Every call goes through :meth:`ApiClient.request`, which applies the base URL
and auth header, decodes the JSON body, and turns transport failures and
non-2xx responses into :class:`ApiError`. Callers above this layer never see
raw ``httpx`` exceptions.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

# (field name, (filename, content, content type))
FileField = Tuple[str, Tuple[str, bytes, str]]
TokenProvider = Callable[[], Optional[str]]


def multipart_parts(data: Optional[Dict[str, str]], files: Optional[List[FileField]]) -> List[Tuple[str, tuple]]:
    """
    Text fields become nameless-file parts so httpx always encodes
    multipart/form-data, even when no upload is attached.
    """
    parts: List[Tuple[str, tuple]] = [(name, (None, str(value))) for name, value in (data or {}).items()]
    parts.extend(files or [])
    return parts


class ApiError(Exception):
    """A failed API call; ``server_message`` is the ``{error}`` text when the server sent one."""

    def __init__(self, message: str, status_code: Optional[int] = None, server_message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message

    def user_message(self, fallback: str) -> str:
        return self.server_message or fallback


def _server_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        msg = body.get("error") or body.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    return None


class ApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        token_provider: Optional[TokenProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token_provider = token_provider
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self.token_provider() if self.token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        data: Optional[Dict[str, str]] = None,
        files: Optional[List[FileField]] = None,
    ) -> Any:
        logger.debug("%s %s", method, path)
        if data is not None or files:
            files, data = multipart_parts(data, files), None
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, json=json, data=data, files=files or None)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            msg = _server_message(e.response)
            raise ApiError(
                f"{method} {path} failed with HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                server_message=msg,
            ) from e
        except httpx.HTTPError as e:
            raise ApiError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"{method} {path} returned a non-JSON body", status_code=response.status_code) from e

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, **kwargs) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
