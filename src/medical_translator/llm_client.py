"""Chat completion client for OpenAI-compatible APIs."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Mapping, Optional, Sequence

import httpx
from fastapi import status

from .config import Settings

logger = logging.getLogger(__name__)


class ChatCompletionError(Exception):
    """Wrap transport or API failures when calling the completion endpoint."""

    def __init__(self, status_code: int, detail: Any, code: Optional[str] = None):
        super().__init__(str(detail))
        self.status_code = status_code
        self.detail = detail
        self.code = code


class ChatCompletionClient:
    """Client issuing non-streaming chat completions."""

    _client_lock: asyncio.Lock = asyncio.Lock()
    _client_pool: dict[tuple[str, float], httpx.AsyncClient] = {}

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def _client_key(self) -> tuple[str, float]:
        return (self._base_url, float(self._settings.request_timeout))

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._transport is not None:
            return httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.request_timeout,
            )

        key = self._client_key()
        client = self.__class__._client_pool.get(key)
        if client is not None:
            return client

        async with self.__class__._client_lock:
            client = self.__class__._client_pool.get(key)
            if client is None:
                timeout = httpx.Timeout(self._settings.request_timeout, connect=10.0)
                limits = httpx.Limits(
                    max_connections=50,
                    max_keepalive_connections=20,
                )
                client = httpx.AsyncClient(
                    timeout=timeout,
                    limits=limits,
                    http2=True,
                )
                self.__class__._client_pool[key] = client
        return client

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.openai_key_value or ''}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @property
    def _base_url(self) -> str:
        """Return the API base URL without a trailing slash."""

        return str(self._settings.openai_base_url).rstrip("/")

    async def complete(
        self,
        messages: Sequence[Mapping[str, str]],
        *,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the first choice's text for a single completion."""

        payload = {
            "model": model,
            "messages": [dict(message) for message in messages],
            "temperature": temperature,
            "max_tokens": max_tokens,
            "stream": False,
        }
        body = await self._request("POST", "/chat/completions", json=payload)
        return self._extract_text(body)

    async def list_models(self) -> dict[str, Any]:
        """Return the raw payload from the `/models` endpoint."""

        return await self._request("GET", "/models")

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        client = await self._get_http_client()
        try:
            response = await client.request(
                method,
                f"{self._base_url}{path}",
                headers=self._headers,
                **kwargs,
            )
        except httpx.HTTPError as exc:
            raise ChatCompletionError(status.HTTP_502_BAD_GATEWAY, str(exc)) from exc
        finally:
            if self._transport is not None:
                await client.aclose()

        if response.status_code >= 400:
            detail, code = self._extract_error_detail(response.content)
            logger.warning(
                "Completion API returned %s (code=%s)", response.status_code, code
            )
            raise ChatCompletionError(response.status_code, detail, code)

        try:
            return response.json()
        except ValueError as exc:
            raise ChatCompletionError(status.HTTP_502_BAD_GATEWAY, str(exc)) from exc

    @staticmethod
    def _extract_text(payload: Mapping[str, Any]) -> str:
        choices = payload.get("choices")
        if not isinstance(choices, Sequence) or not choices:
            raise ChatCompletionError(
                status.HTTP_502_BAD_GATEWAY, "Completion response missing choices"
            )
        message = choices[0].get("message") if isinstance(choices[0], Mapping) else None
        if not isinstance(message, Mapping):
            raise ChatCompletionError(
                status.HTTP_502_BAD_GATEWAY, "Completion response missing message"
            )
        content = message.get("content")
        if isinstance(content, str):
            text = content.strip()
        elif isinstance(content, Sequence):
            fragments = [
                item["text"]
                for item in content
                if isinstance(item, Mapping)
                and item.get("type") == "text"
                and isinstance(item.get("text"), str)
            ]
            text = "".join(fragments).strip()
        else:
            text = ""
        if not text:
            raise ChatCompletionError(
                status.HTTP_502_BAD_GATEWAY, "Completion response missing content"
            )
        return text

    @staticmethod
    def _extract_error_detail(raw: bytes) -> tuple[Any, Optional[str]]:
        if not raw:
            return "Completion API returned an empty error response.", None
        text = raw.decode("utf-8", errors="ignore")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            return text, None
        if not isinstance(payload, dict):
            return payload, None
        error = payload.get("error")
        if isinstance(error, dict):
            code = error.get("code") or error.get("type")
            return error.get("message") or error, code if isinstance(code, str) else None
        return error or payload, None

    @classmethod
    async def aclose_shared(cls) -> None:
        async with cls._client_lock:
            clients = list(cls._client_pool.values())
            cls._client_pool.clear()
        for client in clients:
            try:
                await client.aclose()
            except Exception as exc:  # pragma: no cover - best effort cleanup
                logger.warning("Failed to close HTTP client: %s", exc)


__all__ = ["ChatCompletionClient", "ChatCompletionError"]
