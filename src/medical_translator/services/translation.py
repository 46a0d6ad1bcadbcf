"""Translation relay with live (LLM) and offline (phrase table) variants."""

from __future__ import annotations

import logging
from typing import Protocol

from fastapi import status

from ..config import Settings
from ..errors import ServiceUnavailable, TranslationFailed
from ..llm_client import ChatCompletionClient, ChatCompletionError
from ..logging_config import preview
from ..prompts import system_prompt_for
from ..schemas.translation import (
    Dialect,
    Direction,
    RelayMode,
    TranslationRequest,
    TranslationResult,
)
from .phrase_table import PhraseTable

logger = logging.getLogger(__name__)

_QUOTA_CODES = {"insufficient_quota"}
_RATE_LIMIT_CODES = {"rate_limit_exceeded"}

_DIALECT_PLACEHOLDERS = {
    Dialect.MANDARIN: "{text}（请提供更详细的翻译）",
    Dialect.CANTONESE: "{text}（請提供更詳細嘅翻譯）",
}
_ENGLISH_PLACEHOLDER = '"{text}" (Please provide proper English translation)'


class TranslationRelay(Protocol):
    mode: RelayMode

    async def translate(self, request: TranslationRequest) -> TranslationResult: ...


def _log_request(request: TranslationRequest) -> None:
    logger.info(
        "Translation request (%s -> %s, %s): %r",
        request.speaker_role.value,
        request.direction.value,
        request.target_dialect.value,
        preview(request.text),
    )


class LiveTranslationRelay:
    """Translate through a chat completion model."""

    mode = RelayMode.LIVE

    def __init__(self, settings: Settings, client: ChatCompletionClient):
        self._settings = settings
        self._client = client

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        _log_request(request)
        messages = [
            {
                "role": "system",
                "content": system_prompt_for(request.target_dialect, request.direction),
            },
            {"role": "user", "content": request.text},
        ]
        try:
            reply = await self._client.complete(
                messages,
                model=self._settings.translation_model,
                temperature=self._settings.translation_temperature,
                max_tokens=self._settings.translation_max_tokens,
            )
        except ChatCompletionError as exc:
            logger.error(
                "Translation error: status=%s code=%s detail=%s",
                exc.status_code,
                exc.code,
                exc.detail,
            )
            raise self._map_error(exc) from exc

        translation = reply.strip()
        logger.info(
            "Translation completed (%s): %r",
            request.target_dialect.value,
            preview(translation),
        )
        return TranslationResult(
            translated_text=translation,
            source_text=request.text,
            direction=request.direction,
            mode=self.mode,
        )

    @staticmethod
    def _map_error(exc: ChatCompletionError) -> Exception:
        if exc.code in _QUOTA_CODES:
            return ServiceUnavailable(
                status.HTTP_429_TOO_MANY_REQUESTS,
                "Translation service temporarily unavailable",
                "Please try again in a moment",
            )
        if (
            exc.code in _RATE_LIMIT_CODES
            or exc.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        ):
            return ServiceUnavailable(
                status.HTTP_429_TOO_MANY_REQUESTS,
                "Too many requests",
                "Please wait a moment before trying again",
            )
        return TranslationFailed()


class OfflineTranslationRelay:
    """Best-effort phrase table translation used without API credentials."""

    mode = RelayMode.OFFLINE

    def __init__(self, phrase_table: PhraseTable):
        self._phrases = phrase_table

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        _log_request(request)
        if request.direction is Direction.TO_DIALECT:
            translation = self._to_dialect(request.text, request.target_dialect)
        else:
            translation = self._to_english(request.text, request.target_dialect)
        logger.info(
            "Translation completed (%s): %r",
            request.direction.value,
            preview(translation),
        )
        return TranslationResult(
            translated_text=translation,
            source_text=request.text,
            direction=request.direction,
            mode=self.mode,
        )

    def _to_dialect(self, text: str, dialect: Dialect) -> str:
        match = self._phrases.match_english(text, dialect)
        if match is not None:
            return match
        logger.info("No match found for: %r", preview(text.strip().lower()))
        return _DIALECT_PLACEHOLDERS[dialect].format(text=text)

    def _to_english(self, text: str, dialect: Dialect) -> str:
        match = self._phrases.match_chinese(text, dialect)
        if match is not None:
            return match
        logger.info("No Chinese match found for: %r", preview(text))
        return _ENGLISH_PLACEHOLDER.format(text=text)


__all__ = ["LiveTranslationRelay", "OfflineTranslationRelay", "TranslationRelay"]
