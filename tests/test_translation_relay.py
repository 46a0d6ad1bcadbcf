"""Tests for the live and offline translation relays."""

from __future__ import annotations

from typing import Any

import pytest

from medical_translator.config import Settings
from medical_translator.errors import ServiceUnavailable, TranslationFailed
from medical_translator.llm_client import ChatCompletionError
from medical_translator.prompts import SYSTEM_PROMPTS
from medical_translator.schemas.translation import (
    Dialect,
    Direction,
    RelayMode,
    SpeakerRole,
    TranslationRequest,
)
from medical_translator.services.phrase_table import default_phrase_table
from medical_translator.services.translation import (
    LiveTranslationRelay,
    OfflineTranslationRelay,
)


def _request(text: str, dialect: str, speaker: str) -> TranslationRequest:
    return TranslationRequest(
        text=text,
        target_dialect=Dialect(dialect),
        speaker_role=SpeakerRole(speaker),
    )


class FakeCompletionClient:
    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def complete(self, messages, *, model, temperature, max_tokens) -> str:
        self.calls.append(
            {
                "messages": list(messages),
                "model": model,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def offline_relay() -> OfflineTranslationRelay:
    return OfflineTranslationRelay(default_phrase_table())


@pytest.mark.asyncio
async def test_offline_doctor_hello_in_mandarin(offline_relay) -> None:
    result = await offline_relay.translate(_request("hello", "mandarin", "doctor"))

    assert result.translated_text == "你好"
    assert result.direction is Direction.TO_DIALECT
    assert result.mode is RelayMode.OFFLINE
    assert result.source_text == "hello"


@pytest.mark.asyncio
async def test_offline_patient_cantonese_headache(offline_relay) -> None:
    result = await offline_relay.translate(_request("頭痛", "cantonese", "patient"))

    assert result.translated_text == "I have a headache"
    assert result.direction is Direction.TO_ENGLISH


@pytest.mark.asyncio
async def test_offline_unmatched_english_uses_dialect_placeholder(offline_relay) -> None:
    mandarin = await offline_relay.translate(_request("xyz123", "mandarin", "doctor"))
    cantonese = await offline_relay.translate(_request("xyz123", "cantonese", "doctor"))

    assert mandarin.translated_text == "xyz123（请提供更详细的翻译）"
    assert cantonese.translated_text == "xyz123（請提供更詳細嘅翻譯）"


@pytest.mark.asyncio
async def test_offline_unmatched_chinese_uses_english_placeholder(offline_relay) -> None:
    result = await offline_relay.translate(_request("天气不错", "mandarin", "patient"))

    assert result.translated_text == '"天气不错" (Please provide proper English translation)'


@pytest.mark.asyncio
async def test_offline_prefers_full_sentence(offline_relay) -> None:
    result = await offline_relay.translate(
        _request("Take this medication twice daily with food.", "mandarin", "doctor")
    )

    assert result.translated_text == "每天随餐服用这个药物两次"


@pytest.mark.asyncio
@pytest.mark.parametrize("dialect", ["mandarin", "cantonese"])
@pytest.mark.parametrize("speaker", ["doctor", "patient"])
@pytest.mark.parametrize(
    "text", ["this is fine", "¿qué?", "{braces} and \\d+", "x" * 2000, "痛痛痛"]
)
async def test_offline_translation_never_raises(offline_relay, dialect, speaker, text):
    result = await offline_relay.translate(_request(text, dialect, speaker))

    assert result.translated_text
    assert result.mode is RelayMode.OFFLINE


@pytest.mark.asyncio
async def test_live_relay_sends_prompt_for_dialect_and_direction() -> None:
    settings = Settings(openai_api_key="sk-test", translation_model="gpt-test")
    client = FakeCompletionClient(reply="  你好。 \n")
    relay = LiveTranslationRelay(settings, client)  # type: ignore[arg-type]

    result = await relay.translate(_request("Hello.", "mandarin", "doctor"))

    assert result.translated_text == "你好。"
    assert result.mode is RelayMode.LIVE
    call = client.calls[0]
    assert call["model"] == "gpt-test"
    assert call["temperature"] == pytest.approx(0.3)
    assert call["max_tokens"] == 1000
    assert call["messages"] == [
        {
            "role": "system",
            "content": SYSTEM_PROMPTS[(Dialect.MANDARIN, Direction.TO_DIALECT)],
        },
        {"role": "user", "content": "Hello."},
    ]


@pytest.mark.asyncio
async def test_live_relay_uses_english_prompt_for_patient() -> None:
    client = FakeCompletionClient(reply="My stomach hurts")
    relay = LiveTranslationRelay(Settings(openai_api_key="sk-test"), client)  # type: ignore[arg-type]

    result = await relay.translate(_request("肚痛", "cantonese", "patient"))

    assert result.direction is Direction.TO_ENGLISH
    system_prompt = client.calls[0]["messages"][0]["content"]
    assert system_prompt == SYSTEM_PROMPTS[(Dialect.CANTONESE, Direction.TO_ENGLISH)]


def test_every_dialect_and_direction_has_a_prompt() -> None:
    for dialect in Dialect:
        for direction in Direction:
            assert SYSTEM_PROMPTS[(dialect, direction)]
    cantonese = SYSTEM_PROMPTS[(Dialect.CANTONESE, Direction.TO_DIALECT)]
    mandarin = SYSTEM_PROMPTS[(Dialect.MANDARIN, Direction.TO_DIALECT)]
    assert "Traditional Chinese" in cantonese
    assert "Simplified Chinese" in mandarin


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected_error"),
    [
        (
            ChatCompletionError(429, "quota", "insufficient_quota"),
            "Translation service temporarily unavailable",
        ),
        (
            ChatCompletionError(429, "slow down", "rate_limit_exceeded"),
            "Too many requests",
        ),
        (ChatCompletionError(429, "slow down"), "Too many requests"),
    ],
)
async def test_live_relay_maps_quota_and_rate_limits(error, expected_error) -> None:
    relay = LiveTranslationRelay(
        Settings(openai_api_key="sk-test"), FakeCompletionClient(error=error)  # type: ignore[arg-type]
    )

    with pytest.raises(ServiceUnavailable) as excinfo:
        await relay.translate(_request("hello", "mandarin", "doctor"))

    assert excinfo.value.status_code == 429
    assert excinfo.value.error == expected_error


@pytest.mark.asyncio
async def test_live_relay_hides_upstream_details() -> None:
    error = ChatCompletionError(500, "secret upstream stack trace", "server_error")
    relay = LiveTranslationRelay(
        Settings(openai_api_key="sk-test"), FakeCompletionClient(error=error)  # type: ignore[arg-type]
    )

    with pytest.raises(TranslationFailed) as excinfo:
        await relay.translate(_request("hello", "mandarin", "doctor"))

    assert excinfo.value.status_code == 500
    assert "secret" not in excinfo.value.details
    assert excinfo.value.to_payload() == {
        "error": "Translation failed",
        "details": "Unable to process translation request",
        "code": "translation_failed",
    }
