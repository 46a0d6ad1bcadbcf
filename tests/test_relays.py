"""Tests for choosing live or offline relays at startup."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from medical_translator.config import PLACEHOLDER_API_KEY, Settings
from medical_translator.relays import Relays, build_relays
from medical_translator.schemas.translation import RelayMode
from medical_translator.services.speech import LiveSpeechRelay, OfflineSpeechRelay
from medical_translator.services.translation import (
    LiveTranslationRelay,
    OfflineTranslationRelay,
)


def test_missing_credentials_select_offline(offline_settings: Settings) -> None:
    relays = build_relays(offline_settings)

    assert relays.mode is RelayMode.OFFLINE
    assert isinstance(relays.translation, OfflineTranslationRelay)
    assert isinstance(relays.speech, OfflineSpeechRelay)
    assert relays.missing_credentials == [
        "OPENAI_API_KEY",
        "GOOGLE_APPLICATION_CREDENTIALS",
    ]


def test_placeholder_key_counts_as_missing(tmp_path: Path) -> None:
    credentials = tmp_path / "sa.json"
    credentials.write_text("{}", encoding="utf-8")
    settings = Settings(
        openai_api_key=PLACEHOLDER_API_KEY,
        google_application_credentials=credentials,
    )

    relays = build_relays(settings, tts_client_factory=lambda path: pytest.fail())

    assert relays.mode is RelayMode.OFFLINE
    assert relays.missing_credentials == ["OPENAI_API_KEY"]


def test_require_live_mode_refuses_offline() -> None:
    settings = Settings(
        openai_api_key=None,
        google_application_credentials=None,
        require_live_mode=True,
    )

    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        build_relays(settings)


def test_credentials_select_live(live_settings: Settings) -> None:
    seen: list[Path] = []
    fake_client = SimpleNamespace()

    def factory(path: Path):
        seen.append(path)
        return fake_client

    relays = build_relays(live_settings, tts_client_factory=factory)

    assert relays.mode is RelayMode.LIVE
    assert isinstance(relays.translation, LiveTranslationRelay)
    assert isinstance(relays.speech, LiveSpeechRelay)
    assert relays.tts_client is fake_client
    assert seen == [live_settings.google_application_credentials]
    assert relays.missing_credentials == []


@pytest.mark.asyncio
async def test_offline_verify_and_close_are_noops(offline_settings: Settings) -> None:
    relays = build_relays(offline_settings)

    await relays.verify()
    await relays.aclose()


@pytest.mark.asyncio
async def test_live_verify_checks_both_services() -> None:
    calls: list[str] = []

    class FakeLLM:
        async def list_models(self):
            calls.append("models")
            return {"data": []}

    class FakeSpeech:
        mode = RelayMode.LIVE

        async def list_voices(self, dialect):
            calls.append(f"voices:{dialect.value}")
            return []

    relays = Relays(
        mode=RelayMode.LIVE,
        translation=object(),
        speech=FakeSpeech(),
        llm_client=FakeLLM(),
    )

    await relays.verify()

    assert calls == ["models", "voices:mandarin"]
