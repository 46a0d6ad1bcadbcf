"""Tests for the speech synthesis relay and its voice fallback."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from google.api_core import exceptions as google_exceptions
from google.cloud import texttospeech

from medical_translator.errors import InvalidInput, ServiceUnavailable, SynthesisFailed
from medical_translator.schemas.translation import AudioRequest, Dialect, RelayMode
from medical_translator.services.speech import (
    VOICE_CANDIDATES,
    EmptyAudioError,
    LiveSpeechRelay,
    OfflineSpeechRelay,
    build_ssml,
    estimate_duration,
)


class FakeTTSClient:
    """Returns queued outcomes in order, one per synthesize call."""

    def __init__(self, outcomes: list[Any], voices: list[Any] | None = None) -> None:
        self.outcomes = list(outcomes)
        self.voices = voices or []
        self.calls: list[dict[str, Any]] = []

    async def synthesize_speech(self, *, input, voice, audio_config):
        self.calls.append({"input": input, "voice": voice, "audio_config": audio_config})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return SimpleNamespace(audio_content=outcome)

    async def list_voices(self, *, language_code):
        self.list_language_code = language_code
        return SimpleNamespace(voices=self.voices)


def _request(text: str = "你好", dialect: Dialect = Dialect.MANDARIN) -> AudioRequest:
    return AudioRequest(text=text, dialect=dialect)


def test_ssml_envelope_slows_and_lowers_speech() -> None:
    ssml = build_ssml("  请深呼吸 ")

    assert ssml.startswith("<speak>")
    assert 'rate="85%"' in ssml
    assert 'pitch="-2st"' in ssml
    assert '<emphasis level="moderate">请深呼吸</emphasis>' in ssml
    assert ssml.endswith('<break time="500ms"/></speak>')


def test_ssml_escapes_markup_in_text() -> None:
    ssml = build_ssml("BP < 120 & HR > 60")

    assert "BP &lt; 120 &amp; HR &gt; 60" in ssml


def test_duration_estimate() -> None:
    assert estimate_duration("a" * 8) == 1
    assert estimate_duration("a" * 9) == 2


@pytest.mark.asyncio
async def test_first_voice_success_stops_cascade() -> None:
    client = FakeTTSClient([b"mp3-bytes"])
    relay = LiveSpeechRelay(client)

    result = await relay.synthesize(_request("你好" * 5))

    assert result.mode is RelayMode.LIVE
    assert result.audio_bytes == b"mp3-bytes"
    assert result.voice_profile == "Neural2 (mandarin)"
    assert result.content_type == "audio/mp3"
    assert result.duration_seconds == 2
    assert len(client.calls) == 1
    call = client.calls[0]
    assert call["voice"].name == "zh-CN-Neural2-A"
    assert call["voice"].language_code == "zh-CN"
    assert call["audio_config"].audio_encoding == texttospeech.AudioEncoding.MP3
    assert "<speak>" in call["input"].ssml


@pytest.mark.asyncio
async def test_falls_back_to_second_voice_after_error() -> None:
    client = FakeTTSClient([google_exceptions.NotFound("no such voice"), b"audio"])
    relay = LiveSpeechRelay(client)

    result = await relay.synthesize(_request(dialect=Dialect.CANTONESE))

    assert result.voice_profile == "Premium (cantonese)"
    assert [c["voice"].name for c in client.calls] == [
        "zh-HK-Neural2-A",
        "zh-HK-HiuMaan",
    ]


@pytest.mark.asyncio
async def test_empty_audio_counts_as_failure() -> None:
    client = FakeTTSClient([b"", b"audio"])
    relay = LiveSpeechRelay(client)

    result = await relay.synthesize(_request())

    assert result.voice_profile == "Wavenet (mandarin)"
    assert len(client.calls) == 2


@pytest.mark.asyncio
async def test_default_voice_sentinel_omits_name() -> None:
    client = FakeTTSClient(
        [RuntimeError("a"), RuntimeError("b"), b"audio"],
    )
    relay = LiveSpeechRelay(client)

    result = await relay.synthesize(_request())

    assert result.voice_profile == "Standard (mandarin)"
    assert client.calls[-1]["voice"].name == ""
    assert client.calls[-1]["voice"].language_code == "zh-CN"


@pytest.mark.asyncio
async def test_all_voices_failing_surfaces_last_error() -> None:
    last = google_exceptions.ResourceExhausted("quota")
    outcomes = [RuntimeError("first"), RuntimeError("second"), RuntimeError("third"), last]
    relay = LiveSpeechRelay(FakeTTSClient(outcomes))

    with pytest.raises(ServiceUnavailable) as excinfo:
        await relay.synthesize(_request(dialect=Dialect.CANTONESE))

    assert excinfo.value.status_code == 429
    assert excinfo.value.error == "Audio service temporarily unavailable"
    assert excinfo.value.__cause__ is last


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected_type", "status_code"),
    [
        (google_exceptions.InvalidArgument("bad ssml"), InvalidInput, 400),
        (google_exceptions.PermissionDenied("denied"), ServiceUnavailable, 403),
        (google_exceptions.InternalServerError("boom"), SynthesisFailed, 500),
        (EmptyAudioError("empty"), SynthesisFailed, 500),
    ],
)
async def test_last_error_mapping(error, expected_type, status_code) -> None:
    count = len(VOICE_CANDIDATES[Dialect.MANDARIN].candidates)
    outcomes = [RuntimeError("earlier")] * (count - 1) + [error]
    relay = LiveSpeechRelay(FakeTTSClient(outcomes))

    with pytest.raises(expected_type) as excinfo:
        await relay.synthesize(_request())

    assert excinfo.value.status_code == status_code


@pytest.mark.asyncio
async def test_list_voices_filters_to_locale() -> None:
    voices = [
        SimpleNamespace(
            name="zh-HK-HiuMaan",
            language_codes=["zh-HK"],
            ssml_gender=texttospeech.SsmlVoiceGender.FEMALE,
            natural_sample_rate_hertz=24000,
        ),
        SimpleNamespace(
            name="cmn-CN-Wavenet-A",
            language_codes=["cmn-CN"],
            ssml_gender=texttospeech.SsmlVoiceGender.FEMALE,
            natural_sample_rate_hertz=24000,
        ),
    ]
    client = FakeTTSClient([], voices=voices)

    result = await LiveSpeechRelay(client).list_voices(Dialect.CANTONESE)

    assert client.list_language_code == "zh-HK"
    assert [v.name for v in result] == ["zh-HK-HiuMaan"]
    assert result[0].ssml_gender == "FEMALE"


@pytest.mark.asyncio
async def test_offline_relay_skips_synthesis() -> None:
    relay = OfflineSpeechRelay()

    result = await relay.synthesize(_request("请深呼吸，然后慢慢地呼气。这是一个很长的句子，需要截断。请再重复一次这个句子。"))

    assert result.mode is RelayMode.OFFLINE
    assert result.audio_bytes is None
    assert result.voice_profile is None
    assert result.message.startswith('Demo mode: Audio would be generated for "')
    assert result.message.endswith('..."')
    assert await relay.list_voices(Dialect.MANDARIN) == []
