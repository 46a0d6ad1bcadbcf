"""Speech synthesis relay backed by Google Cloud Text-to-Speech."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional, Protocol
from xml.sax.saxutils import escape

from fastapi import status
from google.api_core import exceptions as google_exceptions
from google.cloud import texttospeech

from ..errors import InvalidInput, ServiceUnavailable, SynthesisFailed
from ..logging_config import preview
from ..schemas.translation import AudioRequest, AudioResult, Dialect, RelayMode, VoiceInfo

logger = logging.getLogger(__name__)

AUDIO_CONTENT_TYPE = "audio/mp3"
# Assumed characters spoken per second for the duration estimate.
CHARS_PER_SECOND = 8
SAMPLE_RATE_HERTZ = 24000
EFFECTS_PROFILE = "telephony-class-application"


@dataclass(frozen=True)
class VoiceCandidate:
    """One voice to try. ``name=None`` selects the language's default voice."""

    name: Optional[str]
    tier: str


@dataclass(frozen=True)
class DialectVoices:
    language_code: str
    candidates: tuple[VoiceCandidate, ...]


VOICE_CANDIDATES = MappingProxyType(
    {
        Dialect.MANDARIN: DialectVoices(
            language_code="zh-CN",
            candidates=(
                VoiceCandidate("zh-CN-Neural2-A", "Neural2"),
                VoiceCandidate("zh-CN-Wavenet-A", "Wavenet"),
                VoiceCandidate(None, "Standard"),
            ),
        ),
        Dialect.CANTONESE: DialectVoices(
            language_code="zh-HK",
            candidates=(
                VoiceCandidate("zh-HK-Neural2-A", "Neural2"),
                VoiceCandidate("zh-HK-HiuMaan", "Premium"),
                VoiceCandidate("zh-HK-HiuGaai", "Standard"),
                VoiceCandidate(None, "Basic"),
            ),
        ),
    }
)


class EmptyAudioError(RuntimeError):
    """The TTS service answered without any audio content."""


def build_ssml(text: str) -> str:
    """Wrap ``text`` in slowed, lowered prosody with a trailing pause."""

    return (
        "<speak>"
        '<prosody rate="85%" pitch="-2st" volume="medium">'
        f'<emphasis level="moderate">{escape(text.strip())}</emphasis>'
        "</prosody>"
        '<break time="500ms"/>'
        "</speak>"
    )


def estimate_duration(text: str) -> int:
    return math.ceil(len(text) / CHARS_PER_SECOND)


class SpeechRelay(Protocol):
    mode: RelayMode

    async def synthesize(self, request: AudioRequest) -> AudioResult: ...

    async def list_voices(self, dialect: Dialect) -> list[VoiceInfo]: ...


class LiveSpeechRelay:
    """Synthesize audio, falling back through each dialect's voice candidates."""

    mode = RelayMode.LIVE

    def __init__(self, client: Any, voices=VOICE_CANDIDATES):
        # ``client`` is a ``texttospeech.TextToSpeechAsyncClient`` or compatible
        self._client = client
        self._voices = voices

    async def synthesize(self, request: AudioRequest) -> AudioResult:
        logger.info(
            "Audio generation request (%s): %r",
            request.dialect.value,
            preview(request.text, 50),
        )
        config = self._voices[request.dialect]
        synthesis_input = texttospeech.SynthesisInput(ssml=build_ssml(request.text))
        audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding.MP3,
            speaking_rate=0.85,
            pitch=-2.0,
            volume_gain_db=1.0,
            sample_rate_hertz=SAMPLE_RATE_HERTZ,
            effects_profile_id=[EFFECTS_PROFILE],
        )

        last_error: Optional[Exception] = None
        for candidate in config.candidates:
            voice_kwargs: dict[str, Any] = {
                "language_code": config.language_code,
                "ssml_gender": texttospeech.SsmlVoiceGender.FEMALE,
            }
            if candidate.name:
                voice_kwargs["name"] = candidate.name
            voice = texttospeech.VoiceSelectionParams(**voice_kwargs)
            try:
                response = await self._client.synthesize_speech(
                    input=synthesis_input,
                    voice=voice,
                    audio_config=audio_config,
                )
                if not response.audio_content:
                    raise EmptyAudioError(
                        "No audio content received from TTS service"
                    )
            except Exception as exc:
                logger.warning(
                    "%s voice failed (%s), trying next option: %s",
                    candidate.tier,
                    request.dialect.value,
                    exc,
                )
                last_error = exc
                continue

            voice_profile = f"{candidate.tier} ({request.dialect.value})"
            logger.info(
                "Audio generated with %s voice: %d bytes",
                voice_profile,
                len(response.audio_content),
            )
            return AudioResult(
                mode=self.mode,
                audio_bytes=bytes(response.audio_content),
                voice_profile=voice_profile,
                content_type=AUDIO_CONTENT_TYPE,
                duration_seconds=estimate_duration(request.text),
            )

        logger.error("All voice options failed (%s): %s", request.dialect.value, last_error)
        raise map_tts_error(last_error) from last_error

    async def list_voices(self, dialect: Dialect) -> list[VoiceInfo]:
        language_code = self._voices[dialect].language_code
        try:
            response = await self._client.list_voices(language_code=language_code)
        except Exception as exc:
            logger.error("Error listing voices: %s", exc)
            raise SynthesisFailed(
                "Failed to list voices", "Unable to retrieve voices"
            ) from exc
        return [
            voice_info(voice)
            for voice in response.voices
            if any(code.startswith(language_code) for code in voice.language_codes)
        ]


class OfflineSpeechRelay:
    """Skip synthesis so the caller can use a local voice instead."""

    mode = RelayMode.OFFLINE

    async def synthesize(self, request: AudioRequest) -> AudioResult:
        logger.info("Audio generation skipped (demo mode) - %s", request.dialect.value)
        return AudioResult(
            mode=self.mode,
            message=f'Demo mode: Audio would be generated for "{preview(request.text, 30)}"',
        )

    async def list_voices(self, dialect: Dialect) -> list[VoiceInfo]:
        return []


def voice_info(voice: Any) -> VoiceInfo:
    gender = getattr(voice, "ssml_gender", None)
    return VoiceInfo(
        name=voice.name,
        language_codes=list(voice.language_codes),
        ssml_gender=getattr(gender, "name", None) if gender is not None else None,
        natural_sample_rate_hertz=getattr(voice, "natural_sample_rate_hertz", None),
    )


def map_tts_error(exc: Optional[Exception]) -> Exception:
    """Translate the final TTS failure into a caller-visible error."""

    if isinstance(exc, google_exceptions.InvalidArgument):
        return InvalidInput(
            "Invalid text for audio generation",
            "The text may contain unsupported characters or formatting",
        )
    if isinstance(exc, google_exceptions.PermissionDenied):
        return ServiceUnavailable(
            status.HTTP_403_FORBIDDEN,
            "Audio service not available",
            "Text-to-speech service access is not configured",
        )
    if isinstance(exc, google_exceptions.ResourceExhausted):
        return ServiceUnavailable(
            status.HTTP_429_TOO_MANY_REQUESTS,
            "Audio service temporarily unavailable",
            "Please try again in a moment",
        )
    return SynthesisFailed()


__all__ = [
    "AUDIO_CONTENT_TYPE",
    "EmptyAudioError",
    "LiveSpeechRelay",
    "OfflineSpeechRelay",
    "SpeechRelay",
    "VOICE_CANDIDATES",
    "VoiceCandidate",
    "build_ssml",
    "estimate_duration",
    "map_tts_error",
]
