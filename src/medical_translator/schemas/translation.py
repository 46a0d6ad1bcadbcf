"""Domain types and wire models for the translation and audio endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

TRANSLATION_MAX_CHARS = 2000
AUDIO_MAX_CHARS = 1000


class Dialect(str, Enum):
    MANDARIN = "mandarin"
    CANTONESE = "cantonese"


class SpeakerRole(str, Enum):
    DOCTOR = "doctor"
    PATIENT = "patient"


class Direction(str, Enum):
    TO_DIALECT = "to_chinese"
    TO_ENGLISH = "to_english"

    @classmethod
    def for_speaker(cls, role: SpeakerRole) -> "Direction":
        return cls.TO_DIALECT if role is SpeakerRole.DOCTOR else cls.TO_ENGLISH


class RelayMode(str, Enum):
    LIVE = "live"
    OFFLINE = "offline"


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    target_dialect: Dialect
    speaker_role: SpeakerRole

    @property
    def direction(self) -> Direction:
        return Direction.for_speaker(self.speaker_role)


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str
    source_text: str
    direction: Direction
    mode: RelayMode


@dataclass(frozen=True)
class AudioRequest:
    text: str
    dialect: Dialect


@dataclass(frozen=True)
class AudioResult:
    mode: RelayMode
    audio_bytes: Optional[bytes] = None
    voice_profile: Optional[str] = None
    content_type: Optional[str] = None
    duration_seconds: Optional[int] = None
    message: Optional[str] = None


class TranslatePayload(BaseModel):
    """Body accepted by ``POST /api/translate``.

    Field values are checked by :mod:`medical_translator.validation` so that
    rejections carry the relay's own error messages.
    """

    text: Optional[Any] = None
    target_language: str = Field(default="mandarin", alias="targetLanguage")
    current_speaker: str = Field(default="doctor", alias="currentSpeaker")

    model_config = ConfigDict(populate_by_name=True)


class AudioPayload(BaseModel):
    """Body accepted by ``POST /api/audio``."""

    text: Optional[Any] = None
    target_language: str = Field(default="mandarin", alias="targetLanguage")

    model_config = ConfigDict(populate_by_name=True)


class TranslateResponse(BaseModel):
    translation: str
    original: str
    target_language: Dialect = Field(alias="targetLanguage")
    timestamp: str
    translation_direction: Optional[Direction] = Field(
        default=None, alias="translationDirection"
    )
    demo_mode: Optional[bool] = Field(default=None, alias="demoMode")

    model_config = ConfigDict(populate_by_name=True)


class AudioResponse(BaseModel):
    audio: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias="contentType")
    voice_type: Optional[str] = Field(default=None, alias="voiceType")
    language: Optional[Dialect] = None
    target_language: Optional[Dialect] = Field(default=None, alias="targetLanguage")
    duration: Optional[int] = None
    message: Optional[str] = None
    timestamp: Optional[str] = None
    demo_mode: Optional[bool] = Field(default=None, alias="demoMode")

    model_config = ConfigDict(populate_by_name=True)


class VoiceInfo(BaseModel):
    name: str
    language_codes: list[str] = Field(default_factory=list, alias="languageCodes")
    ssml_gender: Optional[str] = Field(default=None, alias="ssmlGender")
    natural_sample_rate_hertz: Optional[int] = Field(
        default=None, alias="naturalSampleRateHertz"
    )

    model_config = ConfigDict(populate_by_name=True)


class VoicesResponse(BaseModel):
    voices: list[VoiceInfo]
    demo_mode: Optional[bool] = Field(default=None, alias="demoMode")

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    status: str
    message: str
    mode: RelayMode


__all__ = [
    "AUDIO_MAX_CHARS",
    "AudioPayload",
    "AudioRequest",
    "AudioResponse",
    "AudioResult",
    "Dialect",
    "Direction",
    "HealthResponse",
    "RelayMode",
    "SpeakerRole",
    "TRANSLATION_MAX_CHARS",
    "TranslatePayload",
    "TranslateResponse",
    "TranslationRequest",
    "TranslationResult",
    "VoiceInfo",
    "VoicesResponse",
]
