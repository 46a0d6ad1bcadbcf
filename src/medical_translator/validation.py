"""Validation of incoming translate and audio request bodies."""

from __future__ import annotations

from typing import Any

from .errors import ValidationError
from .schemas.translation import (
    AUDIO_MAX_CHARS,
    TRANSLATION_MAX_CHARS,
    AudioRequest,
    Dialect,
    SpeakerRole,
    TranslationRequest,
)

_SUPPORTED_LANGUAGES = ", ".join(d.value for d in Dialect)
_SUPPORTED_SPEAKERS = ", ".join(r.value for r in SpeakerRole)


def _require_text(text: Any, *, error: str, details: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(error, details)
    return text


def _parse_dialect(value: Any, *, error: str) -> Dialect:
    try:
        return Dialect(value)
    except ValueError:
        raise ValidationError(
            error, f"Supported languages: {_SUPPORTED_LANGUAGES}"
        ) from None


def parse_translation_request(
    text: Any, target_language: Any, current_speaker: Any
) -> TranslationRequest:
    """Return a validated translation request or raise ``ValidationError``."""

    text = _require_text(
        text,
        error="Valid text is required",
        details="Please provide non-empty text to translate",
    )
    if len(text) > TRANSLATION_MAX_CHARS:
        raise ValidationError(
            "Text too long",
            f"Please limit input to {TRANSLATION_MAX_CHARS} characters or less",
        )
    dialect = _parse_dialect(target_language, error="Invalid target language")
    try:
        role = SpeakerRole(current_speaker)
    except ValueError:
        raise ValidationError(
            "Invalid speaker role", f"Supported speakers: {_SUPPORTED_SPEAKERS}"
        ) from None
    return TranslationRequest(text=text, target_dialect=dialect, speaker_role=role)


def parse_audio_request(text: Any, target_language: Any) -> AudioRequest:
    """Return a validated audio request or raise ``ValidationError``."""

    text = _require_text(
        text,
        error="Valid text is required for audio generation",
        details="Please provide non-empty text to convert to speech",
    )
    if len(text) > AUDIO_MAX_CHARS:
        raise ValidationError(
            "Text too long for audio generation",
            f"Please limit text to {AUDIO_MAX_CHARS} characters or less",
        )
    dialect = _parse_dialect(
        target_language, error="Invalid target language for audio"
    )
    return AudioRequest(text=text, dialect=dialect)


__all__ = ["parse_audio_request", "parse_translation_request"]
