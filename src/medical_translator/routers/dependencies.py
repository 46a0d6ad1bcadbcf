"""Request-scoped accessors for the relays built at startup."""

from __future__ import annotations

from fastapi import Request

from ..relays import Relays
from ..services.speech import SpeechRelay
from ..services.translation import TranslationRelay


def get_relays(request: Request) -> Relays:
    relays = getattr(request.app.state, "relays", None)
    if relays is None:  # pragma: no cover - lifespan always sets it
        raise RuntimeError("Relays are not configured")
    return relays


def get_translation_relay(request: Request) -> TranslationRelay:
    return get_relays(request).translation


def get_speech_relay(request: Request) -> SpeechRelay:
    return get_relays(request).speech
