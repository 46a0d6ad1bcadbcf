"""Speech synthesis and voice listing routes."""

from __future__ import annotations

import base64
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Query

from ..errors import RelayError, SynthesisFailed
from ..schemas.translation import (
    AudioPayload,
    AudioResponse,
    Dialect,
    RelayMode,
    VoicesResponse,
)
from ..services.speech import SpeechRelay
from ..validation import parse_audio_request
from .dependencies import get_speech_relay

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["audio"])


@router.post(
    "/audio",
    response_model=AudioResponse,
    response_model_exclude_unset=True,
)
async def generate_audio(
    payload: AudioPayload,
    relay: SpeechRelay = Depends(get_speech_relay),
) -> AudioResponse:
    """Synthesize speech for translated text."""

    request = parse_audio_request(payload.text, payload.target_language)
    try:
        result = await relay.synthesize(request)
    except RelayError:
        raise
    except Exception as exc:
        logger.exception("Unexpected audio generation failure")
        raise SynthesisFailed() from exc

    if result.mode is RelayMode.OFFLINE or result.audio_bytes is None:
        return AudioResponse(
            audio=None,
            message=result.message,
            target_language=request.dialect,
            demo_mode=True,
        )

    return AudioResponse(
        audio=base64.b64encode(result.audio_bytes).decode("ascii"),
        content_type=result.content_type,
        voice_type=result.voice_profile,
        language=request.dialect,
        duration=result.duration_seconds,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get(
    "/voices",
    response_model=VoicesResponse,
    response_model_exclude_unset=True,
)
async def list_voices(
    language: Dialect = Query(default=Dialect.CANTONESE),
    relay: SpeechRelay = Depends(get_speech_relay),
) -> VoicesResponse:
    """List the TTS voices available for a dialect's locale."""

    voices = await relay.list_voices(language)
    fields: dict[str, Any] = {"voices": voices}
    if relay.mode is RelayMode.OFFLINE:
        fields["demo_mode"] = True
    return VoicesResponse(**fields)
