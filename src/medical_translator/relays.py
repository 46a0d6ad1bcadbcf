"""Select live or offline relays once, based on configured credentials."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from google.cloud import texttospeech
from google.oauth2 import service_account

from .config import Settings
from .llm_client import ChatCompletionClient
from .schemas.translation import Dialect, RelayMode
from .services.phrase_table import PhraseTable, default_phrase_table
from .services.speech import (
    VOICE_CANDIDATES,
    LiveSpeechRelay,
    OfflineSpeechRelay,
    SpeechRelay,
)
from .services.translation import (
    LiveTranslationRelay,
    OfflineTranslationRelay,
    TranslationRelay,
)

logger = logging.getLogger(__name__)


@dataclass
class Relays:
    mode: RelayMode
    translation: TranslationRelay
    speech: SpeechRelay
    llm_client: Optional[ChatCompletionClient] = None
    tts_client: Any = None
    missing_credentials: list[str] = field(default_factory=list)

    async def verify(self) -> None:
        """Check that both upstream services answer. Live mode only."""

        if self.mode is not RelayMode.LIVE or self.llm_client is None:
            logger.info("API connection tests skipped (demo mode)")
            return
        await self.llm_client.list_models()
        logger.info("Translation API connection verified")
        await self.speech.list_voices(Dialect.MANDARIN)
        logger.info("Text-to-speech connection verified")

    async def aclose(self) -> None:
        if self.llm_client is not None:
            await ChatCompletionClient.aclose_shared()
        transport = getattr(self.tts_client, "transport", None)
        close: Optional[Callable[[], Awaitable[None]]] = getattr(transport, "close", None)
        if close is not None:
            await close()


def load_tts_client(credentials_path: Path) -> texttospeech.TextToSpeechAsyncClient:
    credentials = service_account.Credentials.from_service_account_file(
        str(Path(credentials_path).expanduser().resolve())
    )
    return texttospeech.TextToSpeechAsyncClient(credentials=credentials)


def build_relays(
    settings: Settings,
    *,
    phrase_table: PhraseTable | None = None,
    tts_client_factory: Callable[[Path], Any] = load_tts_client,
) -> Relays:
    """Build the translation and speech relays for this process."""

    missing = settings.missing_credentials()
    if missing:
        if settings.require_live_mode:
            raise RuntimeError(
                "Live mode is required but credentials are missing: "
                + ", ".join(missing)
            )
        logger.warning("Running in DEMO MODE - using phrase table responses")
        logger.warning("Missing API keys: %s", ", ".join(missing))
        return Relays(
            mode=RelayMode.OFFLINE,
            translation=OfflineTranslationRelay(phrase_table or default_phrase_table()),
            speech=OfflineSpeechRelay(),
            missing_credentials=missing,
        )

    llm_client = ChatCompletionClient(settings)
    tts_client = tts_client_factory(Path(str(settings.google_application_credentials)))
    logger.info("Translation and text-to-speech clients initialized")
    return Relays(
        mode=RelayMode.LIVE,
        translation=LiveTranslationRelay(settings, llm_client),
        speech=LiveSpeechRelay(tts_client, VOICE_CANDIDATES),
        llm_client=llm_client,
        tts_client=tts_client,
    )


__all__ = ["Relays", "build_relays", "load_tts_client"]
