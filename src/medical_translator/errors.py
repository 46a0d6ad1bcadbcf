"""Caller-visible failures raised by the relays."""

from __future__ import annotations

from typing import Any

from fastapi import status


class RelayError(Exception):
    """Base error carrying the HTTP status and the JSON body fields."""

    code = "relay_error"

    def __init__(self, status_code: int, error: str, details: str):
        super().__init__(f"{error}: {details}")
        self.status_code = status_code
        self.error = error
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details, "code": self.code}


class ValidationError(RelayError):
    """The caller sent malformed input. Never retried."""

    code = "validation_error"

    def __init__(self, error: str, details: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, error, details)


class InvalidInput(RelayError):
    """The upstream service rejected the content of otherwise valid input."""

    code = "invalid_input"

    def __init__(self, error: str, details: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, error, details)


class ServiceUnavailable(RelayError):
    """Quota, rate limit, permission or resource exhaustion upstream."""

    code = "service_unavailable"


class TranslationFailed(RelayError):
    code = "translation_failed"

    def __init__(
        self,
        error: str = "Translation failed",
        details: str = "Unable to process translation request",
    ):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, error, details)


class SynthesisFailed(RelayError):
    code = "synthesis_failed"

    def __init__(
        self,
        error: str = "Audio generation failed",
        details: str = "Unable to convert text to speech",
    ):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, error, details)


__all__ = [
    "InvalidInput",
    "RelayError",
    "ServiceUnavailable",
    "SynthesisFailed",
    "TranslationFailed",
    "ValidationError",
]
