import pathlib
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from medical_translator.config import Settings, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def offline_settings() -> Settings:
    """Settings with no credentials, which selects the phrase table relays."""

    return Settings(
        openai_api_key=None,
        google_application_credentials=None,
        verify_connections=False,
    )


@pytest.fixture
def live_settings(tmp_path: Path) -> Settings:
    credentials = tmp_path / "sa.json"
    credentials.write_text("{}", encoding="utf-8")
    return Settings(
        openai_api_key="sk-test",
        openai_base_url="https://llm.example.com/v1",
        google_application_credentials=credentials,
        verify_connections=False,
    )
