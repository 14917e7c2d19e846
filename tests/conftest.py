from __future__ import annotations

from typing import Iterator

import pytest

from cron_builder.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """
    Each test sees settings built from its own environment, not a cached copy.
    """
    monkeypatch.delenv("STRICT_TOKENS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("APP_NAME", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
