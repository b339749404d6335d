"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import replace

import pytest

from config import Settings
from tests.helpers import CONVERSATION_URL, WEATHER_URL


@pytest.fixture
def settings() -> Settings:
    return Settings(
        weather_url=WEATHER_URL,
        workspace_id="ws-123",
        conversation_url=CONVERSATION_URL,
        conversation_username="user",
        conversation_password="pass",
    )


@pytest.fixture
def unconfigured_settings(settings) -> Settings:
    return replace(settings, workspace_id="<workspace-id>")
