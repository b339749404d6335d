"""Tests for settings loading."""

from __future__ import annotations

import json

import pytest

from config import DEFAULT_CONVERSATION_URL, Settings, load_settings

VCAP = json.dumps({
    "weatherinsights": [{"credentials": {"url": "https://u:p@twcservice.example.test/"}}],
    "conversation": [{"credentials": {"url": "https://conv.example.test/api", "username": "cu", "password": "cp"}}],
})


def test_load_settings_from_env():
    s = load_settings({"VCAP_SERVICES": VCAP, "WORKSPACE_ID": "ws-1", "HTTP_TIMEOUT": "5", "PORT": "8080"})

    assert s.weather_url == "https://u:p@twcservice.example.test"
    assert s.workspace_id == "ws-1"
    assert s.workspace_configured
    assert s.conversation_url == "https://conv.example.test/api"
    assert (s.conversation_username, s.conversation_password) == ("cu", "cp")
    assert s.http_timeout == 5.0
    assert s.port == 8080


def test_env_credentials_override_binding():
    s = load_settings({"VCAP_SERVICES": VCAP, "CONVERSATION_USERNAME": "eu", "CONVERSATION_PASSWORD": "ep"})
    assert (s.conversation_username, s.conversation_password) == ("eu", "ep")


def test_defaults_without_conversation_binding():
    vcap = json.dumps({"weatherinsights": [{"credentials": {"url": "https://w.example.test"}}]})
    s = load_settings({"VCAP_SERVICES": vcap})

    assert s.workspace_id == "<workspace-id>"
    assert not s.workspace_configured
    assert s.conversation_url == DEFAULT_CONVERSATION_URL
    assert s.conversation_version_date == "2016-10-21"
    assert s.http_timeout is None


@pytest.mark.parametrize("env", [
    {},
    {"VCAP_SERVICES": "{not json"},
    {"VCAP_SERVICES": "[]"},
    {"VCAP_SERVICES": json.dumps({"conversation": []})},
    {"VCAP_SERVICES": json.dumps({"weatherinsights": [{"credentials": {}}]})},
])
def test_missing_weather_binding_is_fatal(env):
    with pytest.raises(ValueError):
        load_settings(env)


def test_workspace_configured():
    assert not Settings(weather_url="x", workspace_id="").workspace_configured
    assert not Settings(weather_url="x", workspace_id=None).workspace_configured
    assert Settings(weather_url="x", workspace_id="abc").workspace_configured


@pytest.mark.parametrize("name,value,message", [
    ("HTTP_TIMEOUT", "abc", "HTTP_TIMEOUT must be a number"),
    ("PORT", "", "PORT must be an integer"),
    ("PORT", "eighty", "PORT must be an integer"),
])
def test_bad_numeric_setting_names_variable(name, value, message):
    with pytest.raises(ValueError, match=message):
        load_settings({"VCAP_SERVICES": VCAP, name: value})
