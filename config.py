import json
import os
from dataclasses import dataclass
from typing import Optional, Dict, Any
from dotenv import load_dotenv

WORKSPACE_PLACEHOLDER = "<workspace-id>"
DEFAULT_CONVERSATION_URL = "https://gateway.watsonplatform.net/conversation/api"
DEFAULT_VERSION_DATE = "2016-10-21"

@dataclass(frozen=True)
class Settings:
    weather_url: str
    workspace_id: Optional[str] = WORKSPACE_PLACEHOLDER
    conversation_url: str = DEFAULT_CONVERSATION_URL
    conversation_version_date: str = DEFAULT_VERSION_DATE
    conversation_username: Optional[str] = None
    conversation_password: Optional[str] = None
    conversation_apikey: Optional[str] = None
    http_timeout: Optional[float] = None
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def workspace_configured(self) -> bool:
        return bool(self.workspace_id) and self.workspace_id != WORKSPACE_PLACEHOLDER

def _parse_vcap(raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        raise ValueError("VCAP_SERVICES not set in environment")
    try:
        vcap = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"VCAP_SERVICES is not valid JSON: {e}") from e
    if not isinstance(vcap, dict):
        raise ValueError("VCAP_SERVICES must be a JSON object")
    return vcap

def _service_credentials(vcap: Dict[str, Any], name: str) -> Dict[str, Any]:
    bindings = vcap.get(name) or []
    if not isinstance(bindings, list) or not bindings:
        return {}
    first = bindings[0] if isinstance(bindings[0], dict) else {}
    return first.get("credentials") or {}

def _number(env: Dict[str, str], name: str, cast, default=None):
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        kind = "an integer" if cast is int else "a number"
        raise ValueError(f"{name} must be {kind}, got {raw!r}") from e

def load_settings(env: Optional[Dict[str, str]] = None) -> Settings:
    """
    Build the process-wide Settings once at startup.
    Raises ValueError when the weather service binding is missing or malformed.
    """
    if env is None:
        # Loads .env into process env; safe to call multiple times
        load_dotenv()
        env = os.environ

    vcap = _parse_vcap(env.get("VCAP_SERVICES"))
    weather_url = _service_credentials(vcap, "weatherinsights").get("url")
    if not weather_url:
        raise ValueError("VCAP_SERVICES has no weatherinsights[0].credentials.url")

    conv = _service_credentials(vcap, "conversation")
    timeout = _number(env, "HTTP_TIMEOUT", float) if env.get("HTTP_TIMEOUT") else None

    return Settings(
        weather_url=weather_url.rstrip("/"),
        workspace_id=env.get("WORKSPACE_ID") or WORKSPACE_PLACEHOLDER,
        conversation_url=env.get("CONVERSATION_URL") or conv.get("url") or DEFAULT_CONVERSATION_URL,
        conversation_version_date=env.get("CONVERSATION_VERSION_DATE") or DEFAULT_VERSION_DATE,
        conversation_username=env.get("CONVERSATION_USERNAME") or conv.get("username"),
        conversation_password=env.get("CONVERSATION_PASSWORD") or conv.get("password"),
        conversation_apikey=env.get("CONVERSATION_APIKEY") or conv.get("apikey"),
        http_timeout=timeout,
        host=env.get("HOST", "0.0.0.0"),
        port=_number(env, "PORT", int, 3000),
    )
