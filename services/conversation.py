# services/conversation.py
from typing import Dict, Any, Optional
import requests

from config import Settings
from models import ConversationPayload

class ConversationError(Exception):
    """Upstream conversation failure; code is None when no HTTP reply was received."""

    def __init__(self, code: Optional[int], body: Dict[str, Any]):
        super().__init__(body.get("error") or f"conversation error {code}")
        self.code = code
        self.body = body

class ConversationClient:
    def __init__(self, settings: Settings):
        self.url = settings.conversation_url.rstrip("/")
        self.version_date = settings.conversation_version_date
        self.timeout = settings.http_timeout
        if settings.conversation_apikey:
            self.auth = ("apikey", settings.conversation_apikey)
        elif settings.conversation_username:
            self.auth = (settings.conversation_username, settings.conversation_password or "")
        else:
            self.auth = None
            print("[WARN] No conversation credentials configured; requests will be unauthenticated")

    def message(self, payload: ConversationPayload) -> Dict[str, Any]:
        """
        Send one turn to the workspace and return the JSON reply unchanged.
        Raises ConversationError for transport failures and non-2xx replies.
        """
        url = f"{self.url}/v1/workspaces/{payload.workspace_id}/message"
        body = {"input": payload.input, "context": payload.context}

        try:
            r = requests.post(
                url,
                params={"version": self.version_date},
                json=body,
                auth=self.auth,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            print(f"[ERROR] Conversation request failed: {e}")
            raise ConversationError(None, {"error": str(e)}) from e

        try:
            data = r.json()
        except ValueError:
            data = None

        if not r.ok:
            print(f"[ERROR] Conversation service returned {r.status_code}")
            if not isinstance(data, dict):
                data = {"error": r.text or r.reason, "code": r.status_code}
            raise ConversationError(r.status_code, data)

        if not isinstance(data, dict):
            raise ConversationError(r.status_code, {"error": "conversation_invalid_json"})

        return data
