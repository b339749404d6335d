from typing import Dict, Any, List

from enrichment import update_message
from models import ConversationPayload
from services.conversation import ConversationClient
from services.weather import WeatherClient

class ConversationSession:
    """Console counterpart of the browser client: carries dialog context between turns."""

    def __init__(self, conversation: ConversationClient, weather: WeatherClient, workspace_id: str):
        self.conversation = conversation
        self.weather = weather
        self.workspace_id = workspace_id
        self.context: Dict[str, Any] = {}

    def ask(self, text: str = "") -> List[str]:
        # Empty text sends {} so the workspace's welcome node fires on the first turn
        payload = ConversationPayload(
            workspace_id=self.workspace_id,
            context=self.context,
            input={"text": text} if text else {},
        )
        data = self.conversation.message(payload)
        data = update_message(payload, data, self.weather)
        self.context = data.get("context") or self.context

        output = data["output"] if isinstance(data["output"], dict) else {}
        text_out = output.get("text") or []
        if isinstance(text_out, str):
            return [text_out]
        return [t for t in text_out if t]
