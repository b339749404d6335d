# app.py
from typing import Optional
from urllib.parse import urlparse
from flask import Flask, request, jsonify
from flask_cors import CORS

from config import Settings, load_settings
from enrichment import update_message
from models import ConversationPayload
from services.conversation import ConversationClient, ConversationError
from services.weather import WeatherClient

NOT_CONFIGURED_TEXT = (
    "The app has not been configured with a <b>WORKSPACE_ID</b> environment variable. "
    "Please refer to the "
    '<a href="https://github.com/watson-developer-cloud/conversation-simple">README</a> '
    "documentation on how to set this variable. <br>"
    "Once a workspace has been defined the intents may be imported from "
    '<a href="https://github.com/watson-developer-cloud/conversation-simple/blob/master/training/car_workspace.json">here</a> '
    "in order to get a working application."
)

def create_app(
    settings: Settings,
    conversation: Optional[ConversationClient] = None,
    weather: Optional[WeatherClient] = None,
) -> Flask:
    """Build the Flask app around one Settings object and its service clients."""
    app = Flask(__name__)
    CORS(app)

    conversation = conversation or ConversationClient(settings)
    weather = weather or WeatherClient(settings.weather_url, timeout=settings.http_timeout)

    @app.route("/api/message", methods=["POST"])
    def message():
        """Relay one chat turn to the conversation service and enrich the reply."""
        if not settings.workspace_configured:
            print("[WARN] WORKSPACE_ID not configured; returning setup instructions")
            return jsonify({"output": {"text": NOT_CONFIGURED_TEXT}})

        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        payload = ConversationPayload(
            workspace_id=settings.workspace_id,
            context=body.get("context") or {},
            input=body.get("input") or {},
        )

        try:
            data = conversation.message(payload)
        except ConversationError as e:
            return jsonify(e.body), e.code or 500

        return jsonify(update_message(payload, data, weather))

    @app.route("/", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "message": "Conversation relay is running"})

    return app

if __name__ == "__main__":
    settings = load_settings()
    print(f"[INFO] Using workspace: {settings.workspace_id}")
    print(f"[INFO] Using weather endpoint: {urlparse(settings.weather_url).hostname}")
    app = create_app(settings)
    print(f"[INFO] Starting conversation relay on {settings.host}:{settings.port}...")
    app.run(debug=True, host=settings.host, port=settings.port, use_reloader=False)
