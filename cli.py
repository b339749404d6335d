#!/usr/bin/env python3
import argparse
from dataclasses import replace

from app import NOT_CONFIGURED_TEXT
from config import load_settings
from services.conversation import ConversationClient, ConversationError
from services.weather import WeatherClient
from session import ConversationSession

def main(argv=None):
    parser = argparse.ArgumentParser(description="Console chat against the conversation workspace")
    parser.add_argument("--workspace-id", help="if omitted, uses WORKSPACE_ID from .env/env")
    args = parser.parse_args(argv)

    settings = load_settings()
    if args.workspace_id:
        settings = replace(settings, workspace_id=args.workspace_id)

    if not settings.workspace_configured:
        print(NOT_CONFIGURED_TEXT)
        return 1

    session = ConversationSession(
        conversation=ConversationClient(settings),
        weather=WeatherClient(settings.weather_url, timeout=settings.http_timeout),
        workspace_id=settings.workspace_id,
    )
    print("\nAsk something (e.g. 'weather in Cairo'); 'exit' to quit.\n")

    q = ""
    while True:
        try:
            lines = session.ask(q)
        except ConversationError as e:
            print(f"[ERROR] Conversation failed ({e.code or 500}): {e.body}")
            return 1
        print("\nBot:\n" + "\n".join(lines) + "\n")

        q = input("You: ").strip()
        while not q:
            q = input("You: ").strip()
        if q.lower() in ("exit", "quit", "q"):
            return 0

if __name__ == "__main__":
    raise SystemExit(main())
