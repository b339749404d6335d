"""Mock builders shared by the service and endpoint tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import requests

WEATHER_URL = "https://weather.example.test"
CONVERSATION_URL = "https://conversation.example.test/api"


def make_response(status_code: int = 200, json_data=None, text: str = ""):
    """Create a mock requests.Response; json_data=None makes .json() fail like a non-JSON body."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    resp.reason = "OK" if resp.ok else "Error"
    resp.text = text
    if not resp.ok:
        resp.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error", response=resp)
    if json_data is None:
        resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", text, 0)
    else:
        resp.json.return_value = json_data
    return resp
