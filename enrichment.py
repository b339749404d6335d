# enrichment.py
from typing import Dict, Any

from models import ConversationPayload, Entity
from services.geocode import lookup_city
from services.weather import WeatherClient

def update_message(payload: ConversationPayload, response: Dict[str, Any], weather: WeatherClient) -> Dict[str, Any]:
    """
    Post-process a conversation reply before it goes back to the client.

    - no output: set output to {} and return
    - leading "city" entity: replace output.text[0] with tomorrow's forecast narrative
    - anything else: return unchanged

    The reply dict is mutated in place and returned.
    """
    if response.get("output") is None:
        response["output"] = {}
        return response

    entities = response.get("entities") or []
    if not entities or not isinstance(entities[0], dict):
        return response

    first = Entity.from_dict(entities[0])
    if first.entity != "city":
        return response

    print(f"[DEBUG] City entity '{first.value}' in workspace {payload.workspace_id}; fetching forecast")
    location = lookup_city(first.value)
    forecast = weather.forecast_narrative(location)

    # Only overwrite once a narrative is in hand; failures keep the dialog text.
    if "error" in forecast:
        print(f"[WARN] Forecast for '{first.value}' unavailable: {forecast['error']}")
        return response

    output = response["output"]
    if not isinstance(output, dict):
        return response
    text = output.get("text")
    if isinstance(text, list) and text:
        text[0] = forecast["narrative"]
    elif isinstance(text, list):
        text.append(forecast["narrative"])
    else:
        output["text"] = [forecast["narrative"]]
    return response
