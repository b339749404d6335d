# services/weather.py
from typing import Optional
import requests

from models import Coordinate

FORECAST_PATH = "/api/weather/v1/geocode/{lat}/{lon}/forecast/daily/3day.json"

class WeatherClient:
    def __init__(self, base_url: str, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def forecast_url(self, coord: Coordinate) -> str:
        return self.base_url + FORECAST_PATH.format(lat=coord.latitude, lon=coord.longitude)

    def forecast_narrative(self, coord: Coordinate) -> dict:
        """
        Fetch the 3-day daily forecast and pick tomorrow's narrative (forecasts[1]).
        Returns {"narrative": str} or {"error": "..."}; never raises.
        """
        if coord.is_empty:
            return {"error": "no_coordinates"}

        try:
            r = requests.get(self.forecast_url(coord), timeout=self.timeout)
        except requests.exceptions.Timeout:
            return {"error": "weather_api_timeout"}
        except requests.exceptions.RequestException as e:
            return {"error": f"weather_api_error: {str(e)}"}

        try:
            r.raise_for_status()
        except requests.exceptions.HTTPError:
            return {"error": f"weather_api_error: {r.status_code}"}

        try:
            data = r.json()
        except ValueError:
            # requests' JSONDecodeError is a ValueError subclass
            return {"error": "weather_invalid_json"}

        forecasts = data.get("forecasts") if isinstance(data, dict) else None
        if not isinstance(forecasts, list) or len(forecasts) < 2:
            return {"error": "weather_missing_forecast"}

        tomorrow = forecasts[1] if isinstance(forecasts[1], dict) else {}
        narrative = tomorrow.get("narrative")
        if not isinstance(narrative, str):
            return {"error": "weather_missing_narrative"}

        return {"narrative": narrative}
