# services/geocode.py
from models import Coordinate

# Exact city name (as emitted by the conversation workspace) -> (lat, lon)
CITY_COORDINATES = {
    "Cairo": ("30.0444", "31.2357"),
    "NYC": ("40.7128", "74.0059"),
}

def lookup_city(name: str) -> Coordinate:
    """
    Resolve a city entity value to its coordinates.
    Unknown names give an empty Coordinate rather than an error.
    """
    match = CITY_COORDINATES.get(name)
    if match is None:
        return Coordinate()
    lat, lon = match
    return Coordinate(latitude=lat, longitude=lon)
