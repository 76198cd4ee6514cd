"""Constants for the Skånetrafiken journey planner adapter.

Uses the public gateway behind www.skanetrafiken.se. No authentication required.
"""

from types import MappingProxyType

SKANETRAFIKEN_API_URL = "https://www.skanetrafiken.se/gw-tps/api/v2"
POINTS_PATH = "/Points"  # GET /Points?name=...
JOURNEY_PATH = "/Journey"  # GET /Journey?fromPointId=...&toPointId=...

DEFAULT_HEADERS = MappingProxyType(
    {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "sv-SE",
        "search-engine-environment": "TjP",
    }
)

# Journey planner defaults
DEFAULT_PRIORITY = "SHORTEST_TIME"
DEFAULT_JOURNEYS_AFTER = 5
DEFAULT_WALK_SPEED = "NORMAL"
DEFAULT_MAX_WALK_DISTANCE = 2000  # meters
