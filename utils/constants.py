"""
Constants used throughout the Urban Travel Health API
Score weights, classification brackets, and fixed messages
"""

# ==================== Score Normalization ====================

# AQI at or above this value maps to a pollution health score of 0
AQI_CEILING = 500

MAX_SCORE = 100.0

# ==================== Score Weights ====================

POLLUTION_WEIGHT = 0.6
TRAFFIC_WEIGHT = 0.4

# ==================== Health Levels ====================

# Ordered from the highest lower bound down; the first match wins
HEALTH_LEVELS = [
    {
        "min_score": 70,
        "level": "Good",
        "advice": "Safe for all.",
        "suitable": True,
    },
    {
        "min_score": 50,
        "level": "Moderate",
        "advice": "OK, but sensitive groups should be careful.",
        "suitable": True,
    },
    {
        "min_score": 30,
        "level": "Unhealthy for sensitive groups",
        "advice": "Sensitive people should limit outdoor activity.",
        "suitable": True,
    },
    {
        "min_score": float("-inf"),
        "level": "Very unhealthy",
        "advice": "Not suitable for vulnerable individuals.",
        "suitable": False,
    },
]

NO_DATA_LEVEL = {
    "level": "No data",
    "advice": "Insufficient data.",
    "suitable": False,
}

# ==================== Error Messages ====================

ERROR_LOCATION_REQUIRED = "location name is required."
ERROR_KEYS_MISSING = "API keys missing."
ERROR_COMPUTATION_FAILED = "Failed to compute health score."
ERROR_INVALID_COORDINATES = "lat and lon must be given together and within range."

# ==================== Advisor Prompt ====================

ADVICE_PROMPT_TEMPLATE = (
    'User asked: "{question}". \n'
    "AQI: {aqi}, Traffic: {congestion}%, Health Score: {overall}. \n"
    "Give a short, safe advice."
)

# ==================== Provider Endpoints ====================

NOMINATIM_SEARCH_PATH = "/search"
WAQI_GEO_FEED_PATH = "/feed/geo:{lat};{lon}/"
# Zoom level 10 selects the road segment resolution used for scoring
TOMTOM_FLOW_PATH = "/traffic/services/4/flowSegmentData/absolute/10/json"
