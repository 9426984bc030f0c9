"""
Helper Functions for the Urban Travel Health API
Utility functions used across the application
"""

import logging
from typing import Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Restrict a value to the closed interval [lower, upper]

    Args:
        value: Value to restrict
        lower: Lower bound
        upper: Upper bound

    Returns:
        Clamped value as a plain float
    """
    return float(np.clip(value, lower, upper))


def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Validate latitude and longitude values

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        True if valid, False otherwise
    """
    if not (np.isfinite(lat) and np.isfinite(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def parse_number(value) -> Optional[float]:
    """
    Coerce a provider field to a float

    Providers sometimes report placeholders such as "-" instead of a number.

    Args:
        value: Raw value from a JSON payload

    Returns:
        The value as a finite float, or None if it is not numeric
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not np.isfinite(number):
        return None
    return number


def display_score(overall: Optional[float]) -> int:
    """
    Round an overall health score for display

    Args:
        overall: Overall health score, or None

    Returns:
        Integer score, 0 when no score is available
    """
    return int(round(overall or 0))


def normalize_question(question: Optional[str]) -> Optional[str]:
    """
    Strip a user question, treating a blank one as absent

    Args:
        question: Raw question text, or None

    Returns:
        The stripped question, or None if nothing is left
    """
    if question is None:
        return None
    return question.strip() or None


def pick_coordinates(lat: Optional[float], lon: Optional[float]) -> Optional[Tuple[float, float]]:
    """
    Decide whether caller-supplied coordinates can be used

    Args:
        lat: Latitude query parameter
        lon: Longitude query parameter

    Returns:
        (lat, lon) when both are given and in range, None when neither is given

    Raises:
        ValueError: If only one is given or the pair is out of range
    """
    if lat is None and lon is None:
        return None
    if lat is None or lon is None or not validate_coordinates(lat, lon):
        raise ValueError(f"Invalid coordinates: lat={lat}, lon={lon}")
    return lat, lon


def log_api_request(endpoint: str, location: str, response_time: float, level: str = None):
    """
    Log API request for monitoring

    Args:
        endpoint: API endpoint called
        location: Location requested
        response_time: Response time in seconds
        level: Health level returned, if any
    """
    message = f"API Request: {endpoint} | Location: {location} | Time: {response_time:.3f}s"
    if level:
        message += f" | Level: {level}"
    logger.info(message)
