"""
Travel Health Scorer
Turns raw AQI and traffic flow readings into sub-scores, a weighted overall
score, and a qualitative travel classification
"""

from typing import Dict, Optional

from models.readings import AirQualityReading, HealthAssessment, TrafficReading
from utils.helpers import clamp
from utils.constants import (
    AQI_CEILING,
    HEALTH_LEVELS,
    MAX_SCORE,
    NO_DATA_LEVEL,
    POLLUTION_WEIGHT,
    TRAFFIC_WEIGHT,
)


def pollution_health(aqi: Optional[float]) -> Optional[float]:
    """
    Invert an AQI onto a 0-100 healthiness scale

    AQI 0 maps to 100 and anything at or above the ceiling maps to 0.

    Args:
        aqi: Air Quality Index value, or None

    Returns:
        Pollution health score, or None without an AQI
    """
    if aqi is None:
        return None
    capped = clamp(aqi, 0, AQI_CEILING)
    return max(0.0, MAX_SCORE - (capped / AQI_CEILING) * MAX_SCORE)


def traffic_health(congestion_percent: Optional[float]) -> Optional[float]:
    """
    Invert a congestion percentage onto a 0-100 healthiness scale

    Args:
        congestion_percent: Congestion in [0, 100], or None

    Returns:
        Traffic health score, or None without congestion data
    """
    if congestion_percent is None:
        return None
    return max(0.0, MAX_SCORE - congestion_percent)


def overall_health(pollution: Optional[float], traffic: Optional[float]) -> Optional[float]:
    """
    Blend the two sub-scores, pollution weighted higher

    A single available sub-score is used as is.
    """
    match (pollution, traffic):
        case (None, None):
            return None
        case (p, None):
            return p
        case (None, t):
            return t
        case (p, t):
            return POLLUTION_WEIGHT * p + TRAFFIC_WEIGHT * t


def classify(overall: Optional[float]) -> Dict:
    """
    Map an overall score onto its health level

    Args:
        overall: Overall health score, or None

    Returns:
        Dict with level, advice, and suitable
    """
    if overall is None:
        return dict(NO_DATA_LEVEL)

    for bracket in HEALTH_LEVELS:
        if overall >= bracket["min_score"]:
            return {
                "level": bracket["level"],
                "advice": bracket["advice"],
                "suitable": bracket["suitable"],
            }

    # NaN compares false against every bracket
    return dict(NO_DATA_LEVEL)


class HealthScorer:
    """
    Aggregates air quality and traffic readings into a HealthAssessment

    Pure arithmetic over optional numbers; never raises for missing data.
    """

    def assess(self, air: AirQualityReading, traffic: TrafficReading) -> HealthAssessment:
        """
        Score one location

        Args:
            air: Air quality reading for the location
            traffic: Traffic flow reading for the location

        Returns:
            HealthAssessment with sub-scores, overall score, and classification
        """
        congestion = traffic.congestion_percent
        pollution = pollution_health(air.aqi)
        traffic_score = traffic_health(congestion)
        overall = overall_health(pollution, traffic_score)
        label = classify(overall)

        return HealthAssessment(
            congestion_percent=congestion,
            pollution_health=pollution,
            traffic_health=traffic_score,
            overall_health=overall,
            level=label["level"],
            advice=label["advice"],
            suitable=label["suitable"],
        )

    def score(
        self,
        aqi: Optional[int],
        current_speed: Optional[float],
        free_flow_speed: Optional[float],
    ) -> HealthAssessment:
        """Score raw figures without building the reading objects first"""
        return self.assess(
            AirQualityReading(aqi=aqi),
            TrafficReading(current_speed=current_speed, free_flow_speed=free_flow_speed),
        )
