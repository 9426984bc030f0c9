"""
Per-request value objects for the Urban Travel Health API

Coordinates, provider readings and the computed health assessment. None of
these outlive a single request.
"""

from dataclasses import dataclass
from typing import Optional

from utils.helpers import clamp, validate_coordinates


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 point"""

    lat: float
    lon: float

    def is_valid(self) -> bool:
        return validate_coordinates(self.lat, self.lon)


@dataclass(frozen=True)
class PlaceSuggestion:
    """One candidate returned by the place search"""

    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class AirQualityReading:
    """
    Air quality index reported for a point

    Attributes:
        aqi: Index value, or None when the provider had no usable reading
        station: Name of the reporting station, if the provider gave one
    """

    aqi: Optional[int] = None
    station: Optional[str] = None


@dataclass(frozen=True)
class TrafficReading:
    """
    Flow figures for the road segment containing a point

    Attributes:
        current_speed: Speed currently measured on the segment (km/h)
        free_flow_speed: Speed expected with no congestion (km/h)
    """

    current_speed: Optional[float] = None
    free_flow_speed: Optional[float] = None

    @property
    def congestion_percent(self) -> Optional[float]:
        """
        How far the current speed falls below free-flow speed, in [0, 100]

        Returns:
            0 when traffic moves at or above free-flow speed, None when either
            speed is missing or the free-flow speed is not positive
        """
        if self.current_speed is None or self.free_flow_speed is None:
            return None
        if self.free_flow_speed <= 0:
            return None

        ratio = self.current_speed / self.free_flow_speed
        if ratio >= 1:
            return 0.0
        return clamp((1 - ratio) * 100, 0.0, 100.0)


@dataclass
class HealthAssessment:
    """
    Result of scoring one location

    Attributes:
        congestion_percent: Congestion the traffic score was derived from
        pollution_health: 0-100 score from AQI, None without an AQI reading
        traffic_health: 0-100 score from congestion, None without traffic data
        overall_health: Weighted blend of the available sub-scores
        level: Qualitative label ("Good", "Moderate", ...)
        advice: Short advisory text matching the level
        suitable: Whether travel is considered suitable
    """

    congestion_percent: Optional[float]
    pollution_health: Optional[float]
    traffic_health: Optional[float]
    overall_health: Optional[float]
    level: str
    advice: str
    suitable: bool

    def to_dict(self) -> dict:
        return {
            "congestion_percent": self.congestion_percent,
            "pollution_health": self.pollution_health,
            "traffic_health": self.traffic_health,
            "overall_health": self.overall_health,
            "level": self.level,
            "advice": self.advice,
            "suitable": self.suitable,
        }
