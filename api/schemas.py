from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class HealthScoreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    location: str
    lat: float
    lon: float
    aqi: Optional[int]
    congestion_percent: Optional[float] = Field(alias="congestionPercent")
    pollution_health: Optional[float] = Field(alias="pollutionHealth")
    traffic_health: Optional[float] = Field(alias="trafficHealth")
    overall_health: Optional[float] = Field(alias="overallHealth")
    level: str
    advice: str
    suitable: bool
    ai_advice: Optional[str] = Field(default=None, alias="aiAdvice")


class PlaceSuggestion(BaseModel):
    name: str
    lat: float
    lon: float


class ErrorResponse(BaseModel):
    error: str
