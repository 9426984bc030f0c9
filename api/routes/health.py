import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api.routes.dependencies import get_advisor, get_fetcher, get_scorer
from api.schemas import ErrorResponse, HealthScoreResponse
from config.settings import Settings, get_settings
from data.fetcher import TravelDataFetcher
from models.advisor import TravelAdvisor
from models.readings import Coordinates
from models.scorer import HealthScorer
from utils.constants import (
    ERROR_COMPUTATION_FAILED,
    ERROR_INVALID_COORDINATES,
    ERROR_KEYS_MISSING,
    ERROR_LOCATION_REQUIRED,
)
from utils.exceptions import ConfigurationError, ValidationError
from utils.helpers import log_api_request, normalize_question, pick_coordinates

logger = logging.getLogger(__name__)

router = APIRouter()


def validate_request(
    location: Optional[str],
    lat: Optional[float],
    lon: Optional[float],
    settings: Settings,
) -> Optional[Coordinates]:
    """
    Check request inputs and configuration before any network call

    Returns:
        Caller-supplied coordinates, or None if the location must be geocoded

    Raises:
        ValidationError: Location missing or coordinates unusable
        ConfigurationError: A provider credential is missing
    """
    if not location or not location.strip():
        raise ValidationError(ERROR_LOCATION_REQUIRED)

    missing = settings.missing_credentials()
    if missing:
        raise ConfigurationError(missing)

    try:
        picked = pick_coordinates(lat, lon)
    except ValueError as e:
        raise ValidationError(ERROR_INVALID_COORDINATES) from e

    return Coordinates(*picked) if picked else None


def compute_health_score(
    location: str,
    question: Optional[str],
    coords: Optional[Coordinates],
    fetcher: TravelDataFetcher,
    scorer: HealthScorer,
    advisor: TravelAdvisor,
) -> HealthScoreResponse:
    """Geocode, fetch conditions, score, and optionally ask for advice"""
    # Step 1: Get coordinates
    if coords is None:
        coords = fetcher.geocode_location(location)

    # Step 2: Fetch air quality and traffic flow
    air, traffic = fetcher.fetch_conditions(coords)

    # Step 3: Score
    assessment = scorer.assess(air, traffic)

    # Step 4: Optional AI advice
    ai_advice = None
    if question:
        ai_advice = advisor.get_advice(
            question,
            air.aqi,
            assessment.congestion_percent,
            assessment.overall_health,
        )

    return HealthScoreResponse(
        location=location,
        lat=coords.lat,
        lon=coords.lon,
        aqi=air.aqi,
        ai_advice=ai_advice,
        **assessment.to_dict(),
    )


@router.get(
    "/api/v1/health-score",
    response_model=HealthScoreResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_health_score(
    location: Optional[str] = Query(None, description="Place name to score"),
    question: Optional[str] = Query(None, description="Optional question for the AI advisor"),
    lat: Optional[float] = Query(None, description="Latitude of a place picked from suggestions"),
    lon: Optional[float] = Query(None, description="Longitude of a place picked from suggestions"),
    settings: Settings = Depends(get_settings),
    fetcher: TravelDataFetcher = Depends(get_fetcher),
    scorer: HealthScorer = Depends(get_scorer),
    advisor: TravelAdvisor = Depends(get_advisor),
):
    """Get the urban travel health score for a location"""
    started = time.perf_counter()

    try:
        coords = validate_request(location, lat, lon, settings)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except ConfigurationError as e:
        logger.error("Health score unavailable: %s", e)
        return JSONResponse(status_code=500, content={"error": ERROR_KEYS_MISSING})

    location = location.strip()
    question = normalize_question(question)

    try:
        result = compute_health_score(location, question, coords, fetcher, scorer, advisor)
    except Exception:
        logger.exception("Health score computation failed for %s", location)
        return JSONResponse(status_code=500, content={"error": ERROR_COMPUTATION_FAILED})

    log_api_request(
        "/api/v1/health-score",
        location,
        time.perf_counter() - started,
        level=result.level,
    )
    return result
