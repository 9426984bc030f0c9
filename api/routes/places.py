from typing import List

from fastapi import APIRouter, Depends, Query

from api.routes.dependencies import get_fetcher
from api.schemas import PlaceSuggestion
from data.fetcher import TravelDataFetcher

router = APIRouter()


@router.get("/api/v1/places", response_model=List[PlaceSuggestion])
def search_places(
    q: str = Query("", description="Partial place name"),
    fetcher: TravelDataFetcher = Depends(get_fetcher),
):
    """Suggest places for the location picker"""
    return [
        PlaceSuggestion(name=place.name, lat=place.lat, lon=place.lon)
        for place in fetcher.search_places(q)
    ]
