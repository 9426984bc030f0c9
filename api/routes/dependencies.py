from fastapi import Depends

from config.settings import Settings, get_settings
from data.fetcher import TravelDataFetcher
from models.advisor import TravelAdvisor
from models.scorer import HealthScorer

scorer = HealthScorer()


def get_fetcher(settings: Settings = Depends(get_settings)):
    fetcher = TravelDataFetcher(settings)
    try:
        yield fetcher
    finally:
        fetcher.close()


def get_advisor(settings: Settings = Depends(get_settings)) -> TravelAdvisor:
    return TravelAdvisor(settings)


def get_scorer() -> HealthScorer:
    return scorer
