"""
Travel Conditions Data Fetcher
Geocoding, air quality, and traffic flow lookups for a single location
Sources: Nominatim (OpenStreetMap), WAQI, TomTom Traffic Flow
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple

import requests

from config.settings import Settings
from models.readings import AirQualityReading, Coordinates, PlaceSuggestion, TrafficReading
from utils.constants import NOMINATIM_SEARCH_PATH, TOMTOM_FLOW_PATH, WAQI_GEO_FEED_PATH
from utils.exceptions import UpstreamError
from utils.helpers import parse_number

logger = logging.getLogger(__name__)


class TravelDataFetcher:
    """Fetcher for the location, air quality, and traffic data behind a health score"""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

        # Base URLs
        self.nominatim_base = settings.NOMINATIM_BASE_URL
        self.waqi_base = settings.WAQI_BASE_URL
        self.tomtom_base = settings.TOMTOM_BASE_URL

    def close(self):
        """Release pooled connections"""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _get_json(self, provider: str, url: str, params: Dict = None, headers: Dict = None):
        """GET a provider endpoint and decode its JSON body"""
        response = self.session.get(
            url,
            params=params,
            headers=headers,
            timeout=self.settings.REQUEST_TIMEOUT,
        )
        response.raise_for_status()

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(provider, f"response is not JSON ({e})") from e

    # ==================== Nominatim ====================

    def _search(self, query: str, **extra_params) -> List[Dict]:
        params = {"format": "json", "q": query}
        params.update(extra_params)
        results = self._get_json(
            "Nominatim",
            f"{self.nominatim_base}{NOMINATIM_SEARCH_PATH}",
            params=params,
            headers={"User-Agent": self.settings.GEOCODER_USER_AGENT},
        )
        if not isinstance(results, list):
            raise UpstreamError("Nominatim", "expected a list of results")
        return results

    def geocode_location(self, location: str) -> Coordinates:
        """
        Resolve a place name to the coordinates of its first match

        Args:
            location: Free-text place name

        Returns:
            Coordinates of the best match

        Raises:
            UpstreamError: If nothing matches or the match has no usable position
            requests.RequestException: On transport or HTTP errors
        """
        results = self._search(location)
        if not results:
            raise UpstreamError("Nominatim", f"Location not found: {location}")

        lat = parse_number(results[0].get("lat"))
        lon = parse_number(results[0].get("lon"))
        if lat is None or lon is None:
            raise UpstreamError("Nominatim", "first match has no coordinates")

        coords = Coordinates(lat=lat, lon=lon)
        if not coords.is_valid():
            raise UpstreamError("Nominatim", f"coordinates out of range: {lat}, {lon}")

        logger.debug("Geocoded %s to %s, %s", location, lat, lon)
        return coords

    def search_places(self, query: str, limit: int = None) -> List[PlaceSuggestion]:
        """
        Suggest places matching a partial name, for search-as-you-type pickers

        Provider failures (rate limits, 403s) are logged and yield no suggestions.

        Args:
            query: Partial place name
            limit: Maximum number of suggestions, defaults to the configured limit

        Returns:
            List of suggestions, possibly empty
        """
        if not query or not query.strip():
            return []

        limit = limit or self.settings.PLACE_SUGGESTION_LIMIT

        try:
            results = self._search(
                query.strip(),
                addressdetails=1,
                limit=limit,
                **{"accept-language": "en"},
            )
        except (requests.RequestException, UpstreamError) as e:
            logger.warning("Place search failed for %r: %s", query, e)
            return []

        suggestions = []
        for item in results[:limit]:
            lat = parse_number(item.get("lat"))
            lon = parse_number(item.get("lon"))
            if lat is None or lon is None:
                continue
            suggestions.append(PlaceSuggestion(name=item.get("display_name", ""), lat=lat, lon=lon))

        return suggestions

    # ==================== WAQI ====================

    def fetch_air_quality(self, coords: Coordinates) -> AirQualityReading:
        """
        Fetch the current AQI from the World Air Quality Index station feed

        A non-"ok" status or a non-numeric index gives a reading without an AQI.
        """
        url = f"{self.waqi_base}{WAQI_GEO_FEED_PATH.format(lat=coords.lat, lon=coords.lon)}"
        data = self._get_json("WAQI", url, params={"token": self.settings.AQICN_TOKEN})

        if not isinstance(data, dict) or data.get("status") != "ok":
            logger.info("WAQI returned no data for %s, %s", coords.lat, coords.lon)
            return AirQualityReading()

        station_data = data.get("data") or {}
        if not isinstance(station_data, dict):
            raise UpstreamError("WAQI", "malformed station data")

        aqi = parse_number(station_data.get("aqi"))
        station = (station_data.get("city") or {}).get("name")

        return AirQualityReading(
            aqi=int(round(aqi)) if aqi is not None else None,
            station=station,
        )

    # ==================== TomTom ====================

    def fetch_traffic_flow(self, coords: Coordinates) -> TrafficReading:
        """Fetch current and free-flow speed for the road segment nearest the point"""
        params = {
            "key": self.settings.TOMTOM_API_KEY,
            "point": f"{coords.lat},{coords.lon}",
        }
        data = self._get_json("TomTom", f"{self.tomtom_base}{TOMTOM_FLOW_PATH}", params=params)

        if not isinstance(data, dict):
            raise UpstreamError("TomTom", "malformed flow payload")

        segment = data.get("flowSegmentData") or {}
        return TrafficReading(
            current_speed=parse_number(segment.get("currentSpeed")),
            free_flow_speed=parse_number(segment.get("freeFlowSpeed")),
        )

    # ==================== Combined ====================

    def fetch_conditions(self, coords: Coordinates) -> Tuple[AirQualityReading, TrafficReading]:
        """
        Fetch air quality and traffic flow concurrently

        Both lookups are awaited; the first error raised by either propagates.
        The workers share the session: they only issue GETs with per-call
        params and headers, never touch its cookies or auth, and urllib3's
        connection pool is safe to use from several threads.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            air_future = executor.submit(self.fetch_air_quality, coords)
            traffic_future = executor.submit(self.fetch_traffic_flow, coords)
            return air_future.result(), traffic_future.result()
