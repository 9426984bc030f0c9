"""
Command-line health score for a single location
Runs the same pipeline as the API endpoint and prints a readable report
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from api.routes.health import compute_health_score, validate_request
from api.schemas import HealthScoreResponse
from config.settings import Settings
from data.fetcher import TravelDataFetcher
from models.advisor import TravelAdvisor
from models.scorer import HealthScorer
from utils.exceptions import TravelHealthError
from utils.helpers import display_score, normalize_question


def _fmt(value, suffix: str = "") -> str:
    return "n/a" if value is None else f"{value:.1f}{suffix}"


def format_report(result: HealthScoreResponse) -> str:
    """Render a scored location as plain text"""
    lines = [
        "=" * 60,
        f"{result.location} ({result.lat:.4f}, {result.lon:.4f})",
        "=" * 60,
        f"  AQI:              {result.aqi if result.aqi is not None else 'n/a'}",
        f"  Congestion:       {_fmt(result.congestion_percent, '%')}",
        f"  Pollution health: {_fmt(result.pollution_health)}",
        f"  Traffic health:   {_fmt(result.traffic_health)}",
        f"  Overall score:    {display_score(result.overall_health)}",
        f"  Level:            {result.level}",
        f"  Advice:           {result.advice}",
        f"  Suitable:         {'yes' if result.suitable else 'no'}",
    ]
    if result.ai_advice:
        lines.append(f"\nAI advice:\n{result.ai_advice}")
    return "\n".join(lines)


def main(location: str, question: str = None, lat: float = None, lon: float = None) -> int:
    settings = Settings()

    try:
        coords = validate_request(location, lat, lon, settings)
    except TravelHealthError as e:
        print(f"✗ {e}")
        return 2

    with TravelDataFetcher(settings) as fetcher:
        result = compute_health_score(
            location.strip(),
            normalize_question(question),
            coords,
            fetcher,
            HealthScorer(),
            TravelAdvisor(settings),
        )
    print(format_report(result))
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description='Score a location for urban travel health')
    parser.add_argument('location', help='Place name, e.g. "Kuala Lumpur"')
    parser.add_argument('--question', default=None, help='Ask the AI advisor a question')
    parser.add_argument('--lat', type=float, default=None, help='Latitude (skips geocoding)')
    parser.add_argument('--lon', type=float, default=None, help='Longitude (skips geocoding)')

    args = parser.parse_args()

    sys.exit(main(args.location, question=args.question, lat=args.lat, lon=args.lon))
