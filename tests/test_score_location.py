from unittest.mock import patch

import pytest

from api.schemas import HealthScoreResponse
from scripts.score_location import format_report, main
from utils.exceptions import UpstreamError


def _result(**overrides):
    values = dict(
        location="Kuala Lumpur",
        lat=3.139,
        lon=101.6869,
        aqi=100,
        congestion_percent=50.0,
        pollution_health=80.0,
        traffic_health=50.0,
        overall_health=67.6,
        level="Moderate",
        advice="OK, but sensitive groups should be careful.",
        suitable=True,
        ai_advice=None,
    )
    values.update(overrides)
    return HealthScoreResponse(**values)


def test_report_rounds_overall_score():
    report = format_report(_result())

    assert "Kuala Lumpur (3.1390, 101.6869)" in report
    assert "Overall score:    68" in report
    assert "Congestion:       50.0%" in report
    assert "AI advice" not in report


def test_report_without_data():
    report = format_report(_result(
        aqi=None,
        congestion_percent=None,
        pollution_health=None,
        traffic_health=None,
        overall_health=None,
        level="No data",
        advice="Insufficient data.",
        suitable=False,
    ))

    assert "AQI:              n/a" in report
    assert "Overall score:    0" in report
    assert "Suitable:         no" in report


def test_report_includes_ai_advice():
    assert "Leave before 7am." in format_report(_result(ai_advice="Leave before 7am."))


def test_missing_location_exits_before_network(capsys):
    assert main("  ") == 2
    assert "location name is required." in capsys.readouterr().out


class TestMain:
    """Runs the command-line pipeline with stubbed collaborators."""

    @pytest.fixture
    def cli(self, fake_settings, stub_fetcher, stub_advisor):
        with patch("scripts.score_location.Settings", return_value=fake_settings), \
                patch("scripts.score_location.TravelDataFetcher") as fetcher_cls, \
                patch("scripts.score_location.TravelAdvisor", return_value=stub_advisor):
            fetcher_cls.return_value.__enter__.return_value = stub_fetcher
            fetcher_cls.return_value.__exit__.return_value = False
            yield fetcher_cls

    def test_prints_report(self, cli, stub_fetcher, stub_advisor, capsys):
        assert main("Kuala Lumpur") == 0

        out = capsys.readouterr().out
        assert "Kuala Lumpur (3.1390, 101.6869)" in out
        assert "Overall score:    68" in out
        assert "Level:            Moderate" in out
        stub_fetcher.geocode_location.assert_called_once_with("Kuala Lumpur")
        stub_advisor.get_advice.assert_not_called()
        cli.return_value.__exit__.assert_called_once()

    def test_question_adds_ai_advice(self, cli, stub_advisor, capsys):
        assert main("Kuala Lumpur", question="  Can I jog?  ") == 0

        assert stub_advisor.get_advice.call_args.args[0] == "Can I jog?"
        assert "Take the train and avoid the ring road." in capsys.readouterr().out

    @pytest.mark.parametrize("question", ["", "   "])
    def test_blank_question_skips_advisor(self, cli, stub_advisor, question):
        assert main("Kuala Lumpur", question=question) == 0

        stub_advisor.get_advice.assert_not_called()

    def test_upstream_error_propagates(self, cli, stub_fetcher):
        stub_fetcher.geocode_location.side_effect = UpstreamError("Nominatim", "Location not found: Atlantis")

        with pytest.raises(UpstreamError):
            main("Atlantis")

        cli.return_value.__exit__.assert_called_once()

    def test_missing_credentials_exit_2(self, cli, fake_settings, stub_fetcher, capsys):
        fake_settings.TOMTOM_API_KEY = ""

        assert main("Kuala Lumpur") == 2

        assert "TOMTOM_API_KEY" in capsys.readouterr().out
        cli.assert_not_called()
        stub_fetcher.geocode_location.assert_not_called()
