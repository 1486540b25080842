from __future__ import annotations

from datetime import datetime, timezone

import pytest

from nomenclator.common.errors import ParseError, ResolverError
from nomenclator.common.models import PlaceDescriptor, WeatherSummary
from nomenclator.pipeline.enrich import enrich_record, parse_raw_record


class FakeLocator:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    def locate(self, latitude, longitude):
        self.calls.append((latitude, longitude))
        if self.error is not None:
            raise self.error
        return PlaceDescriptor(primary_name="New York", country="United States")


class FakeWeatherman:
    def __init__(self, conditions: str = "Rain, Partially cloudy", error: Exception | None = None):
        self.conditions = conditions
        self.error = error
        self.calls = []

    def check_weather(self, latitude, longitude, date):
        self.calls.append((latitude, longitude, date))
        if self.error is not None:
            raise self.error
        return WeatherSummary(condition_text=self.conditions)


def test_parse_raw_record_valid_row():
    parsed = parse_raw_record(["2020-03-30T14:12:19Z", "40.728808", "-73.996106"])

    assert parsed.timestamp == datetime(2020, 3, 30, 14, 12, 19, tzinfo=timezone.utc)
    assert parsed.latitude == 40.728808
    assert parsed.longitude == -73.996106


@pytest.mark.parametrize(
    "row",
    [
        [],
        [""],
        ["2020-03-30T14:12:19Z"],
        ["2020-03-30 14:12:19Z", "40.728808", "-73.996106"],
        ["2020-03-30T14:12:19.120Z", "40.728808", "-73.996106"],
        ["2020-03-30T14:12:19+00:00", "40.728808", "-73.996106"],
        ["2020-3-30T14:12:19Z", "40.728808", "-73.996106"],
        ["2020-02-30T14:12:19Z", "40.728808", "-73.996106"],
        ["2020-03-30T14:12:19Z", "what", "-73.996106"],
        ["2020-03-30T14:12:19Z", "40.728808", "what"],
        ["2020-03-30T14:12:19Z", "nan", "-73.996106"],
        ["2020-03-30T14:12:19Z", "91.0", "-73.996106"],
        ["2020-03-30T14:12:19Z", "40.728808", "-180.5"],
        ["２０２０-03-30T14:12:19Z", "40.728808", "-73.996106"],
        ["2020-03-30T14:12:19Z", "4_0.728808", "-73.996106"],
        ["2020-03-30T14:12:19Z", " 40.728808 ", "-73.996106"],
        ["2020-03-30T14:12:19Z", "٤٠.٧", "-73.996106"],
        ["2020-03-30T14:12:19Z", "40.728808", "1e400"],
    ],
)
def test_parse_raw_record_rejects_malformed_rows(row):
    with pytest.raises(ParseError):
        parse_raw_record(row)


def test_parse_raw_record_accepts_plain_decimal_forms():
    parsed = parse_raw_record(["2020-03-30T14:12:19Z", "+40.5", "-.5"])
    assert (parsed.latitude, parsed.longitude) == (40.5, -0.5)

    parsed = parse_raw_record(["2020-03-30T14:12:19Z", "40", "-7.3e1"])
    assert (parsed.latitude, parsed.longitude) == (40.0, -73.0)


def test_parse_raw_record_names_empty_row():
    with pytest.raises(ParseError, match="empty row"):
        parse_raw_record([])


def test_enrich_record_merges_both_lookups():
    locator = FakeLocator()
    weatherman = FakeWeatherman()

    record = enrich_record(["2020-03-29T14:20:10Z", "40.728656", "-73.998790"], locator, weatherman)

    expected_ts = datetime(2020, 3, 29, 14, 20, 10, tzinfo=timezone.utc)
    assert record.place == PlaceDescriptor(primary_name="New York", country="United States")
    assert record.weather.condition_text == "Rain, Partially cloudy"
    assert record.timestamp == expected_ts
    assert locator.calls == [(40.728656, -73.998790)]
    assert weatherman.calls == [(40.728656, -73.998790, expected_ts)]


def test_enrich_record_wraps_locator_failure_and_skips_weather():
    cause = RuntimeError("argh")
    weatherman = FakeWeatherman()

    with pytest.raises(ResolverError) as excinfo:
        enrich_record(["2020-03-29T14:20:10Z", "40.728656", "-73.998790"], FakeLocator(error=cause), weatherman)

    assert excinfo.value.resolver == "locator"
    assert excinfo.value.__cause__ is cause
    assert "argh" in str(excinfo.value)
    assert weatherman.calls == []


def test_enrich_record_wraps_weatherman_failure():
    with pytest.raises(ResolverError) as excinfo:
        enrich_record(
            ["2020-03-29T14:20:10Z", "40.728656", "-73.998790"],
            FakeLocator(),
            FakeWeatherman(error=ValueError("no days")),
        )

    assert excinfo.value.resolver == "weatherman"
    assert excinfo.value.error_code == "RESOLVER_ERROR"


def test_enrich_record_does_not_call_resolvers_for_bad_rows():
    locator = FakeLocator()
    weatherman = FakeWeatherman()

    with pytest.raises(ParseError):
        enrich_record(["2020-03-29", "40.728656", "-73.998790"], locator, weatherman)

    assert locator.calls == []
    assert weatherman.calls == []
