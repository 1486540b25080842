from __future__ import annotations

from nomenclator.common.models import PlaceDescriptor, WeatherSummary
from nomenclator.pipeline.processor import Processor

ROWS = [
    ["2020-03-30T14:12:19Z", "40.728808", "-73.996106"],
    ["bogus", "40.728656", "-73.998790"],
    ["2020-03-28T14:32:02Z", "42.360082", "-71.058880"],
    ["2020-03-28T16:32:02Z", "42.360082", "-71.058880"],
]


class CoordinateLocator:
    def locate(self, latitude, longitude):
        return PlaceDescriptor(primary_name="Boston" if latitude > 41 else "New York", country="United States")


class DayWeatherman:
    def check_weather(self, latitude, longitude, date):
        return WeatherSummary(condition_text="Snow" if date.day == 28 else "Clear")


def test_process_twice_gives_identical_outcome():
    processor = Processor(CoordinateLocator(), DayWeatherman())

    first = processor.process(ROWS)
    second = processor.process(ROWS)

    assert first.to_dict() == second.to_dict()
    assert first.title == "A snowy weekend in Boston"
    assert len(first.errors) == 1


def test_process_is_independent_of_processor_instance():
    first = Processor(CoordinateLocator(), DayWeatherman()).process(ROWS)
    second = Processor(CoordinateLocator(), DayWeatherman()).process(list(ROWS))

    assert first.to_dict() == second.to_dict()
