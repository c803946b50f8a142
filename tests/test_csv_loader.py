"""Tests for the people CSV loader."""
import io

import pytest

from exceptions.custom_errors import InvalidConfigurationError, MalformedHeaderError
from ingestion.csv_loader import CollectingReporter, load_people
from scheduler import Registry

GOOD = """SSN,LAST,FIRST,YEAR
RSSMRA50,Rossi,Mario,1950
BNCANN90,Bianchi,Anna,1990
"""


class TestLoadPeople:

    def test_loads_all_lines(self):
        registry = Registry(current_year=2021)
        assert load_people(io.StringIO(GOOD), registry) == 2
        assert str(registry.get_person("RSSMRA50")) == "RSSMRA50,Rossi,Mario"
        assert registry.get_person("BNCANN90").birth_year == 1990

    def test_skips_and_reports_bad_lines(self):
        data = (
            "SSN,LAST,FIRST,YEAR\n"
            "RSSMRA50,Rossi,Mario,1950\n"
            "this is not a person\n"
            "RSSMRA50,Rossi,Mario,1950\n"
            "lower,case,ssn,1960\n"
            "VRDLCU70,Verdi,Luca,1970\n"
        )
        registry = Registry(current_year=2021)
        reporter = CollectingReporter()

        added = load_people(io.StringIO(data), registry, reporter)

        assert added == 2
        assert registry.count_people() == 2
        assert reporter.errors == [
            (3, "this is not a person"),
            (4, "RSSMRA50,Rossi,Mario,1950"),
            (5, "lower,case,ssn,1960"),
        ]

    def test_future_birth_year_reported_and_skipped(self):
        data = (
            "SSN,LAST,FIRST,YEAR\n"
            "RSSMRA50,Rossi,Mario,1950\n"
            "ZZZ9,Typo,Anna,2091\n"
            "VRDLCU70,Verdi,Luca,2021\n"
        )
        registry = Registry(current_year=2021)
        reporter = CollectingReporter()

        assert load_people(io.StringIO(data), registry, reporter) == 2
        assert reporter.errors == [(3, "ZZZ9,Typo,Anna,2091")]
        assert "ZZZ9" not in registry.people

    def test_without_reporter(self):
        registry = Registry(current_year=2021)
        assert load_people(io.StringIO(GOOD + "garbage\n"), registry) == 2

    def test_bad_header(self):
        registry = Registry(current_year=2021)
        reporter = CollectingReporter()
        with pytest.raises(MalformedHeaderError):
            load_people(io.StringIO("NAME,SURNAME\nRSSMRA50,Rossi,Mario,1950\n"), registry, reporter)
        assert reporter.errors == [(1, "NAME,SURNAME")]
        assert registry.count_people() == 0

    def test_empty_input(self):
        with pytest.raises(InvalidConfigurationError):
            load_people(io.StringIO(""), Registry(current_year=2021))

    def test_through_planner(self, planner):
        reporter = CollectingReporter()
        assert planner.load_people(io.StringIO(GOOD), reporter) == 2
        assert planner.get_age("RSSMRA50") == 71
        assert reporter.errors == []
