"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from scheduler import VaccinationPlanner

YEAR = 2021


@pytest.fixture
def planner():
    """Planner with a fixed reference year and the (40, 60) partition."""
    p = VaccinationPlanner(current_year=YEAR)
    p.set_age_intervals(40, 60)
    return p


@pytest.fixture
def small_hub_planner(planner):
    """One hub with a capacity of 10 people on Monday only."""
    planner.define_hub("Fiera")
    planner.set_staff("Fiera", 1, 1, 1)
    planner.set_weekly_hours(1, 0, 0, 0, 0, 0, 0)
    return planner


def add_people(planner, prefix, count, age):
    """Registers `count` people of the given age with SSNs prefix000, prefix001, ..."""
    ssns = []
    for i in range(count):
        ssn = f"{prefix}{i:03d}"
        planner.add_person("First", "Last", ssn, YEAR - age)
        ssns.append(ssn)
    return ssns
