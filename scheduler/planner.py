"""
Vaccination Planner facade.

Wires the registry, capacity model, allocation engine and statistics around
one shared PlanSettings, and exposes the operations a CLI or report needs.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from pydantic import ValidationError

from models import AgePartition, PlanSettings, PlanningConfig, Staffing, WeeklyHours, CURRENT_YEAR
from exceptions.custom_errors import InvalidConfigurationError
from ingestion.csv_loader import LoadErrorReporter, load_people
from .capacity import CapacityModel
from .engine import AllocationEngine, WeekPlan
from .state import Registry
from .statistics import AllocationStatistics, Ratio

logger = logging.getLogger(__name__)


class VaccinationPlanner:
    """
    Single entry point for registering people and hubs, configuring the
    week, and computing the allocation plan.
    """

    def __init__(self, current_year: int = CURRENT_YEAR):
        self.settings = PlanSettings()
        self.registry = Registry(current_year)
        self.capacity = CapacityModel(self.registry, self.settings)
        self.engine = AllocationEngine(self.registry, self.capacity, self.settings)
        self.stats = AllocationStatistics(self.registry, self.settings)

    @classmethod
    def from_config(cls, config: PlanningConfig) -> "VaccinationPlanner":
        planner = cls(current_year=config.current_year or CURRENT_YEAR)
        planner.set_age_intervals(*config.age_breakpoints)
        planner.set_weekly_hours(*config.weekly_hours)
        for hub in config.hubs:
            planner.define_hub(hub.name)
            if hub.staffing is not None:
                s = hub.staffing
                planner.set_staff(hub.name, s.doctors, s.nurses, s.other)
        logger.info(f"Planner configured with {len(config.hubs)} hubs")
        return planner

    # --- People ---

    def add_person(self, first_name: str, last_name: str, ssn: str, year: int) -> None:
        self.registry.add_person(first_name, last_name, ssn, year)

    def load_people(self, lines: Iterable[str], reporter: Optional[LoadErrorReporter] = None) -> int:
        return load_people(lines, self.registry, reporter)

    def count_people(self) -> int:
        return self.registry.count_people()

    def get_person(self, ssn: str) -> str:
        """Formatted as "ssn,last,first"."""
        return str(self.registry.get_person(ssn))

    def get_age(self, ssn: str) -> int:
        return self.registry.age_of(self.registry.get_person(ssn))

    # --- Age Intervals ---

    def set_age_intervals(self, *breakpoints: int) -> None:
        self.settings.age_partition = AgePartition.from_breakpoints(breakpoints)

    def get_age_intervals(self) -> List[str]:
        return self.settings.require_partition().labels()

    def get_in_interval(self, label: str) -> List[str]:
        interval = self.settings.require_partition().find(label)
        return [p.ssn for p in self.registry.people_in(interval)]

    # --- Hubs ---

    def define_hub(self, name: str) -> None:
        self.registry.define_hub(name)

    def get_hubs(self) -> List[str]:
        return self.registry.hub_names()

    def set_staff(self, name: str, doctors: int, nurses: int, other: int) -> None:
        self.registry.get_hub(name)
        try:
            staffing = Staffing(doctors=doctors, nurses=nurses, other=other)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid staffing for hub {name}: {e}") from e
        self.registry.set_staff(name, staffing)

    def estimate_hourly_capacity(self, name: str) -> int:
        return self.capacity.hourly_capacity(name)

    # --- Working Hours ---

    def set_weekly_hours(self, *hours: int) -> None:
        try:
            self.settings.weekly_hours = WeeklyHours(hours=list(hours))
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid weekly hours: {e}") from e

    def get_time_slot_labels(self) -> List[List[str]]:
        return self.settings.require_hours().slot_labels()

    def get_daily_available(self, hub: str, day: int) -> int:
        return self.capacity.daily_available(hub, day)

    def get_weekly_availability(self) -> Dict[str, List[int]]:
        return self.capacity.weekly_available()

    # --- Allocation ---

    def allocate_one_day(self, hub: str, day: int) -> Set[str]:
        return self.engine.allocate_one_day(hub, day)

    def allocate_week(self) -> WeekPlan:
        return self.engine.allocate_week()

    def reset_all_allocations(self) -> None:
        self.engine.reset_all_allocations()

    # --- Statistics ---

    def proportion_allocated(self) -> float:
        return self.stats.proportion_allocated()

    def proportion_allocated_by_age_interval(self) -> Dict[str, Ratio]:
        return self.stats.proportion_allocated_by_age_interval()

    def allocation_distribution_by_age_interval(self) -> Dict[str, Ratio]:
        return self.stats.allocation_distribution_by_age_interval()
