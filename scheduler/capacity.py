"""
Capacity Model.

This module answers the question: "How many people can Hub X vaccinate on day Y?"
Hourly capacity comes from staffing; daily availability scales it by the
working hours of the weekday.
"""

import logging
from typing import Dict, List

from models import PlanSettings, DAYS_PER_WEEK
from exceptions.custom_errors import HubNotStaffedError, InvalidArgumentError
from .state import Registry

logger = logging.getLogger(__name__)


class CapacityModel:
    """
    Derives hourly and daily vaccination capacity for the registered hubs.
    """

    # Vaccinations per hour that a single staff member of each role can support
    DOCTOR_RATE = 10
    NURSE_RATE = 12
    OTHER_RATE = 20

    def __init__(self, registry: Registry, settings: PlanSettings):
        self.registry = registry
        self.settings = settings

    def hourly_capacity(self, hub_name: str) -> int:
        """The bottleneck role decides: min(10*doctors, 12*nurses, 20*other)."""
        hub = self.registry.get_hub(hub_name)
        if not hub.is_staffed:
            raise HubNotStaffedError(f"Staff for hub {hub_name} has not been set")

        staff = hub.staffing
        return min(
            staff.doctors * self.DOCTOR_RATE,
            staff.nurses * self.NURSE_RATE,
            staff.other * self.OTHER_RATE,
        )

    def daily_available(self, hub_name: str, day: int) -> int:
        """Working hours of the day times the hourly capacity of the hub."""
        if not 0 <= day < DAYS_PER_WEEK:
            raise InvalidArgumentError(f"Day must be in [0, 6], got {day}")
        hours = self.settings.require_hours()
        return hours[day] * self.hourly_capacity(hub_name)

    def weekly_available(self) -> Dict[str, List[int]]:
        """
        Availability of every hub for the 7 weekdays.
        Unstaffed hubs are reported with zero availability.
        """
        self.settings.require_hours()

        available = {}
        for name in self.registry.hub_names():
            try:
                available[name] = [self.daily_available(name, day) for day in range(DAYS_PER_WEEK)]
            except HubNotStaffedError:
                logger.warning(f"Hub {name} has no staff set, reporting zero availability")
                available[name] = [0] * DAYS_PER_WEEK
        return available
