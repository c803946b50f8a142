"""
The Vaccination Allocation Engine.

This module implements the core allocation logic.
For each (hub, day) it runs two passes over the age intervals, oldest first:
1. Quota Pass - each interval may take at most 40% of the capacity still left.
2. Fill Pass - whatever is left goes to the oldest people still waiting.

Allocation is global and exclusive: once a person holds a slot they are
never picked again until the whole plan is reset.
"""

import logging
import math
from typing import List, Dict, Set

from models import Person, PlanSettings, DAYS_PER_WEEK
from exceptions.custom_errors import HubNotStaffedError
from .capacity import CapacityModel
from .state import Registry

logger = logging.getLogger(__name__)

WeekPlan = Dict[int, Dict[str, Set[str]]]


class AllocationEngine:
    """
    Main allocation engine.
    Ingests Demand (unallocated people) and Supply (hub capacity), outputs slot assignments.
    """

    # Share of the remaining daily capacity an age interval may claim in the quota pass
    QUOTA_FRACTION = 0.4

    def __init__(self, registry: Registry, capacity: CapacityModel, settings: PlanSettings):
        self.registry = registry
        self.capacity = capacity
        self.settings = settings

    def allocate_one_day(self, hub: str, day: int) -> Set[str]:
        """
        Assigns people to `hub` on weekday `day` and returns their SSNs.
        Every check runs before the first person is touched.
        """
        partition = self.settings.require_partition()
        n = self.capacity.daily_available(hub, day)
        if n <= 0:
            return set()

        # Bucket the waiting people by interval, oldest interval first, SSN order inside
        buckets = self._waiting_by_interval()

        selected: List[str] = []

        # 1. Quota Pass
        for bucket in buckets:
            if n <= 0:
                break
            quota = math.floor(n * self.QUOTA_FRACTION)
            taken = self._take(bucket, quota, day, hub)
            selected.extend(taken)
            n -= len(taken)
        quota_count = len(selected)

        # 2. Fill Pass
        for bucket in buckets:
            if n <= 0:
                break
            taken = self._take(bucket, n, day, hub)
            selected.extend(taken)
            n -= len(taken)

        logger.debug(
            f"{hub} day {day}: {quota_count} by quota, {len(selected) - quota_count} by fill, "
            f"{n} places left over {len(partition)} intervals"
        )
        return set(selected)

    def allocate_week(self) -> WeekPlan:
        """
        Runs allocate_one_day for every (day, hub), day-major, hubs by name.
        Earlier pairs get first pick of the oldest people, so this order is fixed.
        """
        self.settings.require_partition()
        self.settings.require_hours()

        logger.info("Starting weekly allocation...")
        plan: WeekPlan = {}
        for day in range(DAYS_PER_WEEK):
            plan[day] = {}
            for hub in self.registry.hub_names():
                try:
                    plan[day][hub] = self.allocate_one_day(hub, day)
                except HubNotStaffedError:
                    logger.warning(f"Skipping {hub} on day {day}: staff not set")
                    plan[day][hub] = set()

        total = sum(len(ssns) for hubs in plan.values() for ssns in hubs.values())
        logger.info(f"Weekly allocation complete: {total} people allocated")
        return plan

    def reset_all_allocations(self) -> None:
        """Clears every allocation. Safe to call any number of times."""
        self.registry.clear_allocations()
        logger.info("All allocations cleared")

    def _waiting_by_interval(self) -> List[List[Person]]:
        partition = self.settings.require_partition()
        intervals = partition.oldest_first()
        buckets: List[List[Person]] = [[] for _ in intervals]
        for person in self.registry.unallocated():
            age = self.registry.age_of(person)
            for bucket, interval in zip(buckets, intervals):
                if interval.contains(age):
                    bucket.append(person)
                    break
        return buckets

    def _take(self, bucket: List[Person], limit: int, day: int, hub: str) -> List[str]:
        """Allocates up to `limit` people from the front of the bucket and removes them."""
        if limit <= 0:
            return []
        chosen = bucket[:limit]
        del bucket[:limit]
        for person in chosen:
            person.allocate(day, hub)
        return [p.ssn for p in chosen]
