"""
Allocation Statistics for the Vaccination Hub Planner.

Read-only aggregates over the allocation state held by the registry.
Ratios with an empty denominator are reported as None ("no data") rather
than raising or producing NaN.
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional

from models import Person, PlanSettings
from exceptions.custom_errors import NoPeopleError
from .state import Registry

Ratio = Optional[float]


class AllocationStatistics:
    """
    Computes proportions and distributions of allocated people.
    """

    def __init__(self, registry: Registry, settings: PlanSettings):
        self.registry = registry
        self.settings = settings

    def proportion_allocated(self) -> float:
        """Allocated people over all registered people."""
        total = self.registry.count_people()
        if total == 0:
            raise NoPeopleError("Cannot compute allocation proportion: no people registered")
        return len(self.registry.allocated()) / total

    def proportion_allocated_by_age_interval(self) -> Dict[str, Ratio]:
        """
        For each interval: allocated in interval / people in interval.
        None when the interval holds nobody.
        """
        result = {}
        for label, members in self._members_by_label().items():
            allocated = sum(1 for p in members if p.is_allocated)
            result[label] = self._ratio(allocated, len(members))
        return result

    def allocation_distribution_by_age_interval(self) -> Dict[str, Ratio]:
        """
        For each interval: allocated in interval / all allocated people.
        Every value is None while nobody is allocated.
        """
        total_allocated = len(self.registry.allocated())
        result = {}
        for label, members in self._members_by_label().items():
            allocated = sum(1 for p in members if p.is_allocated)
            result[label] = self._ratio(allocated, total_allocated)
        return result

    def summary(self) -> Dict[str, Any]:
        """
        Generate stats for the final report.
        """
        total = self.registry.count_people()
        allocated = self.registry.allocated()

        per_hub: Dict[str, int] = defaultdict(int)
        per_day: Dict[int, int] = defaultdict(int)
        for person in allocated:
            per_hub[person.allocation.hub] += 1
            per_day[person.allocation.day] += 1

        return {
            "total_people": total,
            "allocated": len(allocated),
            "unallocated": total - len(allocated),
            "proportion_allocated": round(len(allocated) / total, 4) if total else None,
            "allocated_per_hub": {hub: per_hub[hub] for hub in self.registry.hub_names()},
            "allocated_per_day": dict(sorted(per_day.items())),
            "proportion_by_age_interval": self.proportion_allocated_by_age_interval(),
            "distribution_by_age_interval": self.allocation_distribution_by_age_interval(),
        }

    def _members_by_label(self) -> Dict[str, List[Person]]:
        partition = self.settings.require_partition()
        return {i.label: self.registry.people_in(i) for i in partition.intervals}

    @staticmethod
    def _ratio(numerator: int, denominator: int) -> Ratio:
        if denominator == 0:
            return None
        return numerator / denominator
