"""
Scheduling package: registry state, capacity, allocation engine and statistics.
"""

from .state import Registry
from .capacity import CapacityModel
from .engine import AllocationEngine, WeekPlan
from .statistics import AllocationStatistics
from .planner import VaccinationPlanner

__all__ = [
    "Registry",
    "CapacityModel",
    "AllocationEngine",
    "WeekPlan",
    "AllocationStatistics",
    "VaccinationPlanner",
]
