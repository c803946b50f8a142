"""
Data models package for the Vaccination Hub Planner.

This package exports the core pillars of the data architecture:
1. Demand (Person, allocation state, age partition)
2. Supply (Hub, Staffing, WeeklyHours)
3. Configuration (PlanSettings, PlanningConfig)
"""

from .age import (
    AgeInterval,
    AgePartition
)

from .person import (
    Person,
    Allocated,
    Unallocated,
    AllocationState
)

from .hub import (
    Hub,
    Staffing
)

from .schedule import (
    WeeklyHours,
    PlanSettings,
    DAYS_PER_WEEK,
    CURRENT_YEAR
)

from .config import (
    HubConfig,
    PlanningConfig
)

__all__ = [
    # --- Demand Models ---
    "AgeInterval",
    "AgePartition",
    "Person",
    "Allocated",
    "Unallocated",
    "AllocationState",

    # --- Supply Models ---
    "Hub",
    "Staffing",
    "WeeklyHours",

    # --- Configuration ---
    "PlanSettings",
    "HubConfig",
    "PlanningConfig",
    "DAYS_PER_WEEK",
    "CURRENT_YEAR",
]
