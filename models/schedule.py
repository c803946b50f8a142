"""
Schedule data models for the Vaccination Hub Planner.

This module defines the weekly working hours of the hubs, the 15 minute time
slots they produce, and the shared settings the capacity model, the engine
and the statistics read from.
"""

from datetime import date, datetime, time, timedelta
from typing import ClassVar, List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from exceptions.custom_errors import NotConfiguredError
from .age import AgePartition

DAYS_PER_WEEK = 7
CURRENT_YEAR = date.today().year


class WeeklyHours(BaseModel):
    """
    Working hours for each weekday, Monday first.
    A day may hold at most 24 hours, so the week never exceeds 24*7.
    """
    MAX_DAILY_HOURS: ClassVar[int] = 24
    SLOT_MINUTES: ClassVar[int] = 15
    FIRST_SLOT: ClassVar[time] = time(9, 0)

    hours: List[int] = Field(description="Exactly 7 values, 0=Monday")

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {"hours": [4, 6, 8, 8, 8, 4, 0]}
    })

    @field_validator('hours')
    @classmethod
    def validate_hours(cls, v):
        if len(v) != DAYS_PER_WEEK:
            raise ValueError(f"Expected {DAYS_PER_WEEK} values, got {len(v)}")
        for day, h in enumerate(v):
            if h < 0 or h > cls.MAX_DAILY_HOURS:
                raise ValueError(f"Day {day}: {h} hours is outside [0, {cls.MAX_DAILY_HOURS}]")
        if sum(v) > cls.MAX_DAILY_HOURS * DAYS_PER_WEEK:
            raise ValueError("Total weekly hours cannot exceed 24*7")
        return v

    def __getitem__(self, day: int) -> int:
        return self.hours[day]

    def slot_labels(self) -> List[List[str]]:
        """
        "HH:MM" labels for every 15 minute slot, starting at 09:00.
        Each day gets hours[day] * 4 labels.
        """
        start = datetime.combine(date.today(), self.FIRST_SLOT)
        per_hour = 60 // self.SLOT_MINUTES
        week = []
        for h in self.hours:
            week.append([
                (start + timedelta(minutes=k * self.SLOT_MINUTES)).strftime("%H:%M")
                for k in range(h * per_hour)
            ])
        return week


class PlanSettings(BaseModel):
    """
    Mutable configuration shared across the planning components.
    The reference year for ages lives on the Registry.
    Unset parts raise NotConfiguredError when a computation needs them.
    """
    age_partition: Optional[AgePartition] = None
    weekly_hours: Optional[WeeklyHours] = None

    def require_partition(self) -> AgePartition:
        if self.age_partition is None:
            raise NotConfiguredError("Age intervals have not been defined")
        return self.age_partition

    def require_hours(self) -> WeeklyHours:
        if self.weekly_hours is None:
            raise NotConfiguredError("Weekly working hours have not been defined")
        return self.weekly_hours
