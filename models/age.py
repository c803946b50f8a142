"""
Age partition models for the Vaccination Hub Planner.

An age partition splits the non-negative integers into ordered, half-open
intervals [lower, upper). The first interval starts at 0 and the last one is
unbounded, so every age belongs to exactly one interval.
"""

from typing import List, Optional, Sequence
from pydantic import BaseModel, Field, ConfigDict, model_validator

from exceptions.custom_errors import (
    InvalidArgumentError,
    InvalidConfigurationError,
    NotFoundError,
)


class AgeInterval(BaseModel):
    """A closed-open age range. upper=None means no upper bound."""
    lower: int = Field(ge=0, description="Inclusive lower bound")
    upper: Optional[int] = Field(default=None, description="Exclusive upper bound, None if unbounded")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_bounds(self):
        if self.upper is not None and self.upper <= self.lower:
            raise ValueError("Upper bound must be strictly greater than lower bound")
        return self

    @property
    def label(self) -> str:
        """Formatted as "[40,60)", with '+' for the unbounded interval."""
        upper = "+" if self.upper is None else str(self.upper)
        return f"[{self.lower},{upper})"

    def contains(self, age: int) -> bool:
        if age < self.lower:
            return False
        return self.upper is None or age < self.upper


class AgePartition(BaseModel):
    """
    Ordered, gap-free set of age intervals covering [0, +inf).
    Build it with from_breakpoints() rather than listing intervals by hand.
    """
    intervals: List[AgeInterval] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_coverage(self):
        """Intervals must start at 0, touch each other, and end unbounded."""
        if self.intervals[0].lower != 0:
            raise ValueError("First interval must start at 0")
        for prev, nxt in zip(self.intervals, self.intervals[1:]):
            if prev.upper != nxt.lower:
                raise ValueError(f"Intervals {prev.label} and {nxt.label} are not contiguous")
        if self.intervals[-1].upper is not None:
            raise ValueError("Last interval must be unbounded")
        return self

    @classmethod
    def from_breakpoints(cls, breakpoints: Sequence[int]) -> "AgePartition":
        """
        Builds N+1 intervals from N breakpoints.
        e.g. (40, 60) -> [0,40), [40,60), [60,+)
        """
        breaks = list(breakpoints)
        for b in breaks:
            if isinstance(b, bool) or not isinstance(b, int) or b <= 0:
                raise InvalidConfigurationError(f"Breakpoint {b!r} is not a positive integer")
        for prev, nxt in zip(breaks, breaks[1:]):
            if nxt <= prev:
                raise InvalidConfigurationError(
                    f"Breakpoints must be strictly ascending ({prev} then {nxt})"
                )

        lowers = [0] + breaks
        uppers: List[Optional[int]] = breaks + [None]
        return cls(intervals=[AgeInterval(lower=lo, upper=up) for lo, up in zip(lowers, uppers)])

    def __len__(self) -> int:
        return len(self.intervals)

    def labels(self) -> List[str]:
        return [i.label for i in self.intervals]

    def interval_of(self, age: int) -> int:
        """Index of the unique interval containing this age."""
        if age < 0:
            raise InvalidArgumentError(f"Age cannot be negative (got {age})")
        # Intervals are sorted, so the match is the last one whose lower bound fits
        index = 0
        for i, interval in enumerate(self.intervals):
            if interval.lower <= age:
                index = i
            else:
                break
        return index

    def oldest_first(self) -> List[AgeInterval]:
        """Intervals from the highest ages down to [0, ...)."""
        return list(reversed(self.intervals))

    def find(self, label: str) -> AgeInterval:
        for interval in self.intervals:
            if interval.label == label:
                return interval
        raise NotFoundError(f"Unknown age interval {label!r}")
