"""
Planning configuration file model.

The CLI reads a JSON document of this shape to set up hubs, staffing,
working hours and age intervals before the people CSV is loaded.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .hub import Staffing


class HubConfig(BaseModel):
    name: str = Field(min_length=1)
    staffing: Optional[Staffing] = Field(default=None, description="Leave out for an unstaffed hub")


class PlanningConfig(BaseModel):
    """Everything the planner needs besides the people themselves."""
    age_breakpoints: List[int] = Field(description="Ascending interval breaks, e.g. [40, 60]")
    weekly_hours: List[int] = Field(description="7 values, Monday first")
    hubs: List[HubConfig] = Field(default_factory=list)
    current_year: Optional[int] = Field(default=None, description="Defaults to the current calendar year")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "age_breakpoints": [40, 50, 60, 70],
            "weekly_hours": [4, 6, 8, 8, 8, 4, 0],
            "hubs": [
                {"name": "Fiera", "staffing": {"doctors": 2, "nurses": 3, "other": 1}},
                {"name": "Lingotto"}
            ],
            "current_year": 2021
        }
    })

    @field_validator('hubs')
    @classmethod
    def validate_unique_hubs(cls, v):
        names = [h.name for h in v]
        if len(names) != len(set(names)):
            raise ValueError("Hub names must be unique")
        return v
