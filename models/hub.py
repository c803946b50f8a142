"""
Hub and staffing data models for the Vaccination Hub Planner.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Staffing(BaseModel):
    """Personnel available at a hub. Every count must be positive."""
    doctors: int = Field(gt=0, description="Number of doctors")
    nurses: int = Field(gt=0, description="Number of nurses")
    other: int = Field(gt=0, description="Number of other personnel")

    model_config = ConfigDict(frozen=True)


class Hub(BaseModel):
    """
    A vaccination site. Staffing stays None until it is configured;
    hourly capacity is derived from it by the capacity model.
    """
    name: str = Field(min_length=1, description="Unique hub name")
    staffing: Optional[Staffing] = Field(default=None, description="Set through set_staff")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Fiera",
            "staffing": {"doctors": 2, "nurses": 3, "other": 1}
        }
    })

    @property
    def is_staffed(self) -> bool:
        return self.staffing is not None
