"""
Person data models for the Vaccination Hub Planner.

A person carries an explicit allocation state: either Unallocated or
Allocated to a (day, hub) pair. There is no way to express a day without a
hub or the other way round.
"""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field, ConfigDict


class Unallocated(BaseModel):
    """Person has not been assigned a vaccination slot yet."""
    status: Literal["unallocated"] = "unallocated"

    model_config = ConfigDict(frozen=True)


class Allocated(BaseModel):
    """Person is assigned to a hub on a given weekday."""
    status: Literal["allocated"] = "allocated"
    day: int = Field(ge=0, le=6, description="0=Monday, 6=Sunday")
    hub: str = Field(min_length=1, description="Name of the hub")

    model_config = ConfigDict(frozen=True)


AllocationState = Annotated[Union[Unallocated, Allocated], Field(discriminator="status")]


class Person(BaseModel):
    """
    A registered person, identified by SSN ("codice fiscale").
    Age is always derived from birth_year, never stored.
    """
    ssn: str = Field(min_length=1, description="Unique identifier")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    birth_year: int = Field(description="Year of birth")

    allocation: AllocationState = Field(
        default_factory=Unallocated,
        description="Current slot assignment"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "ssn": "RSSMRA50A01H501U",
            "first_name": "Mario",
            "last_name": "Rossi",
            "birth_year": 1950,
            "allocation": {"status": "allocated", "day": 0, "hub": "Fiera"}
        }
    })

    @property
    def is_allocated(self) -> bool:
        return isinstance(self.allocation, Allocated)

    def age(self, current_year: int) -> int:
        return current_year - self.birth_year

    def allocate(self, day: int, hub: str) -> None:
        self.allocation = Allocated(day=day, hub=hub)

    def clear_allocation(self) -> None:
        self.allocation = Unallocated()

    def __str__(self) -> str:
        return f"{self.ssn},{self.last_name},{self.first_name}"
