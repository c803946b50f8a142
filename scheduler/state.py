"""
Registry State Management.

This module acts as the 'Memory' of the planner.
It tracks:
1. Registered people and their allocation state.
2. Vaccination hubs and their staffing.
3. Allocation snapshots (who is booked where) for engine and statistics.
"""

import logging
from typing import List, Dict, Iterator

from models import Person, Hub, Staffing, AgeInterval, Allocated
from exceptions.custom_errors import (
    DuplicateKeyError,
    HubNotFoundError,
    InvalidConfigurationError,
    PersonNotFoundError,
)

logger = logging.getLogger(__name__)


class Registry:
    """
    Owns people and hubs for the lifetime of a planning session.
    People are always iterated in ascending SSN order, hubs in name order.
    """

    def __init__(self, current_year: int):
        self.current_year = current_year
        self.people: Dict[str, Person] = {}
        self.hubs: Dict[str, Hub] = {}

    # --- Registration ---

    def add_person(self, first_name: str, last_name: str, ssn: str, birth_year: int) -> Person:
        if ssn in self.people:
            raise DuplicateKeyError(f"Person {ssn} is already registered")
        if birth_year > self.current_year:
            raise InvalidConfigurationError(
                f"Person {ssn}: birth year {birth_year} is after {self.current_year}"
            )
        person = Person(ssn=ssn, first_name=first_name, last_name=last_name, birth_year=birth_year)
        self.people[ssn] = person
        return person

    def define_hub(self, name: str) -> Hub:
        if name in self.hubs:
            raise DuplicateKeyError(f"Hub {name} is already defined")
        hub = Hub(name=name)
        self.hubs[name] = hub
        return hub

    def set_staff(self, name: str, staffing: Staffing) -> None:
        self.get_hub(name).staffing = staffing
        logger.debug(f"Hub {name} staffed: {staffing}")

    # --- Lookups ---

    def get_person(self, ssn: str) -> Person:
        try:
            return self.people[ssn]
        except KeyError:
            raise PersonNotFoundError(f"No person with SSN {ssn}") from None

    def get_hub(self, name: str) -> Hub:
        try:
            return self.hubs[name]
        except KeyError:
            raise HubNotFoundError(f"No hub named {name}") from None

    def count_people(self) -> int:
        return len(self.people)

    def age_of(self, person: Person) -> int:
        return person.age(self.current_year)

    def hub_names(self) -> List[str]:
        return sorted(self.hubs)

    def iter_people(self) -> Iterator[Person]:
        for ssn in sorted(self.people):
            yield self.people[ssn]

    # --- Query Methods (Used by Engine and Statistics) ---

    def people_in(self, interval: AgeInterval) -> List[Person]:
        """Everyone whose current age falls in the interval, by SSN."""
        return [p for p in self.iter_people() if interval.contains(self.age_of(p))]

    def unallocated(self) -> List[Person]:
        return [p for p in self.iter_people() if not p.is_allocated]

    def allocated(self) -> List[Person]:
        return [p for p in self.iter_people() if p.is_allocated]

    def allocated_to(self, day: int, hub: str) -> List[str]:
        """Snapshot of a single (day, hub) slot."""
        target = Allocated(day=day, hub=hub)
        return [p.ssn for p in self.iter_people() if p.allocation == target]

    def clear_allocations(self) -> None:
        """Reset every person back to Unallocated."""
        for person in self.people.values():
            person.clear_allocation()
