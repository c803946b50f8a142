"""Tests for allocation statistics."""
import pytest

from conftest import add_people
from exceptions.custom_errors import NoDataError, NoPeopleError, NotConfiguredError


class TestProportionAllocated:

    def test_empty_registry(self, small_hub_planner):
        with pytest.raises(NoPeopleError):
            small_hub_planner.proportion_allocated()

    def test_empty_registry_is_no_data(self, small_hub_planner):
        with pytest.raises(NoDataError):
            small_hub_planner.proportion_allocated()

    def test_before_allocation(self, small_hub_planner):
        add_people(small_hub_planner, "P", 10, age=30)
        assert small_hub_planner.proportion_allocated() == 0.0

    def test_after_allocation(self, small_hub_planner):
        add_people(small_hub_planner, "P", 40, age=30)
        small_hub_planner.allocate_one_day("Fiera", 0)
        assert small_hub_planner.proportion_allocated() == pytest.approx(0.25)

    def test_within_bounds(self, small_hub_planner):
        add_people(small_hub_planner, "P", 4, age=30)
        small_hub_planner.allocate_week()
        assert 0.0 <= small_hub_planner.proportion_allocated() <= 1.0
        assert small_hub_planner.proportion_allocated() == 1.0


class TestByAgeInterval:

    @pytest.fixture
    def allocated(self, small_hub_planner):
        add_people(small_hub_planner, "O", 20, age=70)
        add_people(small_hub_planner, "Y", 20, age=20)
        small_hub_planner.allocate_one_day("Fiera", 0)
        return small_hub_planner

    def test_proportion_by_interval(self, allocated):
        assert allocated.proportion_allocated_by_age_interval() == {
            "[0,40)": pytest.approx(2 / 20),
            "[40,60)": None,
            "[60,+)": pytest.approx(8 / 20),
        }

    def test_distribution(self, allocated):
        assert allocated.allocation_distribution_by_age_interval() == {
            "[0,40)": pytest.approx(0.2),
            "[40,60)": pytest.approx(0.0),
            "[60,+)": pytest.approx(0.8),
        }

    def test_distribution_without_allocations(self, small_hub_planner):
        add_people(small_hub_planner, "P", 5, age=30)
        assert small_hub_planner.allocation_distribution_by_age_interval() == {
            "[0,40)": None,
            "[40,60)": None,
            "[60,+)": None,
        }

    def test_needs_partition(self):
        from scheduler import VaccinationPlanner
        p = VaccinationPlanner(current_year=2021)
        with pytest.raises(NotConfiguredError):
            p.proportion_allocated_by_age_interval()


class TestSummary:

    def test_counts(self, small_hub_planner):
        add_people(small_hub_planner, "P", 15, age=30)
        small_hub_planner.allocate_week()
        summary = small_hub_planner.stats.summary()

        assert summary["total_people"] == 15
        assert summary["allocated"] == 10
        assert summary["unallocated"] == 5
        assert summary["allocated_per_hub"] == {"Fiera": 10}
        assert summary["allocated_per_day"] == {0: 10}
