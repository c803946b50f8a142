"""Tests for hourly capacity and daily availability."""
import pytest

from exceptions.custom_errors import (
    HubNotFoundError,
    HubNotStaffedError,
    InvalidArgumentError,
    NotConfiguredError,
)


class TestHourlyCapacity:

    def test_bottleneck_is_other(self, planner):
        planner.define_hub("Fiera")
        planner.set_staff("Fiera", 2, 3, 1)
        assert planner.estimate_hourly_capacity("Fiera") == 20

    @pytest.mark.parametrize("staff,expected", [
        ((1, 100, 100), 10),
        ((100, 1, 100), 12),
        ((100, 100, 1), 20),
        ((6, 5, 3), 60),
    ])
    def test_min_of_roles(self, planner, staff, expected):
        planner.define_hub("H")
        planner.set_staff("H", *staff)
        assert planner.estimate_hourly_capacity("H") == expected

    def test_unknown_hub(self, planner):
        with pytest.raises(HubNotFoundError):
            planner.estimate_hourly_capacity("Nowhere")

    def test_unstaffed_hub(self, planner):
        planner.define_hub("Fiera")
        with pytest.raises(HubNotStaffedError):
            planner.estimate_hourly_capacity("Fiera")

    def test_unstaffed_is_a_configuration_error(self, planner):
        planner.define_hub("Fiera")
        with pytest.raises(NotConfiguredError):
            planner.estimate_hourly_capacity("Fiera")


class TestDailyAvailable:

    @pytest.fixture
    def staffed(self, planner):
        planner.define_hub("Fiera")
        planner.set_staff("Fiera", 2, 3, 1)
        return planner

    def test_hours_times_capacity(self, staffed):
        staffed.set_weekly_hours(4, 0, 0, 0, 0, 0, 0)
        assert staffed.get_daily_available("Fiera", 0) == 80

    def test_zero_hours_day(self, staffed):
        staffed.set_weekly_hours(4, 0, 0, 0, 0, 0, 0)
        assert staffed.get_daily_available("Fiera", 1) == 0

    @pytest.mark.parametrize("day", [-1, 7, 10])
    def test_day_out_of_range(self, staffed, day):
        staffed.set_weekly_hours(4, 4, 4, 4, 4, 4, 4)
        with pytest.raises(InvalidArgumentError):
            staffed.get_daily_available("Fiera", day)

    def test_hours_not_set(self, staffed):
        with pytest.raises(NotConfiguredError):
            staffed.get_daily_available("Fiera", 0)

    def test_unknown_hub(self, staffed):
        staffed.set_weekly_hours(4, 4, 4, 4, 4, 4, 4)
        with pytest.raises(HubNotFoundError):
            staffed.get_daily_available("Lingotto", 0)


class TestWeeklyAvailability:

    def test_all_hubs(self, planner):
        planner.define_hub("Fiera")
        planner.set_staff("Fiera", 2, 3, 1)
        planner.define_hub("Lingotto")
        planner.set_staff("Lingotto", 1, 100, 100)
        planner.set_weekly_hours(4, 6, 8, 8, 8, 4, 0)

        assert planner.get_weekly_availability() == {
            "Fiera": [80, 120, 160, 160, 160, 80, 0],
            "Lingotto": [40, 60, 80, 80, 80, 40, 0],
        }

    def test_unstaffed_hub_reported_as_zero(self, planner):
        planner.define_hub("Fiera")
        planner.set_weekly_hours(4, 6, 8, 8, 8, 4, 0)
        assert planner.get_weekly_availability() == {"Fiera": [0] * 7}

    def test_hours_not_set(self, planner):
        planner.define_hub("Fiera")
        with pytest.raises(NotConfiguredError):
            planner.get_weekly_availability()
