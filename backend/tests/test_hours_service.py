"""
Tests for hours_service – weekly assigned vs. contracted hours and dashboard metrics.
"""
from datetime import timedelta

import pytest

from shiftplan.schemas.shift import ShiftStatus
from shiftplan.services.hours_service import (
    dashboard_metrics,
    employee_hours_stats,
    employee_week_stats,
    hours_status,
    weeks_in_range,
)
from tests.conftest import MONDAY, make_absence, make_employee, make_shift, make_zone


@pytest.mark.parametrize("percentage, expected", [
    (0, "under"),
    (69.9, "under"),
    (70, "ok"),
    (130, "ok"),
    (130.1, "over"),
])
def test_hours_status_thresholds(percentage, expected):
    assert hours_status(percentage) == expected


def test_weeks_in_range_at_least_one():
    assert weeks_in_range(MONDAY, MONDAY) == 1
    assert weeks_in_range(MONDAY, MONDAY + timedelta(days=6)) == 1
    assert weeks_in_range(MONDAY, MONDAY + timedelta(days=13)) == 2


def test_week_stats_use_net_hours():
    """5 × (8 h − 30 min) = 37.5 h of 40 h."""
    shifts = [
        make_shift(MONDAY + timedelta(days=i), "08:00", "16:00", break_minutes=30)
        for i in range(5)
    ]
    stats = employee_week_stats(make_employee(contract_hours=40), shifts, MONDAY + timedelta(days=2))

    assert stats.period_start == MONDAY
    assert stats.assigned_hours == 37.5
    assert stats.contract_hours == 40
    assert stats.percentage == pytest.approx(93.75)
    assert stats.status == "ok"


def test_week_stats_ignore_other_weeks_employees_and_absences():
    shifts = [
        make_shift(MONDAY - timedelta(days=1), "08:00", "16:00"),
        make_shift(MONDAY, "08:00", "16:00", employee_id="emp-2"),
        make_absence(MONDAY + timedelta(days=1)),
        make_shift(MONDAY + timedelta(days=2), "08:00", "16:00", status=ShiftStatus.CANCELLED),
    ]
    stats = employee_week_stats(make_employee(contract_hours=40), shifts, MONDAY)

    assert stats.assigned_hours == 0
    assert stats.status == "under"


def test_stats_without_contract():
    stats = employee_hours_stats(make_employee(contract_hours=None), [make_shift()], MONDAY, MONDAY)
    assert stats.contract_hours == 0
    assert stats.percentage == 0.0


def test_dashboard_metrics():
    zone = make_zone(morning=1, afternoon=0, night=0)
    employees = [
        make_employee("emp-1", contract_hours=40),
        make_employee("emp-2", contract_hours=20),
        make_employee("emp-3", contract_hours=40, uses_shift_system=False),
    ]
    shifts = [
        make_shift(MONDAY, "08:00", "16:00"),
        make_shift(MONDAY, "16:00", "20:00", employee_id="emp-2", status=ShiftStatus.PUBLISHED),
        make_shift(MONDAY + timedelta(days=1), "08:00", "12:00", status=ShiftStatus.CONFLICT),
        make_shift(MONDAY + timedelta(days=10), "08:00", "16:00"),
    ]
    metrics = dashboard_metrics(shifts, employees, [zone], MONDAY, MONDAY + timedelta(days=6))

    assert metrics.total_shifts == 3
    assert (metrics.draft_shifts, metrics.published_shifts, metrics.conflict_shifts) == (1, 1, 1)
    assert metrics.employees_with_shifts == 2
    assert metrics.total_employees == 2
    assert metrics.total_hours_assigned == 16
    assert metrics.total_hours_contracted == 60
    assert 0 < metrics.average_coverage <= 100
