"""
Assigned vs. contracted hours per employee and the shift dashboard metrics.
"""
import math
from datetime import date, timedelta
from typing import Iterable

from shiftplan.core.config import settings
from shiftplan.schemas.coverage import Zone
from shiftplan.schemas.shift import Employee, Shift, ShiftStatus
from shiftplan.schemas.stats import DashboardMetrics, EmployeeHoursStats, HoursStatus
from shiftplan.services.coverage_service import average_coverage
from shiftplan.utils.time_utils import week_start


def hours_status(
    percentage: float,
    under: float | None = None,
    over: float | None = None,
) -> HoursStatus:
    under = settings.HOURS_UNDER_PERCENTAGE if under is None else under
    over = settings.HOURS_OVER_PERCENTAGE if over is None else over
    if percentage < under:
        return "under"
    if percentage > over:
        return "over"
    return "ok"


def weeks_in_range(from_date: date, to_date: date) -> int:
    days = (to_date - from_date).days
    return max(1, math.ceil(days / 7))


def work_in_range(shifts: Iterable[Shift], from_date: date, to_date: date) -> list[Shift]:
    return [
        s for s in shifts
        if from_date <= s.date <= to_date and not s.is_absence and not s.is_cancelled
    ]


def employee_hours_stats(
    employee: Employee, shifts: Iterable[Shift], from_date: date, to_date: date
) -> EmployeeHoursStats:
    own = [s for s in work_in_range(shifts, from_date, to_date) if s.employee_id == employee.id]
    assigned = sum(s.net_hours for s in own)
    contract = (employee.contract_hours or 0) * weeks_in_range(from_date, to_date)
    percentage = assigned / contract * 100 if contract > 0 else 0.0

    return EmployeeHoursStats(
        employee_id=employee.id,
        employee_name=employee.full_name,
        period_start=from_date,
        assigned_hours=assigned,
        contract_hours=contract,
        percentage=percentage,
        status=hours_status(percentage),
    )


def employee_week_stats(employee: Employee, shifts: Iterable[Shift], day: date) -> EmployeeHoursStats:
    """Stats for the Monday–Sunday week containing ``day``."""
    start = week_start(day)
    return employee_hours_stats(employee, shifts, start, start + timedelta(days=6))


def dashboard_metrics(
    shifts: list[Shift],
    employees: list[Employee],
    zones: list[Zone],
    from_date: date,
    to_date: date,
) -> DashboardMetrics:
    in_range = work_in_range(shifts, from_date, to_date)
    shift_employees = [e for e in employees if e.uses_shift_system]
    weeks = weeks_in_range(from_date, to_date)

    return DashboardMetrics(
        total_shifts=len(in_range),
        draft_shifts=sum(1 for s in in_range if s.status == ShiftStatus.DRAFT),
        published_shifts=sum(1 for s in in_range if s.status == ShiftStatus.PUBLISHED),
        conflict_shifts=sum(1 for s in in_range if s.status == ShiftStatus.CONFLICT),
        average_coverage=average_coverage(zones, in_range, from_date, to_date),
        employees_with_shifts=len({s.employee_id for s in in_range}),
        total_employees=len(shift_employees),
        total_hours_assigned=sum(s.net_hours for s in in_range),
        total_hours_contracted=sum((e.contract_hours or 0) * weeks for e in shift_employees),
    )
