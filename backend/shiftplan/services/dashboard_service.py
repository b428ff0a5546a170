"""
Critical alerts for the shift dashboard and per-cost-center summaries.

Alerts are computed over the same window as the dashboard metrics:
  1. shifts in ``conflict`` status
  2. zones whose mean coverage is below COVERAGE_ALERT_PERCENTAGE
  3. drafts starting within the next UNPUBLISHED_ALERT_DAYS days
  4. shift-system employees without any shift
  5. employees whose assigned hours fall outside the under/over band
"""
import logging
from datetime import date, timedelta
from typing import Iterable

from shiftplan.core.config import settings
from shiftplan.schemas.coverage import Zone
from shiftplan.schemas.shift import Employee, Shift, ShiftStatus
from shiftplan.schemas.stats import CenterSummary, CostCenter, CriticalAlert
from shiftplan.services.coverage_service import average_coverage, zone_average_coverage
from shiftplan.services.hours_service import employee_hours_stats, work_in_range

logger = logging.getLogger(__name__)


def _affected(employee_ids: Iterable[str], employees: list[Employee]) -> tuple[list[str], list[str]]:
    """Unique ids in first-seen order plus the names of the ones we know."""
    by_id = {e.id: e for e in employees}
    ids = list(dict.fromkeys(employee_ids))
    names = [by_id[i].full_name for i in ids if i in by_id]
    return ids, names


def critical_alerts(
    shifts: list[Shift],
    employees: list[Employee],
    zones: list[Zone],
    from_date: date,
    to_date: date,
    today: date | None = None,
) -> list[CriticalAlert]:
    today = today or date.today()
    in_range = work_in_range(shifts, from_date, to_date)
    alerts: list[CriticalAlert] = []

    # 1. Conflicts
    conflicted = [s for s in in_range if s.status == ShiftStatus.CONFLICT]
    if conflicted:
        ids, names = _affected((s.employee_id for s in conflicted), employees)
        alerts.append(CriticalAlert(
            id="conflicts",
            type="conflict",
            severity="error",
            title=f"{len(conflicted)} shift(s) with conflicts",
            description="Overlaps or rule violations must be resolved before publishing",
            count=len(conflicted),
            affected_employee_ids=ids,
            affected_employees=names,
        ))

    # 2. Low coverage
    threshold = settings.COVERAGE_ALERT_PERCENTAGE
    low_zones = []
    for zone in zones:
        avg = zone_average_coverage(zone, in_range, from_date, to_date)
        if avg is not None and avg < threshold:
            low_zones.append(zone)
    if low_zones:
        alerts.append(CriticalAlert(
            id="low-coverage",
            type="coverage",
            severity="error",
            title=f"{len(low_zones)} zone(s) below {threshold:g}% coverage",
            description=", ".join(z.name for z in low_zones),
            count=len(low_zones),
            zone_ids=[z.id for z in low_zones],
        ))

    # 3. Drafts due soon
    horizon = today + timedelta(days=settings.UNPUBLISHED_ALERT_DAYS)
    pending = [s for s in in_range if s.status == ShiftStatus.DRAFT and today <= s.date <= horizon]
    if pending:
        ids, names = _affected((s.employee_id for s in pending), employees)
        alerts.append(CriticalAlert(
            id="unpublished",
            type="unpublished",
            severity="warning",
            title=f"{len(pending)} unpublished shift(s) in the next {settings.UNPUBLISHED_ALERT_DAYS} days",
            description="Employees cannot see draft shifts",
            count=len(pending),
            affected_employee_ids=ids,
            affected_employees=names,
        ))

    # 4. Employees without shifts
    scheduled = {s.employee_id for s in in_range}
    idle = [e for e in employees if e.uses_shift_system and e.id not in scheduled]
    if idle:
        alerts.append(CriticalAlert(
            id="no-shifts",
            type="no_shifts",
            severity="warning",
            title=f"{len(idle)} employee(s) without shifts",
            description="No shift assigned in the selected period",
            count=len(idle),
            affected_employee_ids=[e.id for e in idle],
            affected_employees=[e.full_name for e in idle],
        ))

    # 5. Hours outside the band; employees without a contract have no band
    off_band = [
        stats for stats in (
            employee_hours_stats(e, in_range, from_date, to_date)
            for e in employees if e.uses_shift_system and e.contract_hours
        )
        if stats.status != "ok"
    ]
    if off_band:
        under = sum(1 for s in off_band if s.status == "under")
        alerts.append(CriticalAlert(
            id="hours",
            type="hours",
            severity="warning",
            title=f"{len(off_band)} employee(s) with unbalanced hours",
            description=f"{under} under, {len(off_band) - under} over contract",
            count=len(off_band),
            affected_employee_ids=[s.employee_id for s in off_band],
            affected_employees=[s.employee_name for s in off_band],
        ))

    logger.debug("Dashboard %s–%s: %d alert(s)", from_date, to_date, len(alerts))
    return alerts


def center_summaries(
    shifts: list[Shift],
    employees: list[Employee],
    zones: list[Zone],
    cost_centers: list[CostCenter],
    from_date: date,
    to_date: date,
    today: date | None = None,
) -> list[CenterSummary]:
    """One summary per active cost center, scoped to its shifts, zones and employees."""
    summaries = []
    for center in cost_centers:
        if not center.active:
            continue
        center_shifts = [s for s in shifts if s.cost_center_id == center.id]
        center_zones = [z for z in zones if z.cost_center_id == center.id]
        center_employees = [e for e in employees if e.cost_center_id == center.id]
        in_range = work_in_range(center_shifts, from_date, to_date)

        summaries.append(CenterSummary(
            cost_center_id=center.id,
            cost_center_name=center.name,
            total_shifts=len(in_range),
            draft_shifts=sum(1 for s in in_range if s.status == ShiftStatus.DRAFT),
            published_shifts=sum(1 for s in in_range if s.status == ShiftStatus.PUBLISHED),
            conflict_shifts=sum(1 for s in in_range if s.status == ShiftStatus.CONFLICT),
            average_coverage=average_coverage(center_zones, in_range, from_date, to_date),
            alerts=critical_alerts(
                center_shifts, center_employees, center_zones, from_date, to_date, today
            ),
        ))
    return summaries
