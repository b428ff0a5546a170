"""
Conflict detection for planned shifts.
Checks overlap, minimum rest, absences and weekly hours for one candidate
shift against the rest of the same employee's records.
"""
import logging
from dataclasses import dataclass
from typing import Iterable

from shiftplan.core.config import Settings, settings as default_settings
from shiftplan.schemas.conflict import (
    Conflict,
    ConflictType,
    Notice,
    Severity,
    ShiftConflictSummary,
    ValidationResult,
)
from shiftplan.schemas.shift import Employee, Shift
from shiftplan.services.interval_service import effective_hours_by_day
from shiftplan.utils.holidays import is_holiday
from shiftplan.utils.time_utils import format_duration, iso_week_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftRules:
    min_rest_hours: float = 12
    max_weekly_hours_percentage: float = 150
    min_shift_hours: float = 0.5
    max_shift_hours: float = 16
    merge_touching_intervals: bool = True

    @classmethod
    def from_settings(cls, s: Settings | None = None) -> "ShiftRules":
        s = s or default_settings
        return cls(
            min_rest_hours=s.SHIFT_MIN_REST_HOURS,
            max_weekly_hours_percentage=s.SHIFT_MAX_WEEKLY_HOURS_PERCENTAGE,
            min_shift_hours=s.SHIFT_MIN_DURATION_HOURS,
            max_shift_hours=s.SHIFT_MAX_DURATION_HOURS,
            merge_touching_intervals=s.SHIFT_MERGE_TOUCHING_INTERVALS,
        )


def validate_shift_input(shift: Shift, rules: ShiftRules | None = None) -> list[str]:
    """Shape checks that make a shift unusable, independent of other records."""
    rules = rules or ShiftRules()
    errors: list[str] = []

    if shift.start_time == shift.end_time and not shift.is_absence:
        errors.append("Start and end time must differ")
        return errors

    if not shift.is_absence:
        hours = shift.duration_hours
        if hours < rules.min_shift_hours:
            errors.append(f"Shift must last at least {rules.min_shift_hours:g}h")
        elif hours > rules.max_shift_hours:
            errors.append(f"Shift must not exceed {rules.max_shift_hours:g}h")

    if shift.break_minutes >= shift.block.duration:
        errors.append("Break must be shorter than the shift")

    return errors


class ConflictService:

    def __init__(self, rules: ShiftRules | None = None, holiday_calendar: str | None = None):
        self.rules = rules or ShiftRules.from_settings()
        self.holiday_calendar = holiday_calendar

    def check_shift(
        self,
        shift: Shift,
        employee: Employee,
        others: Iterable[Shift],
        absences: Iterable[Shift] = (),
    ) -> ValidationResult:
        if shift.is_absence:
            raise ValueError("Only work shifts can be checked for conflicts")

        work, absence_records = self._partition(shift, [*others, *absences])
        result = ValidationResult()

        # 1. Overlap
        self._check_overlap(shift, work, result)

        # 2. Minimum rest since the previous workday
        self._check_rest_period(shift, work, result)

        # 3. Absences
        self._check_absence(shift, absence_records, result)

        # 4. Weekly hours against the contract
        if employee.contract_hours:
            self._check_weekly_hours(shift, employee, work, result)

        # 5. Public holiday (info only)
        holiday_ok, holiday_name = is_holiday(shift.date, self.holiday_calendar)
        if holiday_ok:
            result.warnings.append(Notice(type="info", message=f"Public holiday: {holiday_name}"))

        logger.debug(
            "Checked shift %s (%s %s-%s): %d conflict(s)",
            shift.id, shift.date, shift.start_time, shift.end_time, len(result.conflicts),
        )
        return result

    @staticmethod
    def _partition(shift: Shift, records: list[Shift]) -> tuple[list[Shift], list[Shift]]:
        work: list[Shift] = []
        absences: list[Shift] = []
        for other in records:
            if other.employee_id != shift.employee_id or other.id == shift.id or other.is_cancelled:
                continue
            (absences if other.is_absence else work).append(other)
        return work, absences

    def _check_overlap(self, shift: Shift, work: list[Shift], result: ValidationResult) -> None:
        start, end = shift.starts_at, shift.ends_at
        for other in sorted(work, key=lambda s: s.starts_at):
            if other.starts_at < end and start < other.ends_at:
                result.conflicts.append(Conflict(
                    type=ConflictType.OVERLAP,
                    severity=Severity.ERROR,
                    message=f"Overlaps shift {other.start_time}-{other.end_time} on {other.date.isoformat()}",
                    related_shift_id=other.id,
                ))

    def _check_rest_period(self, shift: Shift, work: list[Shift], result: ValidationResult) -> None:
        start = shift.starts_at
        previous = [o for o in work if o.date < shift.date and o.ends_at <= start]
        if not previous:
            return

        prev_shift = max(previous, key=lambda s: s.ends_at)
        rest_hours = (start - prev_shift.ends_at).total_seconds() / 3600
        if rest_hours < self.rules.min_rest_hours:
            result.conflicts.append(Conflict(
                type=ConflictType.INSUFFICIENT_REST,
                severity=Severity.WARNING,
                message=(
                    f"Minimum rest of {self.rules.min_rest_hours:g}h not met: "
                    f"only {rest_hours:.1f}h since shift {prev_shift.start_time}-{prev_shift.end_time}"
                ),
                related_shift_id=prev_shift.id,
            ))

    def _check_absence(self, shift: Shift, absences: list[Shift], result: ValidationResult) -> None:
        start, end = shift.starts_at, shift.ends_at
        for absence in sorted(absences, key=lambda s: s.starts_at):
            if absence.starts_at < end and start < absence.ends_at:
                result.conflicts.append(Conflict(
                    type=ConflictType.ABSENCE_CONFLICT,
                    severity=Severity.ERROR,
                    message=(
                        f"Employee absent: {absence.reason or 'absence'} "
                        f"({absence.date.isoformat()} {absence.start_time}-{absence.end_time})"
                    ),
                    related_shift_id=absence.id,
                ))

    def _check_weekly_hours(
        self, shift: Shift, employee: Employee, work: list[Shift], result: ValidationResult
    ) -> None:
        week = iso_week_key(shift.date)
        week_shifts = [o for o in work if iso_week_key(o.date) == week]
        week_shifts.append(shift)

        total_hours = sum(
            effective_hours_by_day(week_shifts, self.rules.merge_touching_intervals).values()
        )
        pct = self.rules.max_weekly_hours_percentage
        max_allowed = employee.contract_hours * pct / 100
        if total_hours > max_allowed:
            result.conflicts.append(Conflict(
                type=ConflictType.WEEKLY_HOURS_EXCEEDED,
                severity=Severity.WARNING,
                message=(
                    f"Exceeds {pct:g}% of weekly contract hours ({format_duration(max_allowed)}). "
                    f"Total: {total_hours:.1f}h"
                ),
            ))


def scan_conflicts(
    shifts: list[Shift],
    employees: Iterable[Employee],
    service: ConflictService | None = None,
) -> list[ShiftConflictSummary]:
    """Run the detector over every work shift; rows only for shifts with conflicts."""
    service = service or ConflictService()
    emp_map = {e.id: e for e in employees}

    by_employee: dict[str, list[Shift]] = {}
    for s in shifts:
        by_employee.setdefault(s.employee_id, []).append(s)

    rows: list[ShiftConflictSummary] = []
    for shift in sorted(shifts, key=lambda s: (s.date, s.block.start, s.employee_id)):
        if shift.is_absence or shift.is_cancelled:
            continue
        emp = emp_map.get(shift.employee_id) or Employee(
            id=shift.employee_id, first_name="", last_name=""
        )
        result = service.check_shift(shift, emp, by_employee[shift.employee_id])
        if not result.conflicts:
            continue
        rows.append(ShiftConflictSummary(
            shift_id=shift.id,
            employee_id=shift.employee_id,
            employee_name=emp.full_name if shift.employee_id in emp_map else "–",
            date=shift.date,
            start_time=shift.start_time,
            end_time=shift.end_time,
            zone_id=shift.zone_id,
            conflicts=result.conflicts,
            total_conflicts=len(result.conflicts),
            has_errors=result.has_errors,
        ))

    logger.info("Conflict scan: %d shift(s), %d with conflicts", len(shifts), len(rows))
    return rows
