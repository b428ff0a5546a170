"""
Service for generating draft Shift records from a rotation template and for
copying a planned week.
"""
import logging
from datetime import date, timedelta

from shiftplan.schemas.shift import Shift, ShiftFilters, ShiftStatus, new_shift_id
from shiftplan.schemas.template import ApplyTemplateRequest, RotationTemplate, ShiftType
from shiftplan.services.publishing_service import filter_shifts
from shiftplan.utils.holidays import is_holiday
from shiftplan.utils.time_utils import date_range, minutes_to_time, time_to_minutes

logger = logging.getLogger(__name__)

MAX_TEMPLATE_DAYS = 180
MAX_TEMPLATE_EMPLOYEES = 50

SHIFT_START_TIMES: dict[ShiftType, str] = {
    ShiftType.MORNING: "08:00",
    ShiftType.AFTERNOON: "16:00",
    ShiftType.NIGHT: "00:00",
    ShiftType.SATURDAY: "09:00",
    ShiftType.SUNDAY: "09:00",
    ShiftType.CUSTOM: "08:00",
}


def validate_template_date_range(date_from: date, date_to: date) -> None:
    if date_to < date_from:
        raise ValueError("End date must not be before start date")
    if (date_to - date_from).days > MAX_TEMPLATE_DAYS:
        raise ValueError(f"Date range must not exceed {MAX_TEMPLATE_DAYS} days")


def validate_template_employees(employee_ids: list[str]) -> None:
    if not employee_ids:
        raise ValueError("At least one employee is required")
    if len(employee_ids) > MAX_TEMPLATE_EMPLOYEES:
        raise ValueError(f"A template can be applied to at most {MAX_TEMPLATE_EMPLOYEES} employees at once")


def shift_times(shift_type: ShiftType, duration_hours: float) -> tuple[str, str]:
    """Start and end ``HH:mm`` for one pattern step; the end wraps past midnight."""
    start = SHIFT_START_TIMES[shift_type]
    end_minutes = time_to_minutes(start) + round(duration_hours * 60)
    return start, minutes_to_time(end_minutes)


def apply_template(request: ApplyTemplateRequest) -> list[Shift]:
    """
    Walk the date range day by day, advancing the pattern one step per day.
    The rotation starts at ``initial_group`` so workers in different groups
    can share a template with staggered phases. ``off`` steps create nothing.
    """
    template: RotationTemplate = request.template
    validate_template_date_range(request.date_from, request.date_to)
    validate_template_employees(request.employee_ids)

    pattern = template.pattern
    index = request.initial_group % len(pattern)
    created: list[Shift] = []

    for day in date_range(request.date_from, request.date_to):
        shift_type = pattern[index]
        index = (index + 1) % len(pattern)

        if shift_type == ShiftType.OFF:
            continue
        if request.skip_public_holidays and is_holiday(day)[0]:
            continue

        start_time, end_time = shift_times(shift_type, template.shift_duration)
        for employee_id in request.employee_ids:
            created.append(Shift(
                employee_id=employee_id,
                date=day,
                start_time=start_time,
                end_time=end_time,
                status=ShiftStatus.DRAFT,
                cost_center_id=request.cost_center_id,
                zone_id=request.zone_id,
                role=f"{template.name} - {shift_type.value}",
            ))

    logger.info(
        "Template %s applied %s..%s for %d employee(s): %d shift(s) created",
        template.id, request.date_from, request.date_to, len(request.employee_ids), len(created),
    )
    return created


def copy_week(
    shifts: list[Shift],
    source_week_start: date,
    target_week_start: date,
    filters: ShiftFilters | None = None,
) -> list[Shift]:
    """Copy the source week's work shifts to the target week as new drafts."""
    delta = target_week_start - source_week_start
    scope = (filters or ShiftFilters()).model_copy(update={
        "date_from": source_week_start,
        "date_to": source_week_start + timedelta(days=6),
    })

    copies = [
        s.model_copy(update={
            "id": new_shift_id(),
            "date": s.date + delta,
            "status": ShiftStatus.DRAFT,
        })
        for s in filter_shifts(shifts, scope)
        if not s.is_absence and not s.is_cancelled
    ]
    logger.info("Copied %d shift(s) from week %s to %s", len(copies), source_week_start, target_week_start)
    return copies
