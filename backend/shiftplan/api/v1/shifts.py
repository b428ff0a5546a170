"""
Shift calculations over a caller-supplied snapshot: validation, the conflicts
panel, effective hours, the next activity, publishing and copying a week.
"""
from fastapi import APIRouter, HTTPException

from shiftplan.api.deps import Conflicts, Rules
from shiftplan.schemas.conflict import (
    ConflictScanRequest,
    ShiftConflictSummary,
    ValidateShiftRequest,
    ValidationResultOut,
)
from shiftplan.schemas.publishing import PublishRequest, PublishResult, UnpublishRequest, UnpublishResult
from shiftplan.schemas.shift import (
    EffectiveHoursOut,
    EffectiveHoursRequest,
    NextActivityOut,
    NextActivityRequest,
)
from shiftplan.schemas.template import CopyWeekRequest, CopyWeekResult
from shiftplan.services import publishing_service, template_service
from shiftplan.services.conflict_service import scan_conflicts, validate_shift_input
from shiftplan.services.interval_service import effective_minutes, find_next_activity
from shiftplan.utils.time_utils import TimeBlock

router = APIRouter(prefix="/shifts", tags=["shifts"])


@router.post("/validate", response_model=ValidationResultOut)
async def validate_shift(payload: ValidateShiftRequest, rules: Rules, service: Conflicts):
    """Full check of one candidate shift against the employee's other records."""
    if payload.shift.is_absence:
        raise HTTPException(status_code=422, detail="Only work shifts can be validated")

    errors = validate_shift_input(payload.shift, rules)
    if errors:
        raise HTTPException(status_code=422, detail=errors)

    result = service.check_shift(
        payload.shift, payload.employee, payload.existing_shifts, payload.absences
    )
    return ValidationResultOut.from_result(
        result, publishing_service.resolve_status(payload.shift, result)
    )


@router.post("/conflicts", response_model=list[ShiftConflictSummary])
async def list_conflicts(payload: ConflictScanRequest, service: Conflicts):
    return scan_conflicts(payload.shifts, payload.employees, service)


@router.post("/effective-hours", response_model=EffectiveHoursOut)
async def effective_hours(payload: EffectiveHoursRequest, rules: Rules):
    blocks = [TimeBlock.from_times(b.start_time, b.end_time) for b in payload.blocks]
    minutes = effective_minutes(blocks, rules.merge_touching_intervals)
    return EffectiveHoursOut(minutes=minutes, hours=minutes / 60)


@router.post("/next-activity", response_model=NextActivityOut)
async def next_activity(payload: NextActivityRequest):
    activity = find_next_activity(payload.shifts, payload.from_date)
    if activity is None:
        raise HTTPException(status_code=404, detail="No upcoming activity")
    return NextActivityOut.model_validate(activity)


@router.post("/publish", response_model=PublishResult)
async def publish(payload: PublishRequest):
    return publishing_service.publish_shifts(payload.shifts, payload.filters)


@router.post("/unpublish", response_model=UnpublishResult)
async def unpublish(payload: UnpublishRequest):
    return publishing_service.unpublish_shifts(payload.shifts, payload.shift_ids)


@router.post("/copy-week", response_model=CopyWeekResult)
async def copy_week(payload: CopyWeekRequest):
    copies = template_service.copy_week(
        payload.shifts, payload.source_week_start, payload.target_week_start, payload.filters
    )
    return CopyWeekResult(copied_shifts=copies, copied_count=len(copies))
