"""
Read-only view of the active shift rules, so clients show the same limits
the validator applies.
"""
from fastapi import APIRouter
from pydantic import BaseModel

from shiftplan.api.deps import Rules
from shiftplan.core.config import settings

router = APIRouter(prefix="/settings", tags=["settings"])


class ShiftRulesOut(BaseModel):
    min_rest_hours: float
    max_weekly_hours_percentage: float
    min_shift_hours: float
    max_shift_hours: float
    merge_touching_intervals: bool
    hours_under_percentage: float
    hours_over_percentage: float
    holiday_calendar: str


@router.get("/rules", response_model=ShiftRulesOut)
async def get_rules(rules: Rules):
    return ShiftRulesOut(
        min_rest_hours=rules.min_rest_hours,
        max_weekly_hours_percentage=rules.max_weekly_hours_percentage,
        min_shift_hours=rules.min_shift_hours,
        max_shift_hours=rules.max_shift_hours,
        merge_touching_intervals=rules.merge_touching_intervals,
        hours_under_percentage=settings.HOURS_UNDER_PERCENTAGE,
        hours_over_percentage=settings.HOURS_OVER_PERCENTAGE,
        holiday_calendar=settings.HOLIDAY_CALENDAR,
    )
