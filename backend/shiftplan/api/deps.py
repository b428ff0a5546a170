from typing import Annotated

from fastapi import Depends

from shiftplan.core.config import settings
from shiftplan.services.conflict_service import ConflictService, ShiftRules


def get_rules() -> ShiftRules:
    return ShiftRules.from_settings(settings)


def get_conflict_service(
    rules: Annotated[ShiftRules, Depends(get_rules)],
) -> ConflictService:
    return ConflictService(rules=rules, holiday_calendar=settings.HOLIDAY_CALENDAR)


Rules = Annotated[ShiftRules, Depends(get_rules)]
Conflicts = Annotated[ConflictService, Depends(get_conflict_service)]
