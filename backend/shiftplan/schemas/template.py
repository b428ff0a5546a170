from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shiftplan.schemas.shift import Shift, ShiftFilters


class ShiftType(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    OFF = "off"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    CUSTOM = "custom"


class RotationTemplate(BaseModel):
    id: str
    name: str
    pattern: list[ShiftType] = Field(min_length=1)   # e.g. [morning, afternoon, night, off]
    shift_duration: float = Field(gt=0, le=24)       # hours per shift
    description: Optional[str] = None
    active: bool = True


class ApplyTemplateRequest(BaseModel):
    template: RotationTemplate
    employee_ids: list[str]
    date_from: date
    date_to: date
    cost_center_id: Optional[str] = None
    zone_id: Optional[str] = None
    initial_group: int = Field(default=0, ge=0)   # rotation offset into the pattern
    skip_public_holidays: bool = False


class ApplyTemplateResult(BaseModel):
    created_shifts: list[Shift]
    total_created: int


class CopyWeekRequest(BaseModel):
    shifts: list[Shift]
    source_week_start: date
    target_week_start: date
    filters: ShiftFilters = Field(default_factory=ShiftFilters)


class CopyWeekResult(BaseModel):
    copied_shifts: list[Shift]
    copied_count: int
