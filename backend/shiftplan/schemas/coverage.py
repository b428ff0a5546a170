from datetime import date as Date, datetime as DateTime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from shiftplan.schemas.shift import Shift
from shiftplan.utils.time_utils import TimeSlot


class RequiredCoverage(BaseModel):
    morning: int = Field(default=0, ge=0)    # 08:00–16:00
    afternoon: int = Field(default=0, ge=0)  # 16:00–00:00
    night: int = Field(default=0, ge=0)      # 00:00–08:00

    def for_slot(self, slot: TimeSlot) -> int:
        return getattr(self, slot.value)


class Zone(BaseModel):
    id: str
    name: str
    cost_center_id: Optional[str] = None
    required_coverage: RequiredCoverage = Field(default_factory=RequiredCoverage)
    active: bool = True


class CoverageStatus(str, Enum):
    UNCOVERED = "uncovered"
    UNDERSTAFFED = "understaffed"
    COVERED = "covered"
    OVERSTAFFED = "overstaffed"


class CoverageOut(BaseModel):
    zone_id: str
    date: Date
    slots: list[TimeSlot]
    assigned_count: int
    required_count: int
    ratio: Optional[float]        # None when nothing is required
    status: CoverageStatus


class SlotCoverage(BaseModel):
    assigned: int
    required: int
    percentage: float
    status: CoverageStatus


class ZoneDayCoverage(BaseModel):
    zone_id: str
    zone_name: str
    date: Date
    morning: SlotCoverage
    afternoon: SlotCoverage
    night: SlotCoverage
    overall: float   # mean of the three band percentages


# ── Requests ─────────────────────────────────────────────────────────────────

class CoverageRequest(BaseModel):
    zone: Zone
    shifts: list[Shift] = Field(default_factory=list)
    date: Date
    view: Literal["day", "week", "month"] = "day"
    now: Optional[DateTime] = None   # day view: band containing this moment


class ZoneDayRequest(BaseModel):
    zone: Zone
    shifts: list[Shift] = Field(default_factory=list)
    date: Date
