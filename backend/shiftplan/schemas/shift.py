import uuid
from datetime import date as Date, datetime as DateTime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shiftplan.utils.time_utils import TimeBlock, block_bounds, parse_date, time_to_minutes


class ShiftStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CONFLICT = "conflict"
    CANCELLED = "cancelled"


class ShiftKind(str, Enum):
    WORK = "work"
    ABSENCE = "absence"


def new_shift_id() -> str:
    return str(uuid.uuid4())


class Shift(BaseModel):
    """
    One scheduled block for one employee on one date – either work or an absence.
    ``kind`` is set by whoever loads the record; nothing downstream guesses it.
    """
    id: str = Field(default_factory=new_shift_id)
    employee_id: str
    date: Date
    start_time: str
    end_time: str
    break_minutes: int = Field(default=0, ge=0)
    status: ShiftStatus = ShiftStatus.DRAFT
    kind: ShiftKind = ShiftKind.WORK
    zone_id: Optional[str] = None
    cost_center_id: Optional[str] = None
    role: Optional[str] = None
    reason: Optional[str] = None   # absences: "Vacaciones", "Baja médica", ...
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def check_date_format(cls, value):
        if isinstance(value, str):
            return parse_date(value)
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def check_time_format(cls, value: str) -> str:
        time_to_minutes(value)
        return value

    @property
    def is_absence(self) -> bool:
        return self.kind == ShiftKind.ABSENCE

    @property
    def is_cancelled(self) -> bool:
        return self.status == ShiftStatus.CANCELLED

    @property
    def block(self) -> TimeBlock:
        return TimeBlock.from_times(self.start_time, self.end_time)

    @property
    def starts_at(self) -> DateTime:
        return block_bounds(self.date, self.block)[0]

    @property
    def ends_at(self) -> DateTime:
        return block_bounds(self.date, self.block)[1]

    @property
    def duration_hours(self) -> float:
        return self.block.duration / 60

    @property
    def net_hours(self) -> float:
        """Duration minus unpaid break, never negative."""
        return max(0, self.block.duration - self.break_minutes) / 60


class Employee(BaseModel):
    id: str
    first_name: str
    last_name: str
    contract_hours: Optional[float] = Field(default=None, ge=0)  # weekly
    uses_shift_system: bool = True
    cost_center_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ShiftFilters(BaseModel):
    cost_center_id: Optional[str] = None
    zone_id: Optional[str] = None
    role: Optional[str] = None
    status: Optional[ShiftStatus] = None
    employee_id: Optional[str] = None
    date_from: Optional[Date] = None
    date_to: Optional[Date] = None


def full_day_absence(employee_id: str, day: Date, reason: str | None = None) -> Shift:
    """00:00–00:00 normalizes to the whole day."""
    return Shift(
        employee_id=employee_id,
        date=day,
        start_time="00:00",
        end_time="00:00",
        kind=ShiftKind.ABSENCE,
        reason=reason,
    )


def expand_absence(employee_id: str, start: Date, end: Date, reason: str | None = None) -> list[Shift]:
    """One full-day absence record per date in [start, end] (both inclusive)."""
    if end < start:
        raise ValueError("Absence end date must not be before its start date")
    days = (end - start).days + 1
    return [full_day_absence(employee_id, start + timedelta(days=i), reason) for i in range(days)]


# ── Interval endpoints ───────────────────────────────────────────────────────

class TimeRange(BaseModel):
    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def check_time_format(cls, value: str) -> str:
        time_to_minutes(value)
        return value


class EffectiveHoursRequest(BaseModel):
    blocks: list[TimeRange]


class EffectiveHoursOut(BaseModel):
    minutes: int
    hours: float


class NextActivityRequest(BaseModel):
    shifts: list[Shift]
    from_date: Date


class NextActivityOut(BaseModel):
    date: Date
    start_time: str
    end_time: str
    kind: ShiftKind
    reason: Optional[str] = None
    fragments: int = 1

    model_config = {"from_attributes": True}
