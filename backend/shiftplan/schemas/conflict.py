"""
Schemas for conflict detection results.
"""
from datetime import date as Date
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from shiftplan.schemas.shift import Employee, Shift, ShiftStatus


class ConflictType(str, Enum):
    OVERLAP = "overlap"
    INSUFFICIENT_REST = "insufficient_rest"
    ABSENCE_CONFLICT = "absence_conflict"
    WEEKLY_HOURS_EXCEEDED = "weekly_hours_exceeded"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Conflict(BaseModel):
    type: ConflictType
    severity: Severity
    message: str
    related_shift_id: Optional[str] = None


class Notice(BaseModel):
    """Non-blocking hint, e.g. a public holiday."""
    type: Literal["info", "warning"] = "info"
    message: str


class ValidationResult(BaseModel):
    conflicts: list[Conflict] = []
    warnings: list[Notice] = []

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    @property
    def has_errors(self) -> bool:
        return any(c.severity == Severity.ERROR for c in self.conflicts)

    @property
    def has_warnings(self) -> bool:
        return any(c.severity == Severity.WARNING for c in self.conflicts)

    def by_severity(self, severity: Severity) -> list[Conflict]:
        return [c for c in self.conflicts if c.severity == severity]

    def by_type(self) -> dict[ConflictType, list[Conflict]]:
        groups: dict[ConflictType, list[Conflict]] = {}
        for conflict in self.conflicts:
            groups.setdefault(conflict.type, []).append(conflict)
        return groups


class ValidationResultOut(BaseModel):
    is_valid: bool
    conflicts: list[Conflict]
    warnings: list[Notice]
    status: Optional[ShiftStatus] = None   # status the candidate should carry after this check

    @classmethod
    def from_result(
        cls, result: ValidationResult, status: Optional[ShiftStatus] = None
    ) -> "ValidationResultOut":
        return cls(
            is_valid=result.is_valid,
            conflicts=result.conflicts,
            warnings=result.warnings,
            status=status,
        )


class ShiftConflictSummary(BaseModel):
    """One row of the conflicts panel."""
    shift_id: str
    employee_id: str
    employee_name: str          # "Nombre Apellido" or "–"
    date: Date
    start_time: str
    end_time: str
    zone_id: Optional[str] = None
    conflicts: list[Conflict]
    total_conflicts: int
    has_errors: bool


# ── Requests ─────────────────────────────────────────────────────────────────

class ValidateShiftRequest(BaseModel):
    shift: Shift
    employee: Employee
    existing_shifts: list[Shift] = Field(default_factory=list)
    absences: list[Shift] = Field(default_factory=list)


class ConflictScanRequest(BaseModel):
    shifts: list[Shift]
    employees: list[Employee] = Field(default_factory=list)
