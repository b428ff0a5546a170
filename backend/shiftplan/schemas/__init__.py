from shiftplan.schemas.shift import Shift, ShiftStatus, ShiftKind, Employee, ShiftFilters, TimeRange
from shiftplan.schemas.conflict import Conflict, ConflictType, Severity, Notice, ValidationResult, ValidationResultOut, ShiftConflictSummary
from shiftplan.schemas.coverage import RequiredCoverage, Zone, CoverageStatus, CoverageOut, ZoneDayCoverage
from shiftplan.schemas.template import ShiftType, RotationTemplate, ApplyTemplateRequest, ApplyTemplateResult
from shiftplan.schemas.publishing import PublishRequest, PublishResult, UnpublishRequest, UnpublishResult
from shiftplan.schemas.stats import EmployeeHoursStats, DashboardMetrics, CostCenter, CriticalAlert, CenterSummary

__all__ = [
    "Shift", "ShiftStatus", "ShiftKind", "Employee", "ShiftFilters", "TimeRange",
    "Conflict", "ConflictType", "Severity", "Notice", "ValidationResult", "ValidationResultOut",
    "ShiftConflictSummary",
    "RequiredCoverage", "Zone", "CoverageStatus", "CoverageOut", "ZoneDayCoverage",
    "ShiftType", "RotationTemplate", "ApplyTemplateRequest", "ApplyTemplateResult",
    "PublishRequest", "PublishResult", "UnpublishRequest", "UnpublishResult",
    "EmployeeHoursStats", "DashboardMetrics", "CostCenter", "CriticalAlert", "CenterSummary",
]
