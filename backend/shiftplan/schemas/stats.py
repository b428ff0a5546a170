from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

from shiftplan.schemas.coverage import Zone
from shiftplan.schemas.shift import Employee, Shift

HoursStatus = Literal["under", "ok", "over"]
AlertType = Literal["conflict", "coverage", "unpublished", "no_shifts", "hours"]


class EmployeeHoursStats(BaseModel):
    employee_id: str
    employee_name: str
    period_start: date
    assigned_hours: float
    contract_hours: float
    percentage: float
    status: HoursStatus   # under < 70 %, ok 70–130 %, over > 130 % (configurable)


class DashboardMetrics(BaseModel):
    total_shifts: int
    draft_shifts: int
    published_shifts: int
    conflict_shifts: int
    average_coverage: float
    employees_with_shifts: int
    total_employees: int
    total_hours_assigned: float
    total_hours_contracted: float


class EmployeeWeekRequest(BaseModel):
    employee: Employee
    shifts: list[Shift] = Field(default_factory=list)
    day: date


class DashboardRequest(BaseModel):
    shifts: list[Shift] = Field(default_factory=list)
    employees: list[Employee] = Field(default_factory=list)
    zones: list[Zone] = Field(default_factory=list)
    date_from: date
    date_to: date


class CostCenter(BaseModel):
    id: str
    name: str
    active: bool = True


class CriticalAlert(BaseModel):
    id: str
    type: AlertType
    severity: Literal["error", "warning", "info"]
    title: str
    description: str
    count: int
    zone_ids: list[str] = []
    affected_employee_ids: list[str] = []
    affected_employees: list[str] = []    # "Nombre Apellido", known employees only


class CenterSummary(BaseModel):
    cost_center_id: str
    cost_center_name: str
    total_shifts: int
    draft_shifts: int
    published_shifts: int
    conflict_shifts: int
    average_coverage: float
    alerts: list[CriticalAlert]


class AlertsRequest(DashboardRequest):
    today: Optional[date] = None   # anchor for the "unpublished soon" window


class CenterSummariesRequest(AlertsRequest):
    cost_centers: list[CostCenter] = Field(default_factory=list)
