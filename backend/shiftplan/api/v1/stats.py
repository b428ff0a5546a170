from fastapi import APIRouter, HTTPException

from shiftplan.schemas.stats import (
    AlertsRequest,
    CenterSummariesRequest,
    CenterSummary,
    CriticalAlert,
    DashboardMetrics,
    DashboardRequest,
    EmployeeHoursStats,
    EmployeeWeekRequest,
)
from shiftplan.services.dashboard_service import center_summaries, critical_alerts
from shiftplan.services.hours_service import dashboard_metrics, employee_week_stats

router = APIRouter(prefix="/stats", tags=["stats"])


def _check_range(payload: DashboardRequest) -> None:
    if payload.date_to < payload.date_from:
        raise HTTPException(status_code=400, detail="date_to must not be before date_from")


@router.post("/employee-week", response_model=EmployeeHoursStats)
async def employee_week(payload: EmployeeWeekRequest):
    return employee_week_stats(payload.employee, payload.shifts, payload.day)


@router.post("/dashboard", response_model=DashboardMetrics)
async def dashboard(payload: DashboardRequest):
    _check_range(payload)
    return dashboard_metrics(
        payload.shifts, payload.employees, payload.zones, payload.date_from, payload.date_to
    )


@router.post("/alerts", response_model=list[CriticalAlert])
async def alerts(payload: AlertsRequest):
    _check_range(payload)
    return critical_alerts(
        payload.shifts, payload.employees, payload.zones,
        payload.date_from, payload.date_to, payload.today,
    )


@router.post("/centers", response_model=list[CenterSummary])
async def centers(payload: CenterSummariesRequest):
    _check_range(payload)
    return center_summaries(
        payload.shifts, payload.employees, payload.zones, payload.cost_centers,
        payload.date_from, payload.date_to, payload.today,
    )
