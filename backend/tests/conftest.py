"""
Shared pytest fixtures and record builders for shiftplan tests.

The API is stateless, so the HTTP client needs no database: every request
carries its own snapshot of shifts and employees.
"""
from datetime import date

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from shiftplan.main import app
from shiftplan.schemas.coverage import RequiredCoverage, Zone
from shiftplan.schemas.shift import Employee, Shift, ShiftKind, ShiftStatus
from shiftplan.services.conflict_service import ConflictService, ShiftRules

MONDAY = date(2025, 3, 10)   # no public holiday in that ISO week


# ── Record builders ──────────────────────────────────────────────────────────

def make_shift(
    shift_date: date = MONDAY,
    start: str = "08:00",
    end: str = "16:00",
    employee_id: str = "emp-1",
    break_minutes: int = 0,
    status: ShiftStatus = ShiftStatus.DRAFT,
    zone_id: str | None = "zone-1",
    **extra,
) -> Shift:
    return Shift(
        employee_id=employee_id,
        date=shift_date,
        start_time=start,
        end_time=end,
        break_minutes=break_minutes,
        status=status,
        zone_id=zone_id,
        **extra,
    )


def make_absence(
    shift_date: date = MONDAY,
    start: str = "00:00",
    end: str = "00:00",
    employee_id: str = "emp-1",
    reason: str = "Vacaciones",
) -> Shift:
    return Shift(
        employee_id=employee_id,
        date=shift_date,
        start_time=start,
        end_time=end,
        kind=ShiftKind.ABSENCE,
        reason=reason,
    )


def make_employee(
    emp_id: str = "emp-1",
    contract_hours: float | None = 40,
    first_name: str = "Ana",
    last_name: str = "García",
    uses_shift_system: bool = True,
    cost_center_id: str | None = None,
) -> Employee:
    return Employee(
        id=emp_id,
        first_name=first_name,
        last_name=last_name,
        contract_hours=contract_hours,
        uses_shift_system=uses_shift_system,
        cost_center_id=cost_center_id,
    )


def make_zone(
    morning: int = 1,
    afternoon: int = 1,
    night: int = 0,
    zone_id: str = "zone-1",
    name: str = "Recepción",
    cost_center_id: str | None = None,
) -> Zone:
    return Zone(
        id=zone_id,
        name=name,
        cost_center_id=cost_center_id,
        required_coverage=RequiredCoverage(morning=morning, afternoon=afternoon, night=night),
    )


def make_service(**rules) -> ConflictService:
    """Detector with default rules and holiday notices switched off."""
    return ConflictService(rules=ShiftRules(**rules), holiday_calendar="")


def as_json(record) -> dict:
    return record.model_dump(mode="json")


# ── HTTP client fixture ───────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client() -> AsyncClient:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
