from fastapi import APIRouter

from shiftplan.schemas.coverage import CoverageOut, CoverageRequest, ZoneDayCoverage, ZoneDayRequest
from shiftplan.services.coverage_service import zone_coverage_for_view, zone_day_coverage

router = APIRouter(prefix="/coverage", tags=["coverage"])


@router.post("", response_model=CoverageOut)
async def coverage(payload: CoverageRequest):
    """Assigned vs. required headcount for the bands the view asks for."""
    return zone_coverage_for_view(
        payload.zone, payload.shifts, payload.date, payload.view, payload.now
    )


@router.post("/day", response_model=ZoneDayCoverage)
async def coverage_day(payload: ZoneDayRequest):
    return zone_day_coverage(payload.zone, payload.shifts, payload.date)
