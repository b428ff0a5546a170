from fastapi import APIRouter, HTTPException, status

from shiftplan.schemas.template import ApplyTemplateRequest, ApplyTemplateResult
from shiftplan.services.template_service import apply_template

router = APIRouter(prefix="/shift-templates", tags=["shift-templates"])


@router.post("/apply", response_model=ApplyTemplateResult, status_code=status.HTTP_201_CREATED)
async def apply(payload: ApplyTemplateRequest):
    """Draft shifts for every employee and pattern day in the range."""
    if not payload.template.active:
        raise HTTPException(status_code=400, detail="Template is inactive")
    try:
        created = apply_template(payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return ApplyTemplateResult(created_shifts=created, total_created=len(created))
