from pydantic import BaseModel, Field

from shiftplan.schemas.shift import Shift, ShiftFilters


class PublishRequest(BaseModel):
    shifts: list[Shift]
    filters: ShiftFilters = Field(default_factory=ShiftFilters)


class PublishResult(BaseModel):
    published_count: int
    published_ids: list[str]
    skipped_conflict_ids: list[str]   # conflict shifts are never published
    shifts: list[Shift]


class UnpublishRequest(BaseModel):
    shifts: list[Shift]
    shift_ids: list[str]


class UnpublishResult(BaseModel):
    unpublished_count: int
    shifts: list[Shift]
