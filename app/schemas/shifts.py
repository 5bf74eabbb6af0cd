from pydantic import BaseModel, Field, computed_field, field_validator
from datetime import datetime, time
from typing import Optional

from app.services.scheduling.dates import duration_hours
from app.services.scheduling.types import PRESET_COLORS


class ShiftBase(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    start_time: time
    end_time: time
    color: int = PRESET_COLORS[0]
    description: Optional[str] = Field(default=None, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class ShiftCreate(ShiftBase):
    pass


class ShiftUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    color: Optional[int] = None
    description: Optional[str] = Field(default=None, max_length=255)

    # omitted means unchanged; only description may be cleared with null
    @field_validator("name", "start_time", "end_time", "color")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class ShiftResponse(ShiftBase):
    id: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def duration(self) -> float:
        return duration_hours(self.start_time, self.end_time)

    @computed_field
    @property
    def is_overnight(self) -> bool:
        return self.end_time < self.start_time

    class Config:
        from_attributes = True
