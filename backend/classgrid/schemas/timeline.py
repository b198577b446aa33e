from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from classgrid.schemas.assignment import DAY_VALUES, Assignment


class LaidOutEvent(BaseModel):
    assignment: Assignment
    lane: int = Field(ge=0)
    start: int
    end: int


class TimelineLayout(BaseModel):
    items: list[LaidOutEvent] = Field(default_factory=list)
    lane_count: int = Field(default=0, alias="laneCount", ge=0)

    model_config = ConfigDict(populate_by_name=True)


class LayoutRequest(BaseModel):
    events: list[Assignment] = Field(default_factory=list, max_length=5000)
    day: str | None = None

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str | None) -> str | None:
        if value is None:
            return None
        day = value.strip()
        if day not in DAY_VALUES:
            raise ValueError("Invalid day value")
        return day
