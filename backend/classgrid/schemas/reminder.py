from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from classgrid.schemas.assignment import Assignment


class ReminderWindow(BaseModel):
    """How far ahead of a class start a reminder goes out, in minutes."""

    min_minutes: float = Field(default=14, alias="minMinutes", ge=0)
    max_minutes: float = Field(default=15.5, alias="maxMinutes", ge=0)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def validate_order(self) -> "ReminderWindow":
        if self.max_minutes < self.min_minutes:
            raise ValueError("Reminder window end must not precede its start")
        return self


class UpcomingAssignment(BaseModel):
    assignment: Assignment
    minutes_until: float = Field(alias="minutesUntil")
    faculty_ids: list[str] = Field(default_factory=list, alias="facultyIds")

    model_config = ConfigDict(populate_by_name=True)


class UpcomingRequest(BaseModel):
    schedule: list[Assignment] = Field(default_factory=list, max_length=5000)
    now: datetime | None = None
