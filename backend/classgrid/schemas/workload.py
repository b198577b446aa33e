from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from classgrid.schemas.assignment import Assignment, FacultyIdentity

LoadStatus = Literal["Optimal", "Heavy", "Overloaded"]


class FacultyLoad(BaseModel):
    faculty: FacultyIdentity
    hours: float = Field(ge=0.0)
    max_load: float = Field(alias="maxLoad", gt=0)
    status: LoadStatus

    model_config = ConfigDict(populate_by_name=True)


class LoadClassification(BaseModel):
    hours: float
    max_load: float = Field(alias="maxLoad")
    status: LoadStatus

    model_config = ConfigDict(populate_by_name=True)


class WeeklyHoursRequest(BaseModel):
    faculty: FacultyIdentity
    schedule: list[Assignment] = Field(default_factory=list, max_length=5000)
    max_load: float | None = Field(default=None, alias="maxLoad", gt=0, le=200)

    model_config = ConfigDict(populate_by_name=True)
