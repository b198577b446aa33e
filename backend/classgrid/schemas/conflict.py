from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from classgrid.schemas.assignment import Assignment

ConflictKind = Literal["self", "room", "faculty", "group"]


class ValidationOptions(BaseModel):
    exclude_id: str | None = Field(default=None, alias="excludeId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Conflict(BaseModel):
    kind: ConflictKind
    severity: Literal["hard"] = "hard"
    message: str
    conflicting_id: str | None = Field(default=None, alias="conflictingId")

    model_config = ConfigDict(populate_by_name=True)


class ScheduleConflict(BaseModel):
    id: str
    kind: ConflictKind
    message: str
    affected_ids: list[str] = Field(default_factory=list, alias="affectedIds")

    model_config = ConfigDict(populate_by_name=True)


class ConflictReport(BaseModel):
    conflicts: list[ScheduleConflict] = Field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


class ValidateRequest(BaseModel):
    candidate: Assignment
    schedule: list[Assignment] = Field(default_factory=list, max_length=5000)
    exclude_id: str | None = Field(default=None, alias="excludeId")

    model_config = ConfigDict(populate_by_name=True)


class ValidateResponse(BaseModel):
    ok: bool
    conflict: Conflict | None = None


class DetectRequest(BaseModel):
    schedule: list[Assignment] = Field(default_factory=list, max_length=5000)
