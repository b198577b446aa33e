from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from classgrid.schemas.assignment import Assignment
from classgrid.schemas.conflict import Conflict, ValidationOptions

WarningKind = Literal["utilization", "repetition", "overload"]


class AnalysisOptions(ValidationOptions):
    """Knobs for the advisory checks.

    ``room_count`` sizes the utilization percentage; the two thresholds mark
    when a slot counts as busy or a faculty member as loaded for the day.
    """

    room_count: int = Field(default=10, alias="roomCount", ge=1, le=10000)
    utilization_warning_pct: float = Field(default=90, alias="utilizationWarningPct", ge=0)
    daily_load_threshold: int = Field(default=4, alias="dailyLoadThreshold", ge=1)


class AnalysisWarning(BaseModel):
    kind: WarningKind
    message: str


class AnalysisResult(BaseModel):
    status: Literal["error", "warning", "ok"]
    message: str
    messages: list[str] = Field(default_factory=list)
    warnings: list[AnalysisWarning] = Field(default_factory=list)
    utilization_pct: int | None = Field(default=None, alias="utilizationPct")
    conflict: Conflict | None = None

    model_config = ConfigDict(populate_by_name=True)

    @property
    def blocking(self) -> bool:
        return self.status == "error"


class AnalyzeRequest(BaseModel):
    candidate: Assignment
    schedule: list[Assignment] = Field(default_factory=list, max_length=5000)
    exclude_id: str | None = Field(default=None, alias="excludeId")
    room_count: int | None = Field(default=None, alias="roomCount", ge=1, le=10000)

    model_config = ConfigDict(populate_by_name=True)
