from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DAY_VALUES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

WILDCARD_GROUP = "All"

# Flat keys accepted for each faculty slot, mapped onto FacultyIdentity.id
FACULTY_ID_KEYS = {
    "faculty": ("facultyId", "faculty_id", "facultyEmpId"),
    "faculty2": ("faculty2Id", "faculty2_id", "faculty2EmpId"),
}

LEGACY_KEYS = {
    "time": "timeRange",
    "dept": "department",
    "sem": "semester",
    "group": "subgroup",
}


class FacultyIdentity(BaseModel):
    """A teaching staff member as referenced from an assignment.

    ``id`` is the durable identity (employee id); ``display_name`` is the weak
    identity used only when an id is missing on either side.
    """

    id: str | None = Field(default=None, max_length=64)
    display_name: str = Field(default="", alias="displayName", max_length=200)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> str | None:
        if value is None:
            return None
        trimmed = str(value).strip()
        return trimmed or None

    @field_validator("display_name")
    @classmethod
    def normalize_display_name(cls, value: str) -> str:
        return value.strip()

    @property
    def is_empty(self) -> bool:
        return self.id is None and not self.display_name

    def label(self) -> str:
        return self.display_name or self.id or ""


def same_identity(first: FacultyIdentity | None, second: FacultyIdentity | None) -> bool:
    if first is None or second is None:
        return False
    if first.id and second.id:
        return first.id == second.id
    return bool(first.display_name) and first.display_name == second.display_name


class Assignment(BaseModel):
    id: str | None = Field(default=None, max_length=64)
    day: str
    time_range: str = Field(default="", alias="timeRange", max_length=100)
    academic_period: str | None = Field(default=None, alias="academicPeriod", max_length=64)
    department: str | None = Field(default=None, max_length=200)
    semester: str | None = Field(default=None, max_length=50)
    section: str | None = Field(default=None, max_length=50)
    subgroup: str | None = Field(default=None, max_length=50)
    subject: str | None = Field(default=None, max_length=200)
    room: str | None = Field(default=None, max_length=100)
    faculty: FacultyIdentity | None = None
    faculty2: FacultyIdentity | None = None

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def fold_flat_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for legacy, current in LEGACY_KEYS.items():
            if legacy in data and current not in data:
                data[current] = data.pop(legacy)

        for slot, id_keys in FACULTY_ID_KEYS.items():
            faculty_id = None
            for key in id_keys:
                value = data.pop(key, None)
                if faculty_id is None and value:
                    faculty_id = value
            current = data.get(slot)
            if isinstance(current, str) or (current is None and faculty_id):
                data[slot] = {"id": faculty_id, "displayName": current or ""}
            elif isinstance(current, dict) and faculty_id and not current.get("id"):
                data[slot] = {**current, "id": faculty_id}
        return data

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        day = value.strip()
        if day not in DAY_VALUES:
            raise ValueError("Invalid day value")
        return day

    @field_validator("department", "semester", "section", "subgroup", "subject", "room")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        trimmed = value.strip()
        return trimmed or None

    @model_validator(mode="after")
    def drop_empty_faculty(self) -> "Assignment":
        if self.faculty is not None and self.faculty.is_empty:
            self.faculty = None
        if self.faculty2 is not None and self.faculty2.is_empty:
            self.faculty2 = None
        return self

    @property
    def section_or_wildcard(self) -> str:
        return self.section or WILDCARD_GROUP

    @property
    def subgroup_or_wildcard(self) -> str:
        return self.subgroup or WILDCARD_GROUP

    def faculty_members(self) -> list[FacultyIdentity]:
        return [member for member in (self.faculty, self.faculty2) if member is not None]


def groups_overlap(first: str, second: str) -> bool:
    return first == WILDCARD_GROUP or second == WILDCARD_GROUP or first == second


def is_same_faculty(person: FacultyIdentity | None, item: Assignment) -> bool:
    """True when ``person`` teaches ``item`` in either faculty slot."""
    if person is None:
        return False
    return same_identity(person, item.faculty) or same_identity(person, item.faculty2)
