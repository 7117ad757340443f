"""Student, user and course records served by the enrollment web service."""

from __future__ import annotations

from enum import StrEnum

from pydantic import AliasChoices, Field, field_validator

from espclient.models._base import EspBaseModel, EspTimestamp


class RoleType(StrEnum):
    """Account role; unrecognised values resolve to ``UNKNOWN``."""

    ADMIN = "ADMIN"
    STUDENT = "STUDENT"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> RoleType:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().upper():
                    return member
        return cls.UNKNOWN


class Role(EspBaseModel):
    role: RoleType = RoleType.UNKNOWN

    @field_validator("role", mode="before")
    @classmethod
    def _coerce_role(cls, value: object) -> object:
        if isinstance(value, str):
            return RoleType(value)
        return value


class User(EspBaseModel):
    """Account referenced by a student record."""

    id: str = Field(default="", validation_alias=AliasChoices("id", "_id"))
    user_name: str = ""
    email_id: str = ""
    first_name: str = ""
    last_name: str = ""
    role: Role | None = None

    @field_validator("role", mode="before")
    @classmethod
    def _accept_bare_role(cls, value: object) -> object:
        # Some payloads flatten the role object to its name.
        if isinstance(value, str):
            return {"role": value}
        return value

    @property
    def display_name(self) -> str:
        full = f"{self.first_name} {self.last_name}".strip()
        return full or self.user_name

    @property
    def is_admin(self) -> bool:
        return self.role is not None and self.role.role == RoleType.ADMIN


class Course(EspBaseModel):
    """A course as listed by ``GET /api/v1.0/courses``."""

    id: str = Field(default="", validation_alias=AliasChoices("id", "_id"))
    course_name: str = ""
    instructors: list[str] = Field(default_factory=list)
    max_capacity: int | None = None
    price: float | None = None
    availability_status: int | None = None
    start_time: EspTimestamp = None
    end_time: EspTimestamp = None
    location: str = ""
    keywords: list[str] = Field(default_factory=list)


class Student(EspBaseModel):
    """A student as listed by ``GET /api/v1.0/students``.

    ``course_refs`` holds the courses the student is enrolled in;
    ``last_updated`` is stamped by the service on every write.
    """

    id: str = Field(default="", validation_alias=AliasChoices("id", "_id"))
    user: User | None = None
    course_refs: list[Course] = Field(default_factory=list)
    last_updated: EspTimestamp = None
