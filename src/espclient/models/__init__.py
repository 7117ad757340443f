"""Typed views of collection items."""

from espclient.models._base import EspBaseModel, EspTimestamp, parse_esp_timestamp, parse_items
from espclient.models.student import Course, Role, RoleType, Student, User

__all__ = [
    "Course",
    "EspBaseModel",
    "EspTimestamp",
    "Student",
    "User",
    "Role",
    "RoleType",
    "parse_esp_timestamp",
    "parse_items",
]
