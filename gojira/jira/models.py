"""Jira issue records."""

from dataclasses import dataclass
from enum import Enum

from gojira.errors import InvalidArgument


class IssueType(str, Enum):
    EPIC = "Epic"
    TASK = "Task"
    BUG = "Bug"

    @classmethod
    def from_name(cls, name: str) -> 'IssueType':
        """Strict, case-insensitive parse of a user-supplied type."""
        for member in cls:
            if member.value.lower() == (name or "").strip().lower():
                return member
        valid = ", ".join(m.value for m in cls)
        raise InvalidArgument(f"Invalid issue type '{name}'. Use one of: {valid}")

    @classmethod
    def from_jira(cls, name: str) -> 'IssueType':
        """Map whatever type name Jira reports; unknown names count as Task."""
        lowered = (name or "").lower()
        if lowered == "epic":
            return cls.EPIC
        if lowered == "bug":
            return cls.BUG
        return cls.TASK


@dataclass
class Issue:
    summary: str
    description: str = ""
    type: IssueType = IssueType.TASK
    project_key: str = ""
    key: str = ""
    status: str = ""
