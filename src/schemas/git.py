"""Git change model classes."""

import posixpath
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ChangeStatus(str, Enum):
    """Enum for `git diff --name-status` change codes."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    TYPE_CHANGED = "T"
    UNMERGED = "U"
    UNKNOWN = "X"

    @classmethod
    def from_code(cls, code: str) -> "ChangeStatus":
        """Map a status letter to its tag, falling back to UNKNOWN."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @property
    def has_old_path(self) -> bool:
        return self in (ChangeStatus.RENAMED, ChangeStatus.COPIED)


class ChangeRecord(BaseModel):
    """Represents one changed path reported by git diff."""

    model_config = ConfigDict(frozen=True)

    status: ChangeStatus
    path: str
    old_path: Optional[str] = None  # Only for renames and copies
    code: str = ""  # Literal status letter, kept for unrecognised codes

    @model_validator(mode="before")
    @classmethod
    def _default_code(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("code") and data.get("status"):
            status = data["status"]
            data = {**data, "code": getattr(status, "value", status)}
        return data

    @model_validator(mode="after")
    def _check_old_path(self) -> "ChangeRecord":
        if self.status.has_old_path and self.old_path is None:
            raise ValueError(f"{self.status.name} change requires old_path")
        if not self.status.has_old_path and self.old_path is not None:
            raise ValueError(f"{self.status.name} change cannot have old_path")
        return self

    @property
    def label(self) -> str:
        name = posixpath.basename(self.path)
        if self.old_path is not None:
            return f"{posixpath.basename(self.old_path)} → {name}"
        return name
