"""Application-wide schema classes."""

from typing import List, Optional

from pydantic import BaseModel


class BaseReferenceUpdate(BaseModel):
    name: str


class NodeSummary(BaseModel):
    """Flat view of a tree node as returned by the API."""

    type: str  # 'file' or 'folder'
    label: str
    path: str
    status: Optional[str] = None
    old_path: Optional[str] = None
    badge: Optional[str] = None
    tooltip: Optional[str] = None
    child_count: Optional[int] = None


class TreeResponse(BaseModel):
    base_reference: str
    file_count: int
    children: List[NodeSummary]


class DiffTarget(BaseModel):
    """Describes how the UI should open a changed file."""

    mode: str  # 'open', 'base', or 'diff'
    path: str
    working_path: Optional[str] = None  # Absolute path of the working copy
    base_ref: Optional[str] = None  # Commit the left side is read from
    title: Optional[str] = None
