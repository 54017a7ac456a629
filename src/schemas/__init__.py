"""Schemas for the application."""

from .app_schemas import BaseReferenceUpdate, DiffTarget, NodeSummary, TreeResponse
from .git import ChangeRecord, ChangeStatus
from .tree import FileNode, FolderNode, TreeNode

__all__ = [
    "BaseReferenceUpdate",
    "ChangeRecord",
    "ChangeStatus",
    "DiffTarget",
    "FileNode",
    "FolderNode",
    "NodeSummary",
    "TreeNode",
    "TreeResponse",
]
