"""Tree node classes for the changed-files tree."""

from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

from .git import ChangeRecord, ChangeStatus


class FileNode(BaseModel):
    """Leaf node wrapping a single change record."""

    type: Literal["file"] = "file"
    name: str  # Key under which the parent folder stores this node
    record: ChangeRecord

    @property
    def label(self) -> str:
        return self.record.label

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def status(self) -> ChangeStatus:
        return self.record.status

    @property
    def old_path(self) -> Optional[str]:
        return self.record.old_path


class FolderNode(BaseModel):
    """
    Directory node.

    `path` is the slash-joined prefix of the folder (the root's is empty).
    After collapsing, `name` may be a compound segment such as ``a/b/c``
    while `path` is the full path of the deepest merged folder.
    """

    type: Literal["folder"] = "folder"
    name: str = ""
    path: str = ""
    children: Dict[str, "TreeNode"] = Field(default_factory=dict)

    @property
    def label(self) -> str:
        return self.name or self.path


TreeNode = Union[FolderNode, FileNode]

FolderNode.model_rebuild()
