"""Builds the collapsed directory tree of changed files."""

from typing import Dict, Iterable, Iterator, List, Optional

from ..schemas import ChangeRecord, FileNode, FolderNode, TreeNode


def build_tree(records: Iterable[ChangeRecord]) -> FolderNode:
    """Build a collapsed tree from change records. Returns the root folder."""
    root = FolderNode()
    for record in records:
        insert_record(root, record)
    return collapse_folder(root)


def insert_record(root: FolderNode, record: ChangeRecord) -> None:
    """
    Insert a file node for `record` below `root`.

    Empty path segments are ignored, so ``/a//b.ts`` lands at ``a/b.ts``.
    A file sitting where a folder is needed is replaced by the folder, and
    re-inserting a path replaces the previous node.
    """
    segments = [segment for segment in record.path.split("/") if segment]
    if not segments:
        print(f"Warning: skipping change with empty path: {record.path!r}")
        return

    current = root
    for i, folder_name in enumerate(segments[:-1]):
        child = current.children.get(folder_name)
        if not isinstance(child, FolderNode):
            child = FolderNode(name=folder_name, path="/".join(segments[: i + 1]))
            current.children[folder_name] = child
        current = child

    file_name = segments[-1]
    current.children[file_name] = FileNode(name=file_name, record=record)


def collapse_folder(folder: FolderNode) -> FolderNode:
    """
    Return a copy of `folder` with single-child folder chains merged.

    Children are collapsed first, so a chain ``a/b/c`` of folders that each
    hold only one folder ends up as a single node keyed ``a/b/c``. The
    folder passed in is merged into its child only by its own parent; the
    root therefore keeps its empty path.
    """
    children: Dict[str, TreeNode] = {}
    for key, child in folder.children.items():
        if isinstance(child, FolderNode):
            child = collapse_folder(child)
            if len(child.children) == 1:
                grandchild_key, grandchild = next(iter(child.children.items()))
                if isinstance(grandchild, FolderNode):
                    key = f"{key}/{grandchild_key}"
                    child = FolderNode(
                        name=key,
                        path=grandchild.path,
                        children=dict(grandchild.children),
                    )
        children[key] = child
    return FolderNode(name=folder.name, path=folder.path, children=children)


def _label_key(node: TreeNode) -> str:
    return node.label


def sorted_children(folder: FolderNode) -> List[TreeNode]:
    """Children of `folder`, folders first, then by label."""
    folders = [c for c in folder.children.values() if isinstance(c, FolderNode)]
    files = [c for c in folder.children.values() if isinstance(c, FileNode)]
    return sorted(folders, key=_label_key) + sorted(files, key=_label_key)


def iter_file_nodes(folder: FolderNode) -> Iterator[FileNode]:
    """Yield every file node below `folder`, depth first."""
    for child in folder.children.values():
        if isinstance(child, FolderNode):
            yield from iter_file_nodes(child)
        else:
            yield child


def find_folder(root: FolderNode, path: str) -> Optional[FolderNode]:
    """Find the folder whose path is `path`, or None."""
    path = path.strip("/")
    if root.path == path:
        return root
    for child in root.children.values():
        if not isinstance(child, FolderNode):
            continue
        if child.path == path:
            return child
        if path.startswith(child.path + "/"):
            return find_folder(child, path)
    return None


def find_file(root: FolderNode, path: str) -> Optional[FileNode]:
    """Find the file node for the changed path `path`, or None."""
    for node in iter_file_nodes(root):
        if node.path == path:
            return node
    return None
