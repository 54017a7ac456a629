"""Coordinates the base reference, refreshes and the changed-files tree."""

import threading
from typing import Callable, List, Optional, Sequence

from ..schemas import ChangeStatus, DiffTarget, FolderNode, TreeNode
from .git_query import GitQueryError
from .git_service import GitService, check_ref
from .tree_builder import build_tree, find_file, iter_file_nodes, sorted_children

DEFAULT_FALLBACK_BRANCHES = ["main", "master", "develop"]

BaseReferenceListener = Callable[[str], None]


class CompareCoordinator:
    """Owns the active base reference and the last successfully built tree."""

    def __init__(
        self,
        git_service: GitService,
        base_reference: str = "main",
        fallback_branches: Optional[Sequence[str]] = None,
    ):
        self.git_service = git_service
        self._base_reference = base_reference
        self._listeners: List[BaseReferenceListener] = []
        self._root = FolderNode()
        self._install_lock = threading.Lock()
        self.fallback_branches = list(
            fallback_branches
            if fallback_branches is not None
            else DEFAULT_FALLBACK_BRANCHES
        )

    @property
    def base_reference(self) -> str:
        return self._base_reference

    @property
    def root(self) -> FolderNode:
        return self._root

    def subscribe(self, listener: BaseReferenceListener) -> Callable[[], None]:
        """Register a callback for base reference changes. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_base_reference(self, name: str) -> FolderNode:
        """Switch the base reference, notify listeners and rebuild the tree."""
        name = name.strip()
        if not name:
            raise ValueError("Base reference cannot be empty")
        check_ref(name)

        if name != self._base_reference:
            with self._install_lock:
                self._base_reference = name
            print(f"Base reference changed to {name}")
            for listener in list(self._listeners):
                listener(name)

        return self.refresh()

    def refresh(self) -> FolderNode:
        """
        Rebuild the tree against the current base reference.

        The new tree is installed only once it is complete. If the git query
        fails the previous tree stays installed and GitQueryError is raised.
        A tree built for a base that was replaced in the meantime is returned
        but not installed.
        """
        base = self._base_reference
        try:
            records = self.git_service.get_changed_files(base)
        except GitQueryError as e:
            print(f"Failed to get changed files against {base}: {e}")
            raise

        root = build_tree(records)
        with self._install_lock:
            if base != self._base_reference:
                print(f"Discarding tree for {base}, base is now {self._base_reference}")
                return root
            self._root = root
        print(f"Found {len(records)} changed files against {base}")
        return root

    def get_root_children(self) -> List[TreeNode]:
        return sorted_children(self._root)

    def get_children_of(self, folder: FolderNode) -> List[TreeNode]:
        return sorted_children(folder)

    def file_count(self) -> int:
        return sum(1 for _ in iter_file_nodes(self._root))

    def get_current_branch(self) -> Optional[str]:
        """Branch checked out in the workspace, or None if git cannot tell."""
        try:
            return self.git_service.get_current_branch()
        except GitQueryError as e:
            print(f"Warning: Failed to read current branch: {e}")
            return None

    def list_branches(self) -> List[str]:
        """Branch names for picking a new base, or the fallback list if git fails."""
        try:
            return self.git_service.get_branches()
        except GitQueryError as e:
            print(f"Warning: Failed to list branches: {e}")
            return list(self.fallback_branches)

    def describe_diff(self, file_path: str) -> DiffTarget:
        """
        Describe how to open the change for `file_path`.

        Added files are opened as they are in the working tree, deleted
        files show their base content, anything else is a diff of the base
        content against the working tree.
        """
        node = find_file(self._root, file_path)
        if node is None:
            raise KeyError(file_path)

        working_path = str(self.git_service.get_absolute_path(file_path))
        if node.status is ChangeStatus.ADDED:
            return DiffTarget(mode="open", path=file_path, working_path=working_path)

        base_ref = self.git_service.resolve_compare_ref(self._base_reference)
        if node.status is ChangeStatus.DELETED:
            return DiffTarget(mode="base", path=file_path, base_ref=base_ref)

        return DiffTarget(
            mode="diff",
            path=file_path,
            working_path=working_path,
            base_ref=base_ref,
            title=f"{file_path} ({base_ref[:8]} ↔ Working Tree)",
        )

    def get_file_content(self, file_path: str, ref: Optional[str] = None) -> str:
        """Content of `file_path` at `ref`, defaulting to the comparison point."""
        if ref is None:
            ref = self.git_service.resolve_compare_ref(self._base_reference)
        return self.git_service.get_file_content(ref, file_path)
