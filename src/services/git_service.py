"""Version-control operations for the compare view."""

from pathlib import Path
from typing import List

from ..protocols.git_query_protocol import GitQueryProtocol
from ..schemas import ChangeRecord
from .change_parser import parse_name_status
from .reference_resolver import ReferenceResolver


def check_ref(name: str) -> str:
    """Reject ref names git would read as command-line options."""
    if name.startswith("-"):
        raise ValueError(f"Invalid reference name: {name}")
    return name


class GitService:
    """Reads changed files, branches and file contents from a git checkout."""

    def __init__(self, git_query: GitQueryProtocol):
        self.git_query = git_query
        self.resolver = ReferenceResolver(git_query)

    @property
    def workspace_root(self) -> Path:
        return self.git_query.workspace_root

    def get_current_branch(self) -> str:
        return self.git_query.run("rev-parse", "--abbrev-ref", "HEAD")

    def get_merge_base(self, base_branch: str) -> str:
        """Merge base of `base_branch` and HEAD. Raises GitQueryError."""
        return self.resolver.merge_base(check_ref(base_branch))

    def resolve_compare_ref(self, base_branch: str) -> str:
        """Merge base of `base_branch` and HEAD, or `base_branch` if there is none."""
        return self.resolver.resolve(base_branch)

    def get_changed_files(self, base_branch: str) -> List[ChangeRecord]:
        """Get files changed in the working tree since the merge base with `base_branch`."""
        ref = self.resolver.resolve(check_ref(base_branch))
        output = self.git_query.run("diff", "--name-status", "--end-of-options", ref)
        return parse_name_status(output)

    def get_branches(self) -> List[str]:
        """Get local and remote branch names."""
        output = self.git_query.run("branch", "-a", "--format=%(refname:short)")
        branches = []
        for line in output.split("\n"):
            name = line.strip().strip("'")
            if name:
                branches.append(name)
        return branches

    def get_file_content(self, ref: str, file_path: str) -> str:
        """Get content of `file_path` as of commit `ref`."""
        check_ref(ref)
        return self.git_query.run(
            "show", "--end-of-options", f"{ref}:{file_path}", strip=False
        )

    def get_absolute_path(self, file_path: str) -> Path:
        return self.workspace_root / file_path
