"""Mock implementation of GitQueryProtocol for development and testing."""

from pathlib import Path
from typing import Dict, Tuple

MOCK_MERGE_BASE = "0123456789abcdef0123456789abcdef01234567"

MOCK_NAME_STATUS = "\n".join(
    [
        "M\tsrc/services/git_service.py",
        "A\tsrc/services/tree_builder.py",
        "R087\tsrc/old_parser.py\tsrc/services/change_parser.py",
        "D\tdocs/legacy/notes.md",
        "M\tREADME.md",
    ]
)


class MockGitQuery:
    """Mock implementation of GitQueryProtocol that answers from canned output."""

    def __init__(self, workspace_root: str = "."):
        self._workspace_root = Path(workspace_root)
        self._responses: Dict[Tuple[str, ...], str] = {
            ("rev-parse", "--abbrev-ref", "HEAD"): "feature/mock",
            ("branch", "-a", "--format=%(refname:short)"): "main\nfeature/mock\norigin/main",
        }

    @property
    def workspace_root(self) -> Path:
        return self._workspace_root

    def run(self, *args: str, strip: bool = True) -> str:
        print(f"Mock: git {' '.join(args)}")
        if args in self._responses:
            return self._responses[args]
        if args[:1] == ("merge-base",):
            return MOCK_MERGE_BASE
        if args[:2] == ("diff", "--name-status"):
            return MOCK_NAME_STATUS
        if args[:1] == ("show",):
            return f"mock content of {args[-1]}"
        return ""
