"""Git query protocol interface."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class GitQueryProtocol(Protocol):
    """Protocol for running read-only git commands in a working checkout."""

    @property
    def workspace_root(self) -> Path:
        """Working directory the commands run in."""
        ...

    def run(self, *args: str, strip: bool = True) -> str:
        """Run `git <args>` and return stdout, trimmed unless `strip` is False. Raises GitQueryError on failure."""
        ...
