"""Runs git commands in the working checkout through GitPython."""

from pathlib import Path
from typing import Union

from git import Git
from git.exc import GitCommandError, GitError


class GitQueryError(Exception):
    """Raised when a git command fails."""

    def __init__(self, command: str, stderr: str):
        self.command = command
        self.stderr = stderr
        super().__init__(f"{command} failed: {stderr}")


class GitQuery:
    """Executes git commands and returns their trimmed standard output."""

    def __init__(self, workspace_root: Union[str, Path]):
        self._workspace_root = Path(workspace_root)
        self._git = Git(str(self._workspace_root))

    @property
    def workspace_root(self) -> Path:
        return self._workspace_root

    def run(self, *args: str, strip: bool = True) -> str:
        """
        Run `git <args>` in the workspace root.

        Output is trimmed unless `strip` is False, which keeps file contents
        byte for byte.
        """
        command = ["git", *args]
        command_line = " ".join(command)
        try:
            if strip:
                output = self._git.execute(command)
            else:
                output = self._git.execute(command, strip_newline_in_stdout=False)
        except GitCommandError as e:
            raise GitQueryError(command_line, _clean_stderr(e.stderr) or str(e)) from e
        except (GitError, OSError) as e:
            raise GitQueryError(command_line, str(e)) from e

        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        output = str(output)
        return output.strip() if strip else output


def _clean_stderr(stderr: object) -> str:
    # GitCommandError formats stderr as "\n  stderr: '<text>'"
    if not isinstance(stderr, str):
        return ""
    text = stderr.strip()
    if text.startswith("stderr:"):
        text = text[len("stderr:") :].strip()
        if len(text) >= 2 and text[0] == text[-1] == "'":
            text = text[1:-1]
    return text.strip()
