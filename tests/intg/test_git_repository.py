"""Integration tests against a real temporary git repository."""

import shutil
from pathlib import Path

import pytest
from git import Repo

from src.schemas import ChangeStatus
from src.services import CompareCoordinator, GitQuery, GitQueryError, GitService

pytestmark = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not available"
)


def _write(root: Path, rel_path: str, content: str) -> None:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _commit(repo: Repo, message: str) -> None:
    repo.git.add(A=True)
    repo.git.commit(m=message)


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    """
    Repository with `main` and a `feature` branch checked out.

    feature changes a.py, adds c.py, deletes docs/x.md and renames old.txt;
    b.py is modified in the working tree only. main gains main_only.txt
    after feature branched off, and `unrelated` shares no history.
    """
    repo = Repo.init(tmp_path)
    repo.git.config("user.name", "Test User")
    repo.git.config("user.email", "test@example.com")
    repo.git.config("commit.gpgsign", "false")

    _write(tmp_path, "src/app/a.py", "a = 1\n")
    _write(tmp_path, "src/app/b.py", "b = 1\n")
    _write(tmp_path, "docs/x.md", "# x\n")
    _write(tmp_path, "old.txt", "some text that is long enough to be a rename\n")
    _commit(repo, "initial")
    repo.git.branch("-M", "main")

    repo.git.checkout("-b", "feature")
    _write(tmp_path, "src/app/a.py", "a = 2\n")
    _write(tmp_path, "src/app/c.py", "c = 1\n")
    repo.git.rm("docs/x.md")
    repo.git.mv("old.txt", "new.txt")
    _commit(repo, "feature work")

    repo.git.checkout("main")
    _write(tmp_path, "main_only.txt", "main\n")
    _commit(repo, "main moves on")

    repo.git.checkout("--orphan", "unrelated")
    repo.git.rm("-rf", ".")
    _write(tmp_path, "other.txt", "other\n")
    _commit(repo, "unrelated root")

    repo.git.checkout("-f", "feature")
    _write(tmp_path, "src/app/b.py", "b = 2\n")
    return tmp_path


class TestGitRepository:
    """End-to-end checks of the change pipeline on a real checkout."""

    def test_changes_against_merge_base(self, checkout):
        """Test that commits made on main after branching are not listed."""
        records = GitService(GitQuery(checkout)).get_changed_files("main")

        by_path = {r.path: r for r in records}
        assert set(by_path) == {
            "src/app/a.py",
            "src/app/b.py",
            "src/app/c.py",
            "docs/x.md",
            "new.txt",
        }
        assert by_path["src/app/a.py"].status == ChangeStatus.MODIFIED
        assert by_path["src/app/b.py"].status == ChangeStatus.MODIFIED
        assert by_path["src/app/c.py"].status == ChangeStatus.ADDED
        assert by_path["docs/x.md"].status == ChangeStatus.DELETED
        assert by_path["new.txt"].status == ChangeStatus.RENAMED
        assert by_path["new.txt"].old_path == "old.txt"

    def test_unrelated_history_falls_back_to_base(self, checkout):
        """Test that a base without a common ancestor is diffed directly."""
        service = GitService(GitQuery(checkout))

        assert service.resolve_compare_ref("unrelated") == "unrelated"
        records = service.get_changed_files("unrelated")

        by_path = {r.path: r.status for r in records}
        assert by_path["other.txt"] == ChangeStatus.DELETED
        assert by_path["src/app/a.py"] == ChangeStatus.ADDED

    def test_unknown_base_is_a_query_failure(self, checkout):
        """Test that a base git cannot diff against surfaces one error."""
        with pytest.raises(GitQueryError, match="no-such-branch"):
            GitService(GitQuery(checkout)).get_changed_files("no-such-branch")

    def test_coordinator_tree(self, checkout):
        """Test the collapsed and sorted tree for the feature branch."""
        coordinator = CompareCoordinator(GitService(GitQuery(checkout)))

        coordinator.refresh()
        labels = [node.label for node in coordinator.get_root_children()]

        assert labels == ["docs", "src/app", "old.txt → new.txt"]
        app_folder = coordinator.root.children["src/app"]
        assert [c.label for c in coordinator.get_children_of(app_folder)] == [
            "a.py",
            "b.py",
            "c.py",
        ]

    def test_branches_and_content(self, checkout):
        service = GitService(GitQuery(checkout))

        assert {"main", "feature", "unrelated"} <= set(service.get_branches())
        assert service.get_current_branch() == "feature"
        merge_base = service.get_merge_base("main")
        assert service.get_file_content(merge_base, "src/app/a.py") == "a = 1\n"

    def test_file_content_is_not_trimmed(self, checkout):
        """Test that base content keeps leading blank lines, indentation and newline."""
        repo = Repo(checkout)
        _write(checkout, "indented.py", "\n\n    indented = 1\n")
        repo.git.add("indented.py")
        repo.git.commit(m="indented file")

        content = GitService(GitQuery(checkout)).get_file_content("HEAD", "indented.py")

        assert content == "\n\n    indented = 1\n"

    def test_option_like_base_writes_nothing(self, checkout, tmp_path_factory):
        """Test that a base shaped like a git option is refused before git runs."""
        target = tmp_path_factory.mktemp("outside") / "diff.txt"
        coordinator = CompareCoordinator(GitService(GitQuery(checkout)))

        with pytest.raises(ValueError, match="Invalid reference name"):
            coordinator.set_base_reference(f"--output={target}")
        with pytest.raises(ValueError, match="Invalid reference name"):
            coordinator.get_file_content("src/app/a.py", ref=f"--output={target}")

        assert not target.exists()
        assert coordinator.base_reference == "main"
