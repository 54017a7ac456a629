"""Unit tests for ReferenceResolver class."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from src.protocols.git_query_protocol import GitQueryProtocol
from src.services.git_query import GitQueryError
from src.services.reference_resolver import ReferenceResolver


class TestReferenceResolver:
    """Test cases for ReferenceResolver class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mock_query = Mock()
        self.mock_query.workspace_root = Path("/tmp/checkout")
        self.resolver = ReferenceResolver(self.mock_query)

    def test_resolve_returns_merge_base(self):
        """Test that the merge base is used when git finds one."""
        self.mock_query.run.return_value = "abc123def456"

        result = self.resolver.resolve("main")

        assert result == "abc123def456"
        self.mock_query.run.assert_called_once_with("merge-base", "main", "HEAD")

    def test_resolve_falls_back_to_base(self):
        """Test that a merge-base failure degrades to the base name."""
        self.mock_query.run.side_effect = GitQueryError(
            "git merge-base develop HEAD", "fatal: Not a valid object name develop"
        )

        result = self.resolver.resolve("develop")

        assert result == "develop"
        # Single attempt, no retry
        assert self.mock_query.run.call_count == 1

    def test_resolve_falls_back_on_empty_answer(self):
        """Test that an empty merge-base answer is treated as a failure."""
        self.mock_query.run.return_value = ""

        assert self.resolver.resolve("origin/main") == "origin/main"

    def test_merge_base_propagates_errors(self):
        """Test that the raw merge-base lookup does raise."""
        self.mock_query.run.side_effect = GitQueryError("git merge-base x HEAD", "boom")

        with pytest.raises(GitQueryError, match="boom"):
            self.resolver.merge_base("x")

    def test_mock_satisfies_protocol(self):
        """Test that a query object with run and workspace_root fits the protocol."""
        assert isinstance(self.mock_query, GitQueryProtocol)
