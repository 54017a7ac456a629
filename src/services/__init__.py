"""Services for the application."""

from .compare_coordinator import CompareCoordinator
from .git_query import GitQuery, GitQueryError
from .git_query_factory import create_git_query, create_git_query_from_settings
from .git_service import GitService

__all__ = [
    "CompareCoordinator",
    "GitQuery",
    "GitQueryError",
    "GitService",
    "create_git_query",
    "create_git_query_from_settings",
]
