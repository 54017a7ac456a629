"""Factory for creating GitQuery instances with DEBUG mode support."""

from ..config.settings import Settings
from ..protocols.git_query_protocol import GitQueryProtocol
from .git_query import GitQuery


def create_git_query(workspace_root: str, debug_mode: bool = False) -> GitQueryProtocol:
    """
    Create a GitQuery instance based on debug mode.

    Args:
        workspace_root: Working checkout the commands run in
        debug_mode: If True, returns MockGitQuery; if False, returns real GitQuery

    Returns:
        GitQueryProtocol implementation
    """
    if debug_mode:
        print("🔧 DEBUG mode: Using MockGitQuery")
        # Lazy import to avoid import issues when dev path isn't set up yet
        try:
            from mocks.git_query import MockGitQuery

            return MockGitQuery(workspace_root)
        except ImportError:
            print("⚠️  MockGitQuery not available, falling back to real GitQuery")
            return GitQuery(workspace_root)
    else:
        print("🌐 Production mode: Using real GitQuery")
        return GitQuery(workspace_root)


def create_git_query_from_settings(settings: Settings) -> GitQueryProtocol:
    """
    Create a GitQuery instance using application settings.

    Args:
        settings: Application settings

    Returns:
        GitQueryProtocol implementation
    """
    return create_git_query(
        workspace_root=settings.WORKSPACE_ROOT,
        debug_mode=settings.DEBUG,
    )
