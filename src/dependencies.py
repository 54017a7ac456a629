from typing import Optional

from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.services import CompareCoordinator, GitService, create_git_query_from_settings

# Global compare coordinator instance; it owns the base reference and tree
_compare_coordinator: Optional[CompareCoordinator] = None


def get_compare_coordinator(
    settings: Settings = Depends(get_settings),
) -> CompareCoordinator:
    """Get or create the compare coordinator instance."""
    global _compare_coordinator
    if _compare_coordinator is None:
        git_service = GitService(create_git_query_from_settings(settings))
        _compare_coordinator = CompareCoordinator(
            git_service,
            base_reference=settings.BASE_BRANCH,
            fallback_branches=settings.FALLBACK_BRANCHES,
        )
    return _compare_coordinator


def reset_compare_coordinator() -> None:
    """Drop the cached coordinator so the next request builds a fresh one."""
    global _compare_coordinator
    _compare_coordinator = None
