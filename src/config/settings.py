from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    This class loads configuration values used throughout the application from
    environment variables. Since Docker Compose automatically loads the .env file
    from the project root, there's no need to explicitly specify the file path.
    """

    # Working checkout that is compared against the base reference
    WORKSPACE_ROOT: str = "."
    BASE_BRANCH: str = "main"

    # Offered when listing branches fails
    FALLBACK_BRANCHES: List[str] = ["main", "master", "develop"]

    # Development and debugging
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
