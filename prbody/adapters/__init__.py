"""Git platform adapters (base and implementations)."""

from prbody.adapters.base import GitPlatformAdapter, GitPlatformError
from prbody.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
