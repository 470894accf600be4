"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from prbody.models import PR


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Pull request store: the read/list/update calls a run needs."""

    @abstractmethod
    def list_pull_requests_for_commit(self, repo: str, sha: str) -> List[PR]:
        """List pull requests associated with a commit, in API order."""
        ...

    @abstractmethod
    def get_pr(self, repo: str, pr_number: int) -> PR:
        """Fetch PR by number."""
        ...

    @abstractmethod
    def update_pr_body(self, repo: str, pr_number: int, body: str) -> PR:
        """Replace the whole PR description."""
        ...
