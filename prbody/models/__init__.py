"""Data models for pull requests and the run context (Pydantic)."""

from prbody.models.context import RunContext
from prbody.models.pr import PR, PullRequestRef

__all__ = ["PR", "PullRequestRef", "RunContext"]
