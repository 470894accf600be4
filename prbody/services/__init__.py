"""Run steps: resolve the PR, resolve content, merge, persist."""

from prbody.services.content import resolve_content
from prbody.services.merge import MergeAction, MergeResult, merge_description
from prbody.services.patterns import Pattern, PatternError
from prbody.services.resolver import PullRequestNotFoundError, resolve_pull_request
from prbody.services.subscription import validate_subscription
from prbody.services.updater import update_pull_request_body

__all__ = [
    "MergeAction",
    "MergeResult",
    "Pattern",
    "PatternError",
    "PullRequestNotFoundError",
    "merge_description",
    "resolve_content",
    "resolve_pull_request",
    "update_pull_request_body",
    "validate_subscription",
]
