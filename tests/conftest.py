"""Shared fixtures: in-memory PR store, run context, config builders."""

import logging
from typing import List

import pytest

from prbody.adapters.base import GitPlatformAdapter, GitPlatformError
from prbody.config import ActionInputs, AppConfig, GitHubConfig, SubscriptionConfig
from prbody.models import PR, RunContext


class FakeStore(GitPlatformAdapter):
    """PR store keeping PRs in memory and recording every call."""

    def __init__(self, prs: List[PR] | None = None, associated: List[PR] | None = None) -> None:
        self.prs = {pr.number: pr for pr in prs or []}
        self.associated = associated or []
        self.calls: list[tuple] = []

    def list_pull_requests_for_commit(self, repo: str, sha: str) -> List[PR]:
        self.calls.append(("list", repo, sha))
        return list(self.associated)

    def get_pr(self, repo: str, pr_number: int) -> PR:
        self.calls.append(("get", repo, pr_number))
        if pr_number not in self.prs:
            raise GitPlatformError("404: Not Found")
        return self.prs[pr_number]

    def update_pr_body(self, repo: str, pr_number: int, body: str) -> PR:
        self.calls.append(("update", repo, pr_number, body))
        pr = self.prs[pr_number].model_copy(update={"body": body})
        self.prs[pr_number] = pr
        return pr

    def called(self, kind: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == kind]


def make_pr(number: int = 456, body: str = "", head_branch: str = "main", state: str = "open") -> PR:
    return PR(number=number, body=body, head_branch=head_branch, state=state)


def make_config(**inputs: str) -> AppConfig:
    """AppConfig with the given inputs and the subscription probe off."""
    values = {"content": "new content", "token": "test-token", **inputs}
    return AppConfig(
        inputs=ActionInputs(**values),
        github=GitHubConfig(),
        subscription=SubscriptionConfig(enabled=False),
    )


@pytest.fixture
def context() -> RunContext:
    return RunContext(
        owner="owner",
        repo="repo",
        event_name="push",
        sha="mock-sha",
        ref="refs/heads/main",
        pull_request_number=456,
    )


@pytest.fixture
def push_context() -> RunContext:
    """Push event: no PR number in the payload."""
    return RunContext(owner="owner", repo="repo", event_name="push", sha="mock-sha", ref="refs/heads/main")


@pytest.fixture
def restore_root_logging():
    """Drop handlers a test added to the root logger and reset its level."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
