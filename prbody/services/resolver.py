"""Resolve the target pull request for a run."""

import logging

from prbody.adapters.base import GitPlatformAdapter
from prbody.models import PullRequestRef, RunContext

LOG = logging.getLogger("prbody.services.resolver")


class PullRequestNotFoundError(Exception):
    """No open pull request could be resolved for the triggering commit."""

    pass


def resolve_pull_request(context: RunContext, store: GitPlatformAdapter) -> PullRequestRef:
    """Return the PR from the event payload, else the first open PR for the commit.

    Lookup keeps only entries whose head branch is the pushed ref and whose
    state is exactly "open"; the first one in listing order wins.
    """
    number = context.pull_request_number
    if not number:
        prs = store.list_pull_requests_for_commit(context.repository, context.sha)
        LOG.debug("Commit %s has %d associated pull request(s)", context.sha, len(prs))
        number = next(
            (pr.number for pr in prs if context.ref == f"refs/heads/{pr.head_branch}" and pr.state == "open"),
            None,
        )
    if not number:
        raise PullRequestNotFoundError(
            f"{context.event_name} at commit {context.sha} has no associated open pull request"
        )
    return PullRequestRef(owner=context.owner, repo=context.repo, number=number)
