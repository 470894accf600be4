"""Update a pull request description: the whole run, step by step."""

import logging

from prbody.adapters.base import GitPlatformAdapter
from prbody.config import AppConfig
from prbody.logging import NOTICE
from prbody.models import RunContext
from prbody.services.content import resolve_content
from prbody.services.merge import MergeResult, merge_description
from prbody.services.patterns import Pattern
from prbody.services.resolver import resolve_pull_request
from prbody.services.subscription import validate_subscription

LOG = logging.getLogger("prbody.services.updater")


def update_pull_request_body(
    config: AppConfig,
    context: RunContext,
    store: GitPlatformAdapter,
) -> MergeResult:
    """Probe, resolve the PR, merge new content into its body and save it.

    Raises PullRequestNotFoundError when no PR resolves; nothing is read
    or written in that case. The body is written once, whole, or not at all.
    """
    inputs = config.inputs
    validate_subscription(context.repository, config.subscription)

    ref = resolve_pull_request(context, store)
    pr = store.get_pr(ref.repository, ref.number)
    description = pr.body or ""

    content = resolve_content(inputs)
    pattern = Pattern(inputs.regex, inputs.regex_flags)
    result = merge_description(description, content, pattern, append_only=inputs.append_only)
    if not result.changed:
        return result

    LOG.log(NOTICE, "new PR description: %s", result.body)
    # No concurrency check: an edit made since get_pr is overwritten
    store.update_pr_body(ref.repository, ref.number, result.body)
    LOG.log(NOTICE, "Pull request body updated successfully.")
    return result
