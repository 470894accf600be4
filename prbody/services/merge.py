"""Merge new content into the current PR description.

One decision per run:

- REPLACE: the pattern matches; matched span(s) are replaced, the rest of
  the body is kept as is. Applies whatever the append-only flag says.
- APPEND: no match, body not empty; content is appended with no separator.
- SET: no match, body empty; content becomes the body.
- SKIP: no match and append-only mode; nothing is written.
"""

import logging
from enum import Enum
from typing import NamedTuple

from prbody.logging import NOTICE
from prbody.services.patterns import Pattern

LOG = logging.getLogger("prbody.services.merge")


class MergeAction(str, Enum):
    REPLACE = "replace"
    APPEND = "append"
    SET = "set"
    SKIP = "skip"


class MergeResult(NamedTuple):
    """Chosen action and the body to persist (None for SKIP)."""

    action: MergeAction
    body: str | None

    @property
    def changed(self) -> bool:
        return self.body is not None


def merge_description(current: str, content: str, pattern: Pattern, append_only: bool = False) -> MergeResult:
    """Decide the new description for current body and content."""
    if pattern.test(current):
        LOG.log(NOTICE, "Match found in PR body. Replacing matched section.")
        return MergeResult(MergeAction.REPLACE, pattern.replace(current, content))
    if append_only:
        LOG.log(NOTICE, "No match and appendContentOnMatchOnly is true. Skipping update.")
        return MergeResult(MergeAction.SKIP, None)
    if current:
        LOG.log(NOTICE, "Appending content to PR body.")
        return MergeResult(MergeAction.APPEND, current + content)
    LOG.log(NOTICE, "Setting PR body to new content.")
    return MergeResult(MergeAction.SET, content)
