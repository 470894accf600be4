"""Resolve the new content to merge into the PR description."""

import logging
from pathlib import Path

from prbody.config import ActionInputs
from prbody.logging import NOTICE
from prbody.services.patterns import Pattern

LOG = logging.getLogger("prbody.services.content")


def resolve_content(inputs: ActionInputs) -> str:
    """Return the literal content, or the file it names, narrowed by content_regex.

    Content is never trimmed. File read errors propagate.
    """
    if inputs.content_is_file:
        content = Path(inputs.content).read_text(encoding="utf-8")
    else:
        content = inputs.content

    if inputs.content_regex:
        extracted = Pattern(inputs.content_regex, inputs.content_regex_flags).extract(content)
        if extracted is not None:
            LOG.log(NOTICE, "Using extracted content from regex match.")
            content = extracted
    return content
