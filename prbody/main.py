"""pr-body-updater entry point.

Runs as a workflow step: reads INPUT_* step inputs and the GITHUB_* run
context, updates the pull request description and exits 0, or reports the
failure and exits 1. Usage: pr-body-updater [--check].
"""

import argparse
import logging
import os
import sys

from prbody.adapters import GitHubAdapter, GitPlatformAdapter
from prbody.config import AppConfig, LoggingConfig, load_config
from prbody.logging import PrBodyLogging
from prbody.models import RunContext
from prbody.services import PullRequestNotFoundError, update_pull_request_body

UNEXPECTED_ERROR = "Unexpected error occurred."


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="pr-body-updater",
        description="Update a pull request description: replace a matched section, append, or skip",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate inputs and run context, then exit",
    )
    return parser.parse_args(argv)


def run(config: AppConfig, context: RunContext, store: GitPlatformAdapter | None = None) -> int:
    """Run one update and map the outcome to an exit code."""
    log = logging.getLogger("prbody")
    if store is None:
        store = GitHubAdapter(
            token=config.inputs.token,
            api_url=config.github.api_url,
            timeout=config.github.timeout,
        )
    try:
        update_pull_request_body(config, context, store)
    except PullRequestNotFoundError as e:
        log.error("%s", e)
        return 1
    except Exception as e:
        log.debug("Run failed", exc_info=True)
        log.error("%s", str(e) or UNEXPECTED_ERROR)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for pr-body-updater."""
    args = parse_args(argv)
    PrBodyLogging(LoggingConfig()).setup()
    try:
        config = load_config()
        context = RunContext.from_env(os.environ)
    except Exception as e:
        logging.getLogger("prbody").error("%s", str(e) or UNEXPECTED_ERROR)
        return 1

    if args.check:
        print("Config OK:", context.repository)
        return 0

    return run(config, context)


if __name__ == "__main__":
    sys.exit(main())
