"""Subscription probe run before any update."""

import logging
import sys

import requests

from prbody.config import SubscriptionConfig

LOG = logging.getLogger("prbody.services.subscription")


def validate_subscription(
    repository: str,
    config: SubscriptionConfig,
    session: requests.Session | None = None,
) -> None:
    """GET the subscription URL for repository.

    A 403 ends the process (SystemExit(1)). Timeouts, network errors and
    any other error status are logged and the run continues.
    """
    if not config.enabled:
        LOG.debug("Subscription probe disabled")
        return
    url = config.url_template.format(repository=repository)
    http = session or requests
    try:
        resp = http.get(url, timeout=config.timeout)
    except requests.RequestException as e:
        LOG.debug("Subscription probe failed: %s", e)
        LOG.info("Timeout or API not reachable. Continuing to next step.")
        return
    if resp.status_code == 403:
        LOG.error("Subscription is not valid. Reach out to support@stepsecurity.io")
        sys.exit(1)
    if resp.status_code >= 400:
        LOG.info("Timeout or API not reachable. Continuing to next step.")
