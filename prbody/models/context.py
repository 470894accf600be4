"""Run context: repository identity and trigger payload.

Built once from the runner environment and passed explicitly to the code
that needs it:

- GITHUB_REPOSITORY: owner/repo (falls back to payload repository)
- GITHUB_EVENT_NAME: triggering event, e.g. push or pull_request
- GITHUB_SHA: commit the workflow runs on
- GITHUB_EVENT_PATH: JSON file with the event payload
"""

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from prbody.config import ConfigError


class RunContext(BaseModel):
    """Immutable trigger context for one run."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    event_name: str = ""
    sha: str = ""
    ref: str | None = Field(default=None, description="Payload ref, e.g. refs/heads/main")
    pull_request_number: int | None = Field(default=None, description="Payload pull_request.number")

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "RunContext":
        """Read repository, event and payload from runner variables.

        Raises ConfigError when the repository cannot be determined.
        """
        payload = _read_payload(env.get("GITHUB_EVENT_PATH"))
        owner, repo = _repository(env.get("GITHUB_REPOSITORY"), payload)
        pull_request = payload.get("pull_request") or {}
        number = pull_request.get("number") if isinstance(pull_request, dict) else None
        ref = payload.get("ref")
        return cls(
            owner=owner,
            repo=repo,
            event_name=env.get("GITHUB_EVENT_NAME", ""),
            sha=env.get("GITHUB_SHA", ""),
            ref=ref if isinstance(ref, str) else None,
            pull_request_number=number or None,
        )


def _read_payload(path: str | None) -> dict[str, Any]:
    """Load the event payload; missing path or file means empty payload."""
    if not path:
        return {}
    event_path = Path(path)
    if not event_path.is_file():
        return {}
    data = json.loads(event_path.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


def _repository(value: str | None, payload: dict[str, Any]) -> tuple[str, str]:
    if value:
        owner, _, repo = value.partition("/")
        if owner and repo:
            return owner, repo
    repository = payload.get("repository") or {}
    owner = (repository.get("owner") or {}).get("login")
    name = repository.get("name")
    if owner and name:
        return owner, name
    raise ConfigError("context.repo requires a GITHUB_REPOSITORY environment variable like 'owner/repo'")
