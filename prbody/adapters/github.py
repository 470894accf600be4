"""GitHub API adapter."""

from typing import Any, Dict, List

import requests

from prbody.adapters.base import GitPlatformAdapter, GitPlatformError
from prbody.models import PR


def _pr_from_api(data: Dict[str, Any]) -> PR:
    head = data.get("head") or {}
    return PR(
        number=data["number"],
        body=data.get("body") or "",
        head_branch=head.get("ref", ""),
        state=data.get("state") or "",
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com", timeout: float = 30.0) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except (ValueError, AttributeError):
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def list_pull_requests_for_commit(self, repo: str, sha: str) -> List[PR]:
        resp = self._request("GET", f"/repos/{repo}/commits/{sha}/pulls")
        data = resp.json() or []
        return [_pr_from_api(d) for d in data]

    def get_pr(self, repo: str, pr_number: int) -> PR:
        resp = self._request("GET", f"/repos/{repo}/pulls/{pr_number}")
        return _pr_from_api(resp.json())

    def update_pr_body(self, repo: str, pr_number: int, body: str) -> PR:
        resp = self._request("PATCH", f"/repos/{repo}/pulls/{pr_number}", json={"body": body})
        return _pr_from_api(resp.json())
