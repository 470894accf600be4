"""Pull request models."""

from pydantic import BaseModel, ConfigDict


class PR(BaseModel):
    """Pull request as returned by the platform."""

    number: int
    body: str = ""
    head_branch: str = ""
    state: str


class PullRequestRef(BaseModel):
    """Target pull request: owner, repo and number, fixed once resolved."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    number: int

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"
