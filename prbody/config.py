"""Configuration loading from the workflow step environment.

Step inputs arrive the way the Actions runner exports them: one
``INPUT_<NAME>`` variable per input, name upper-cased. Tool settings (API
URL, timeouts, logging) come from their own prefixed variables. Never put
real tokens in files committed to the repo; pass them as step inputs.
"""

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGEX = "---.*"
REQUIRED_INPUTS = ("content", "token")


class ConfigError(Exception):
    """Raised when inputs or the run context cannot be resolved."""

    pass


def _get_input(env: Mapping[str, str], name: str, trim: bool = True) -> str:
    """Read step input ``name`` from env (INPUT_<NAME>); absent means empty."""
    value = env.get(f"INPUT_{name.replace(' ', '_').upper()}", "")
    return value.strip() if trim else value


class ActionInputs(BaseModel):
    """Step inputs, resolved once per run.

    Boolean inputs stay strings: only the exact literal ``"true"`` enables
    them.
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(default="", description="Literal text or file path (never trimmed)")
    content_is_file_path: str = Field(default="", description='"true" reads content from file')
    content_regex: str = Field(default="", description="Extraction pattern applied to content")
    content_regex_flags: str = Field(default="", description="Flags for content_regex")
    regex: str = Field(default=DEFAULT_REGEX, description="Pattern locating the section to replace")
    regex_flags: str = Field(default="", description="Flags for regex")
    append_content_on_match_only: str = Field(default="", description='"true" skips update on no match')
    token: str = Field(default="", description="GitHub token")

    @property
    def content_is_file(self) -> bool:
        return self.content_is_file_path == "true"

    @property
    def append_only(self) -> bool:
        return self.append_content_on_match_only == "true"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "ActionInputs":
        """Build inputs from INPUT_* variables.

        Raises ConfigError when a required input is empty.
        """
        for name in REQUIRED_INPUTS:
            if not env.get(f"INPUT_{name.upper()}"):
                raise ConfigError(f"Input required and not supplied: {name}")
        return cls(
            content=_get_input(env, "content", trim=False),
            content_is_file_path=_get_input(env, "contentIsFilePath"),
            content_regex=_get_input(env, "contentRegex"),
            content_regex_flags=_get_input(env, "contentRegexFlags"),
            regex=_get_input(env, "regex") or DEFAULT_REGEX,
            regex_flags=_get_input(env, "regexFlags"),
            append_content_on_match_only=_get_input(env, "appendContentOnMatchOnly"),
            token=_get_input(env, "token"),
        )


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    api_url: str = Field(default="https://api.github.com", description="API base URL")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")


class SubscriptionConfig(BaseSettings):
    """Subscription probe settings."""

    model_config = SettingsConfigDict(env_prefix="SUBSCRIPTION_", extra="ignore")

    enabled: bool = Field(default=True, description="Run the probe before updating")
    url_template: str = Field(
        default="https://agent.api.stepsecurity.io/v1/github/{repository}/actions/subscription",
        description="Probe URL; {repository} is owner/repo",
    )
    # Seconds; the probe gives up after this and the run continues
    timeout: float = Field(default=3.0, gt=0, description="Probe timeout in seconds")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="%(message)s", description="Log format")
    workflow_commands: bool = Field(
        default=True,
        description="Render records as ::notice::/::error:: workflow commands",
    )


class AppConfig(BaseSettings):
    """Root config: step inputs plus tool settings."""

    model_config = SettingsConfigDict(extra="ignore")

    inputs: ActionInputs = Field(default_factory=ActionInputs)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    subscription: SubscriptionConfig = Field(default_factory=SubscriptionConfig)


def load_config(env: Mapping[str, str] | None = None) -> AppConfig:
    """Load step inputs from env (default os.environ).

    Tool settings (GITHUB_*, SUBSCRIPTION_*) are always read
    from the process environment. Raises ConfigError when content or
    token is missing.
    """
    env = dict(os.environ) if env is None else env
    return AppConfig(
        inputs=ActionInputs.from_env(env),
        github=GitHubConfig(),
        subscription=SubscriptionConfig(),
    )
