from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from links.models import WorkTrackingIdentity
from resolve.context import ResolutionContext
from resolve.resolver import DEFAULT_ADO_URL, DEFAULT_GITHUB_URL

if TYPE_CHECKING:
    from collections.abc import Sequence

LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME = "termlinks.toml"

_REPOSITORY_SLUG = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


class GitHubConfig(BaseModel):
    """Code-hosting service used for issue and pull request links."""

    model_config = ConfigDict(extra="forbid")

    repository: str | None = Field(
        default=None,
        description="Repository slug in owner/name form",
    )
    url: str = Field(
        default=DEFAULT_GITHUB_URL,
        description="Base URL of the code-hosting service",
    )

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not _REPOSITORY_SLUG.match(v):
            msg = f"repository must be in owner/name form, got '{v}'"
            raise ValueError(msg)
        return v


class AdoConfig(BaseModel):
    """Work-tracking service used for work item links."""

    model_config = ConfigDict(extra="forbid")

    organization: str = Field(min_length=1, description="Organization name")
    project: str = Field(min_length=1, description="Project name")
    url: str = Field(
        default=DEFAULT_ADO_URL,
        description="Base URL of the work-tracking service",
    )


class TermLinksConfig(BaseModel):
    """Configuration for resolving terminal links."""

    model_config = ConfigDict(extra="forbid")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    ado: AdoConfig | None = Field(
        default=None,
        description="Work-tracking identity (absent = work items unresolvable)",
    )
    workspace_roots: list[str] = Field(
        default_factory=lambda: ["."],
        description="Roots for relative paths; relative entries resolve against the config root",
    )

    def work_tracking(self) -> WorkTrackingIdentity | None:
        if self.ado is None:
            return None
        return WorkTrackingIdentity(
            organization=self.ado.organization,
            project=self.ado.project,
        )

    def resolved_roots(self, root: Path) -> list[str]:
        return [
            str((root / entry).expanduser().resolve()) for entry in self.workspace_roots
        ]


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> TermLinksConfig:
    """Load configuration from termlinks.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return TermLinksConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        config = TermLinksConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e

    LOGGER.debug("Loaded config from %s", config_path)
    return config


def _load_for_lookup(root: Path) -> TermLinksConfig | None:
    try:
        return load_config(root)
    except ConfigError as exc:
        LOGGER.warning("Ignoring unreadable config for link resolution: %s", exc)
        return None


def context_from_config(root: Path) -> ResolutionContext:
    """Build lookups that re-read termlinks.toml on every call.

    Edits made between scanning a line and activating one of its links are
    therefore picked up. A config that cannot be loaded reads as absent.
    """

    def repository() -> str | None:
        config = _load_for_lookup(root)
        return config.github.repository if config else None

    def work_tracking() -> WorkTrackingIdentity | None:
        config = _load_for_lookup(root)
        return config.work_tracking() if config else None

    def workspace_roots() -> Sequence[str]:
        config = _load_for_lookup(root)
        return config.resolved_roots(root) if config else ()

    return ResolutionContext(
        repository=repository,
        work_tracking=work_tracking,
        workspace_roots=workspace_roots,
    )
