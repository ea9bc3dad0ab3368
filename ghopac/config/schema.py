# ghopac Configuration Schema
# Pydantic models for configuration validation

from enum import Enum
from pydantic import BaseModel, Field, field_validator

from ghopac.utils.paths import expand_path
from ghopac.utils.platform import resolve_concurrency

DEFAULT_API_URL = "https://api.github.com"


class CloneProtocol(str, Enum):
    """Which clone URL of a listed repository becomes the target origin."""

    SSH = "ssh"
    HTTPS = "https"


class OrgConfig(BaseModel):
    """A remote organization mirrored under a local base directory."""

    org: str = Field(description="Organization login on the remote host")
    path: str = Field(description="Local base directory holding the org's repositories")

    @field_validator("path")
    @classmethod
    def absolute_path(cls, v: str) -> str:
        """Expand ~ and make the path absolute."""
        return str(expand_path(v))


class GhopacConfig(BaseModel):
    """Root configuration model for ghopac."""

    github_access_token: str | None = Field(default=None, description="Token used for the repository listing API")
    orgs: list[OrgConfig] = Field(default_factory=list, description="Organizations to mirror")
    syncpoints: list[str] = Field(default_factory=list, description="Standalone repositories to pull")
    concurrency: int | None = Field(default=None, description="Worker count. Unset or <= 0 means CPU count.")
    verbose: bool = Field(default=False, description="Log successful operations too")
    colored: bool = Field(default=True, description="Enable colored output")
    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the GitHub REST API")
    clone_protocol: CloneProtocol = Field(default=CloneProtocol.SSH, description="Clone URL flavour for org repos")

    @field_validator("syncpoints")
    @classmethod
    def absolute_syncpoints(cls, v: list[str]) -> list[str]:
        """Expand ~ and make syncpoint paths absolute."""
        return [str(expand_path(p)) for p in v]

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def get_concurrency(self) -> int:
        """Get the resolved worker count (always >= 1)."""
        return resolve_concurrency(self.concurrency)
