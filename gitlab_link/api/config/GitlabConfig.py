"""GitLab server and project configuration."""

from pydantic import BaseModel, ConfigDict, Field


class GitlabConfig(BaseModel):
    """Resolved configuration for one run. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    server_url: str = Field("", description="Base URL of the GitLab server, e.g. https://gitlab.com")
    current_project: str = Field("", description="Project used when a reference names none")
    current_namespace: str = Field("", description="Namespace used when a reference names none")
