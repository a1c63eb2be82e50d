"""Resolve GitlabConfig from environment overrides and the preprocessor table."""

from collections.abc import Mapping
from typing import Any

from .GitlabConfig import GitlabConfig

# field -> (environment variable, preprocessor table key)
CONFIG_SOURCES: dict[str, tuple[str, str]] = {
    "server_url": ("CI_SERVER_URL", "gitlab-server-url"),
    "current_project": ("CI_PROJECT_NAME", "gitlab-project-name"),
    "current_namespace": ("CI_PROJECT_NAMESPACE", "gitlab-project-namespace"),
}


def resolve_config(env: Mapping[str, str] | None, table: Mapping[str, Any] | None) -> GitlabConfig:
    """Build the run configuration.

    For each field a non-empty environment value wins, then a string value from
    the table, then the empty string. Non-string table values are ignored.

    Args:
        env: Environment mapping (normally ``os.environ``)
        table: The ``[preprocessor.gitlab-link]`` table, if any

    Returns:
        Frozen GitlabConfig
    """
    env = env or {}
    table = table or {}

    values: dict[str, str] = {}
    for field_name, (env_key, table_key) in CONFIG_SOURCES.items():
        env_value = env.get(env_key)
        if env_value:
            values[field_name] = env_value
            continue
        table_value = table.get(table_key)
        values[field_name] = table_value if isinstance(table_value, str) else ""

    return GitlabConfig(**values)
