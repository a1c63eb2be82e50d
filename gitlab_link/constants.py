"""Shared constants for the gitlab-link preprocessor."""

PREPROCESSOR_NAME = "gitlab-link"

SUPPORTED_RENDERERS = frozenset({"html"})

# Environment variable selecting the log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL_ENV = "GITLAB_LINK_LOG"
