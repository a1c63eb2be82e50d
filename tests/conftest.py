"""Shared pytest configuration and fixtures for all tests."""

import pytest

from gitlab_link.api.config.GitlabConfig import GitlabConfig


def pytest_configure(config):
    for marker in ("unit", "config", "reference", "markdown", "splice", "transform", "book", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def gitlab_config() -> GitlabConfig:
    """Configuration as resolved inside a GitLab CI job."""
    return GitlabConfig(
        server_url="https://gitlab.example",
        current_project="proj",
        current_namespace="ns",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the CI_* variables so tests do not pick up a real CI environment."""
    for name in ("CI_SERVER_URL", "CI_PROJECT_NAME", "CI_PROJECT_NAMESPACE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def book_toml(path, **table) -> str:
    """Write a book.toml with a [preprocessor.gitlab-link] table and return its path."""
    lines = ["[book]", 'title = "Test"', "", "[preprocessor.gitlab-link]"]
    lines.extend(f'{key} = "{value}"' for key, value in table.items())
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)
