"""Unit tests for gitlab_link.api.transform.cmd_render module."""

import pytest

from gitlab_link.api.transform.cmd_render import cmd_render
from gitlab_link.api.validate_output import validate_output
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.transform


@pytest.fixture
def ci_env(clean_env):
    clean_env.setenv("CI_SERVER_URL", "https://gitlab.example")
    clean_env.setenv("CI_PROJECT_NAMESPACE", "ns")
    clean_env.setenv("CI_PROJECT_NAME", "proj")
    return clean_env


def test_cmd_render_returns_content(tmp_path, ci_env):
    path = tmp_path / "doc.md"
    path.write_text("Fixes #1\n", encoding="utf-8")

    result = run_cmd(cmd_render, path=str(path))

    assert result.success is True
    assert result.output["content"] == "Fixes [#1](https://gitlab.example/ns/proj/-/issues/1)\n"
    assert result.output["replacements"] == 1
    assert result.output["written"] is False
    assert path.read_text(encoding="utf-8") == "Fixes #1\n"
    assert validate_output(cmd_render, result.output) == result.output


def test_cmd_render_write(tmp_path, ci_env):
    path = tmp_path / "doc.md"
    path.write_bytes(b"Fixes !2\r\n")

    result = run_cmd(cmd_render, path=str(path), write=True)

    assert result.success is True
    assert result.output["written"] is True
    assert result.output["content"] == ""
    assert path.read_bytes() == b"Fixes [!2](https://gitlab.example/ns/proj/-/merge_requests/2)\r\n"


def test_cmd_render_write_without_changes(tmp_path, ci_env):
    path = tmp_path / "doc.md"
    path.write_text("Nothing here\n", encoding="utf-8")

    result = run_cmd(cmd_render, path=str(path), write=True)

    assert result.success is True
    assert result.output["written"] is False
    assert result.output["replacements"] == 0


def test_cmd_render_missing_file(tmp_path, ci_env):
    result = run_cmd(cmd_render, path=str(tmp_path / "missing.md"))

    assert result.success is False
    assert result.result.startswith("Failed to read")
    assert result.output["errors"] == [result.result]
