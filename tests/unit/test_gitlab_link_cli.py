"""Unit tests for the gitlab_link CLI."""

import json

import pytest
from typer.testing import CliRunner

from gitlab_link.cli import main
from gitlab_link.cli._create_app import _create_app

pytestmark = pytest.mark.cli

runner = CliRunner()

CONTEXT = {
    "root": "/book",
    "config": {
        "book": {"title": "Test"},
        "preprocessor": {
            "gitlab-link": {
                "command": "gitlab-link",
                "gitlab-server-url": "https://gitlab.example",
                "gitlab-project-name": "proj",
                "gitlab-project-namespace": "ns",
            }
        },
    },
    "renderer": "html",
    "mdbook_version": "0.4.40",
}

BOOK = {
    "sections": [
        {"Chapter": {"name": "Intro", "content": "Fixes #1 and `#2`\n", "sub_items": [], "path": "intro.md"}},
        "Separator",
    ],
    "__non_exhaustive": None,
}


class TestSupports:
    """Test the supports command."""

    def test_html_supported(self):
        result = runner.invoke(_create_app(), ["supports", "html"])

        assert result.exit_code == 0

    def test_pdf_not_supported(self):
        result = runner.invoke(_create_app(), ["supports", "pdf"])

        assert result.exit_code == 1


class TestPreprocess:
    """Test running the preprocessor over stdin/stdout."""

    def test_round_trip(self, clean_env):
        result = runner.invoke(_create_app(), [], input=json.dumps([CONTEXT, BOOK]))

        assert result.exit_code == 0
        book = json.loads(result.stdout)
        chapter = book["sections"][0]["Chapter"]
        assert chapter["content"] == "Fixes [#1](https://gitlab.example/ns/proj/-/issues/1) and `#2`\n"
        assert book["sections"][1] == "Separator"
        assert book["__non_exhaustive"] is None

    def test_invalid_input(self):
        result = runner.invoke(_create_app(), [], input="not json")

        assert result.exit_code == 1
        assert "Invalid preprocessor input JSON" in result.stderr
        assert result.stdout == ""

    def test_wrong_shape(self):
        result = runner.invoke(_create_app(), [], input=json.dumps({"book": {}}))

        assert result.exit_code == 1
        assert "[context, book]" in result.stderr


class TestCheck:
    """Test the check command."""

    def test_json_output(self, tmp_path, clean_env):
        path = tmp_path / "doc.md"
        path.write_text("See group/sub/project> and !4\n", encoding="utf-8")
        clean_env.setenv("CI_SERVER_URL", "https://gitlab.example")

        result = runner.invoke(_create_app(), ["--display", "json", "check", str(path)])

        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["count"] == 2
        assert [r["label"] for r in output["references"]] == ["group/sub/project>", "!4"]
        assert "Found 2 reference(s)" in result.stderr

    def test_every_stage_reported(self, tmp_path, clean_env):
        """Test announce, progress and result go to stderr while the output goes to stdout."""
        path = tmp_path / "doc.md"
        path.write_text("#1\n", encoding="utf-8")

        result = runner.invoke(_create_app(), ["--display", "json", "check", str(path)])

        assert "Checking references in" in result.stderr
        assert "Progress:" in result.stderr
        assert "Found 1 reference(s)" in result.stderr
        assert json.loads(result.stdout)["count"] == 1

    def test_yaml_output(self, tmp_path, clean_env):
        path = tmp_path / "doc.md"
        path.write_text("#1\n", encoding="utf-8")

        result = runner.invoke(_create_app(), ["check", str(path)])

        assert result.exit_code == 0
        assert "count: 1" in result.stdout

    def test_missing_file(self, tmp_path):
        result = runner.invoke(_create_app(), ["check", str(tmp_path / "missing.md")])

        assert result.exit_code == 1
        assert "Failed to read" in result.stdout

    def test_invalid_display(self, tmp_path):
        result = runner.invoke(_create_app(), ["--display", "xml", "check", str(tmp_path / "doc.md")])

        assert result.exit_code == 1
        assert "--display must be 'json' or 'yaml'" in result.stderr


class TestRender:
    """Test the render command."""

    def test_prints_content(self, tmp_path, clean_env):
        path = tmp_path / "doc.md"
        path.write_text("Merge !12\n", encoding="utf-8")
        book = tmp_path / "book.toml"
        book.write_text(
            '[preprocessor.gitlab-link]\n'
            'gitlab-server-url = "https://gitlab.example"\n'
            'gitlab-project-name = "proj"\n'
            'gitlab-project-namespace = "ns"\n',
            encoding="utf-8",
        )

        result = runner.invoke(_create_app(), ["render", str(path), "--book", str(book)])

        assert result.exit_code == 0
        assert result.stdout == "Merge [!12](https://gitlab.example/ns/proj/-/merge_requests/12)\n"

    def test_write(self, tmp_path, clean_env):
        path = tmp_path / "doc.md"
        path.write_text("#3\n", encoding="utf-8")
        clean_env.setenv("CI_SERVER_URL", "https://gitlab.example")

        result = runner.invoke(_create_app(), ["-d", "json", "render", str(path), "--write"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["written"] is True
        assert path.read_text(encoding="utf-8") == "[#3](https://gitlab.example///-/issues/3)\n"


def test_main_exits_with_command_status():
    with pytest.raises(SystemExit) as excinfo:
        main(["supports", "pdf"])

    assert excinfo.value.code == 1
