"""Integration tests for CLI commands.

These tests run the commands end to end, from a feed document on disk to the
rendered Atom XML.
"""

import json
from pathlib import Path
from xml.etree import ElementTree as ET

from click.testing import CliRunner
import pytest

from atom_feed.cli import app

NS = {"atom": "http://www.w3.org/2005/Atom"}

FEED_TOML = """
[feed]
id = "urn:feed:1"
title = "My Feed"
authors = [{ name = "A" }]
links = [{ href = "http://x", rel = "alternate" }]

[[entries]]
id = "urn:entry:1"
title = "Hello"
content = "Hi"
authors = [{ name = "A" }]
updated = 2024-01-01T00:00:00Z

[[entries]]
id = "urn:entry:2"
title = "World"
content = { type = "html", value = "<p>World</p>" }
authors = [{ name = "B" }]
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def feed_file(tmp_path: Path) -> Path:
    path = tmp_path / "feed.toml"
    path.write_text(FEED_TOML, encoding="utf-8")
    return path


@pytest.mark.integration
class TestBuildCommand:
    def test_build_help(self, runner):
        result = runner.invoke(app, ["build", "--help"])

        assert result.exit_code == 0
        assert "FEED_FILE" in result.output
        assert "--indent" in result.output

    def test_build_to_stdout(self, runner, feed_file):
        result = runner.invoke(app, ["build", str(feed_file)])

        assert result.exit_code == 0, result.output
        root = ET.fromstring(result.output.strip().encode("utf-8"))
        entries = root.findall("atom:entry", NS)
        assert [e.findtext("atom:id", namespaces=NS) for e in entries] == [
            "urn:entry:1",
            "urn:entry:2",
        ]
        assert entries[0].findtext("atom:updated", namespaces=NS) == (
            "2024-01-01T00:00:00.000Z"
        )
        assert entries[1].find("atom:content", NS).get("type") == "html"
        link = root.find("atom:link", NS)
        assert link.attrib == {"href": "http://x", "rel": "alternate"}
        assert link.text is None

    def test_build_to_file_with_indent(self, runner, feed_file, tmp_path: Path):
        output = tmp_path / "public" / "atom.xml"

        result = runner.invoke(
            app, ["build", str(feed_file), "--output", str(output), "--indent", "2"]
        )

        assert result.exit_code == 0, result.output
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[0] == '<?xml version="1.0" encoding="utf-8"?>'
        assert lines[2] == "  <author>"

    def test_indent_from_config_file(self, runner, feed_file, tmp_path: Path):
        config = tmp_path / "atom_feed.toml"
        config.write_text('[render]\nindent = 4\n[generator]\nname = "Site"\n')

        result = runner.invoke(
            app, ["build", str(feed_file), "--config", str(config)]
        )

        assert result.exit_code == 0, result.output
        assert "\n    <author>" in result.output
        assert ">Site</generator>" in result.output

    def test_json_document(self, runner, tmp_path: Path):
        path = tmp_path / "feed.json"
        path.write_text(
            json.dumps(
                {
                    "feed": {
                        "id": "urn:feed:json",
                        "title": "JSON",
                        "author": [{"name": "A"}],
                        "generator": {"content": "Legacy"},
                    }
                }
            )
        )

        result = runner.invoke(app, ["build", str(path)])

        assert result.exit_code == 0, result.output
        assert "<generator>Legacy</generator>" in result.output
        assert "<entry>" not in result.output

    def test_invalid_entry_fails(self, runner, tmp_path: Path):
        path = tmp_path / "feed.json"
        path.write_text(
            json.dumps(
                {
                    "feed": {"id": "urn:f", "title": "F", "authors": [{"name": "A"}]},
                    "entries": [{"id": "urn:e", "title": "E", "authors": [{"name": "A"}]}],
                }
            )
        )

        result = runner.invoke(app, ["build", str(path)])

        assert result.exit_code == 1
        assert "Missing required field: entry.content" in result.output

    def test_unsupported_document(self, runner, tmp_path: Path):
        path = tmp_path / "feed.txt"
        path.write_text("nope")

        result = runner.invoke(app, ["build", str(path)])

        assert result.exit_code == 1
        assert "Unsupported feed document type" in result.output


@pytest.mark.integration
class TestValidateCommand:
    def test_validate_lists_entries(self, runner, feed_file):
        result = runner.invoke(app, ["validate", str(feed_file)])

        assert result.exit_code == 0, result.output
        assert "urn:entry:1" in result.output
        assert "Feed is valid: 2 entries" in result.output

    def test_validate_reports_missing_feed_id(self, runner, tmp_path: Path):
        path = tmp_path / "feed.json"
        path.write_text(json.dumps({"feed": {"title": "F", "authors": [{"name": "A"}]}}))

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Missing required field: feed.id" in result.output
