"""
Tests for the command-line entry point
"""

import json

import pytest

from app import build_parser, main


@pytest.fixture
def page_file(tmp_path, simple_page):
    path = tmp_path / "page.html"
    path.write_text(simple_page, encoding="utf-8")
    return path


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.path is None
        assert args.lang == "en"
        assert args.json is False

    def test_rejects_unknown_language(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--lang", "fr"])


class TestMain:

    def test_text_report(self, page_file, capsys):
        code = main([str(page_file), "--title", "SEO", "--description", "Short desc"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Score:" in out
        assert "grade F" in out
        assert "Quick wins:" in out

    def test_json_output(self, page_file, capsys):
        code = main([str(page_file), "--title", "SEO", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["max_score"] > 0
        assert data["metadata"]["title"] == "SEO"
        assert data["readability"]["meta"]["language"] == "en"

    def test_csv_export(self, page_file, tmp_path, capsys):
        target = tmp_path / "report.csv"
        assert main([str(page_file), "--title", "SEO", "--csv", str(target)]) == 0
        content = target.read_text(encoding="utf-8")
        assert content.startswith("Severity,Category,Rule")
        assert "Priority,Category,Rule,Title,Effort" in content

    def test_metadata_only(self, capsys):
        assert main(["--title", "Coffee brewing guide", "--lang", "el"]) == 0

    def test_nothing_to_analyze(self, capsys):
        assert main([]) == 2
        assert "At least one content field" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.html")]) == 2
        assert "cannot read" in capsys.readouterr().out
