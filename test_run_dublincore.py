"""
Tests for the run_dublincore.py command-line script.
"""

import json

from run_dublincore import main


PAGE = """<html><head>
  <meta name="DC.Title" content="CLI page">
  <meta name="DC.Subject" content="Testing" lang="en">
  <meta name="DC.Colour" content="blue">
</head><body></body></html>
"""


def test_json_output_to_file(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")
    out = tmp_path / "out.json"

    assert main([str(page), "-o", str(out)]) == 0

    [result] = json.loads(out.read_text(encoding="utf-8"))
    assert result["file"] == "page.html"
    assert result["status"] == "success"
    assert result["source"] == "page.html"
    assert result["elements"]["title"] == [{"name": "title", "content": "CLI page"}]
    assert result["elements"]["subject"] == [{"name": "subject", "content": "Testing", "language": "en"}]
    assert result["errors"] == ["invalid element: Colour found"]


def test_html_output_to_stdout(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")

    assert main([str(page), "--format", "html", "--parser", "html.parser"]) == 0

    captured = capsys.readouterr()
    assert captured.out == (
        "<!-- page.html -->\n"
        '<meta name="DC.Title" content="CLI page">\n'
        '<meta name="DC.Subject" content="Testing" lang="en">\n'
        "\n"
    )
    assert "invalid element: Colour found" in captured.err


def test_missing_file_is_reported_and_others_still_run(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")

    assert main([str(tmp_path / "missing.html"), str(page)]) == 1

    results = json.loads(capsys.readouterr().out)
    assert [r["status"] for r in results] == ["error", "success"]
    assert results[0]["file"] == "missing.html"


def test_empty_file_is_an_error(tmp_path, capsys):
    page = tmp_path / "empty.html"
    page.write_text("", encoding="utf-8")

    assert main([str(page)]) == 1

    [result] = json.loads(capsys.readouterr().out)
    assert result["status"] == "error"
