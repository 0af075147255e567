"""
Command Line Test Suite
"""

import json
import os

import pytest

from wsfinder.__main__ import main


def test_cli_lists_matches(make_tree, capsys):
    root = make_tree(["my-project", "other"])
    assert main(["--dir", str(root), "myproj"]) == 0
    assert capsys.readouterr().out.splitlines() == ["my-project"]


def test_cli_empty_query_lists_all(make_tree, capsys):
    root = make_tree(["b", "a"])
    assert main(["--dir", str(root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["a", "b"]


def test_cli_json_explain(make_tree, capsys):
    root = make_tree(["alpha", "beta", "gamma"])
    assert main(["--dir", str(root), "--json", "--explain", "--limit", "2", "alpah"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["phase"] == "fuzzy"
    assert payload["results"] == ["alpha", "gamma"]
    assert payload["scores"][0] == {"name": "alpha", "substring": 3, "subsequence": 4, "edit_distance": 2}


def test_cli_uses_settings_file(make_tree, tmp_path, capsys):
    root = make_tree(["项目管理", "notes"])
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"searchDirectories": [str(root)]}), encoding="utf-8")
    assert main(["--config", str(config), "xmgl"]) == 0
    assert capsys.readouterr().out.splitlines() == ["项目管理"]


def test_cli_bad_settings_file(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text("{broken", encoding="utf-8")
    assert main(["--config", str(config), "x"]) == 2
    assert "invalid JSON" in capsys.readouterr().err


def test_cli_no_results_is_success(tmp_path, capsys):
    assert main(["--dir", str(tmp_path / "missing"), "x"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_skips_undecodable_names(make_tree, capsys):
    root = make_tree(["good"])
    try:
        os.mkdir(os.fsencode(root) + b"/bad\xffname")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")
    assert main(["--dir", str(root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["good"]
