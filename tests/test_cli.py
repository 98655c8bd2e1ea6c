"""Tests for the command-line interface (keyword path only)."""

import json

import pytest

from grocery.cli import main


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_split(capsys):
    main(["split", "milk, eggs\nbread"])
    assert capsys.readouterr().out.splitlines() == ["milk", "eggs", "bread"]


def test_parse(capsys):
    main(["parse", "חלב 2 ליטר"])
    assert json.loads(capsys.readouterr().out) == {
        "name": "חלב",
        "quantity": 2.0,
        "unit": "l",
    }


def test_categorize_json(capsys):
    main(["categorize", "milk x3, tuna", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert [d["input"] for d in data] == ["milk x3", "tuna"]
    assert data[0]["category_id"] == "dairy"
    assert data[0]["quantity"] == 3
    assert data[1]["category_id"] == "canned"
    assert all(d["source"] == "keyword" for d in data)


def test_categorize_table_hebrew(capsys):
    main(["categorize", "טונה x8", "--lang", "he"])
    out = capsys.readouterr().out
    assert "שימורים" in out
    assert "x8" in out


def test_categorize_empty(capsys):
    main(["categorize", "   "])
    assert "No items found." in capsys.readouterr().out


def test_suggest(capsys):
    main(["suggest", "cream", "--limit", "1"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert "dairy" in lines[0]


def test_categories_with_custom(tmp_path, capsys):
    path = tmp_path / "grocery.toml"
    path.write_text('[[categories]]\nid = "pets"\nname_en = "Pets"\n', encoding="utf-8")

    main(["--config", str(path), "categories"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 14
    assert "pets" in lines[-2]
    assert "(custom)" in lines[-2]
    assert "other" in lines[-1]


def test_invalid_config_exits(tmp_path, capsys):
    path = tmp_path / "grocery.toml"
    path.write_text("[suggestions]\nlimit = 0\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["-c", str(path), "split", "milk"])
    assert exc.value.code == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_suggest_ignores_oracle_settings(tmp_path, capsys):
    path = tmp_path / "grocery.toml"
    path.write_text('[oracle]\nbackend = "foo"\nai_enabled = true\n', encoding="utf-8")

    main(["-c", str(path), "suggest", "milk"])
    assert "dairy" in capsys.readouterr().out
