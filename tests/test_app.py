import pytest

from notefinder.app import main


@pytest.fixture
def setup(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    notes = tmp_path / "notes"
    notes.mkdir()
    (notes / "shopping").write_text("buy milk and bread\n", encoding="utf-8")
    (notes / "ideas").write_text("hello world\n", encoding="utf-8")
    other = tmp_path / "other"
    other.mkdir()
    (other / "milkshake").write_text("recipe\n", encoding="utf-8")
    cfg = tmp_path / "notefinder.ini"
    cfg.write_text(f"[notes]\npath = {notes}\n[other]\npath = {other}\n", encoding="utf-8")
    return cfg


def test_search_prints_matches(setup, capsys):
    assert main(["--config", str(setup), "--no-discover", "milk"]) == 0
    out = capsys.readouterr().out
    assert "shopping\tbuy milk and bread (matches:  Body)" in out
    assert "milkshake\trecipe (matches:  Title)" in out
    assert "ideas" not in out
    assert out.rstrip().endswith("2 results")


def test_empty_query_lists_everything(setup, capsys):
    assert main(["--config", str(setup), "--no-discover"]) == 0
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert lines[-1] == "3 results"
    assert "ideas\thello world" in lines
    assert "matches:" not in out


def test_notebook_filter(setup, capsys):
    assert main(["--config", str(setup), "--no-discover", "-n", "other", "milk"]) == 0
    out = capsys.readouterr().out
    assert "milkshake" in out
    assert "shopping" not in out
    assert out.rstrip().endswith("1 results")


def test_unknown_notebook_fails(setup, capsys):
    assert main(["--config", str(setup), "--no-discover", "-n", "nope"]) == 1
    assert "nope" in capsys.readouterr().err


def test_missing_config_fails(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "absent.ini"), "--no-discover"]) == 1
    assert "cannot read configuration" in capsys.readouterr().err