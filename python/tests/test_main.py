"""Tests for the CLI and configuration."""

import json
import sqlite3

import pytest

from lgdict import config as cfg
from lgdict.main import build_parser, main


@pytest.fixture
def fallback_config(monkeypatch):
    """Run with the hardcoded defaults, ignoring any config.json."""
    monkeypatch.setattr(cfg, "_config", {"defaults": dict(cfg.FALLBACK_DEFAULTS)})
    yield
    cfg.reset()


class TestConfig:
    """Tests for the configuration loader."""

    def test_fallbacks(self, fallback_config):
        """Test accessor defaults."""
        assert cfg.default_locale() == "EN_us"
        assert cfg.default_cost() == "zero"
        assert cfg.default_output_dir() == "output"
        assert cfg.default_commit_every() == 10000
        assert cfg.default_log_every() == 10000
        assert cfg.default_link_prefix() == "T"

    def test_get_default_missing(self, fallback_config):
        """Test the fallback for unknown keys."""
        assert cfg.get_default("nonexistent", 42) == 42

    def test_load_from_file(self, tmp_path, monkeypatch):
        """Test reading config.json."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"defaults": {"locale": "DE_de"}}))
        monkeypatch.setattr(cfg, "_find_config", lambda: path)
        cfg.reset()
        try:
            assert cfg.default_locale() == "DE_de"
            assert cfg.default_cost() == "zero"
        finally:
            cfg.reset()

    def test_unreadable_file(self, tmp_path, monkeypatch):
        """Test that a broken config.json falls back to defaults."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        monkeypatch.setattr(cfg, "_find_config", lambda: path)
        cfg.reset()
        try:
            assert cfg.load() == {"defaults": cfg.FALLBACK_DEFAULTS}
        finally:
            cfg.reset()


class TestMain:
    """Tests for the command line entry point."""

    def test_parser_defaults(self, fallback_config):
        """Test argument defaults."""
        args = build_parser().parse_args(["csets.jsonl"])
        assert args.locale == "EN_us"
        assert args.cost == "zero"
        assert str(args.output) == "output"
        assert args.quiet is False

    def test_export(self, tmp_path, sample_jsonl_content, fallback_config, capsys):
        """Test a full export from the command line."""
        input_path = tmp_path / "csets.jsonl"
        input_path.write_text(sample_jsonl_content, encoding="utf-8")
        output = tmp_path / "en"

        code = main([str(input_path), "-o", str(output), "-l", "EN_us"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Entries written: 3" in out
        assert "Done!" in out

        conn = sqlite3.connect(output / "dict.db")
        rows = conn.execute(
            "SELECT classname, disjunct FROM Disjuncts ORDER BY rowid"
        ).fetchall()
        conn.close()
        assert rows == [
            ("<dictionary-version-number>", "V5v4v0+"),
            ("<dictionary-locale>", "EN4us+"),
            ("dog", "TA- & TB+"),
            ("the", "TA+"),
            ("LEFT-WALL", "TC+"),
        ]

    def test_quiet(self, tmp_path, sample_jsonl_content, fallback_config, capsys):
        """Test that --quiet prints nothing on success."""
        input_path = tmp_path / "csets.jsonl"
        input_path.write_text(sample_jsonl_content, encoding="utf-8")

        assert main([str(input_path), "-o", str(tmp_path / "q.db"), "-q"]) == 0
        assert capsys.readouterr().out == ""

    def test_bad_input(self, tmp_path, fallback_config, capsys):
        """Test that a malformed record gives exit code 1."""
        input_path = tmp_path / "csets.jsonl"
        input_path.write_text("{broken\n", encoding="utf-8")

        assert main([str(input_path), "-o", str(tmp_path), "-q"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_missing_input(self, tmp_path, fallback_config, capsys):
        """Test that a missing input file gives exit code 1."""
        assert main([str(tmp_path / "nope.jsonl"), "-o", str(tmp_path), "-q"]) == 1
        assert "ERROR" in capsys.readouterr().err
