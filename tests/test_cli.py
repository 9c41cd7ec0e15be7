# Tests for the command line
# ==========================

import json

import pytest

from tinylingo.cli import build_parser, main
from tinylingo.glossary import GlossaryStore
from tinylingo.settings import get_config_path, load_config


class TestRecordRemoveList:
    """Glossary commands."""

    def test_record(self, capsys):
        """Test record stores the joined explanation."""
        assert main(["record", "提交", "git", "commit", "only"]) == 0
        assert "Recorded: 提交" in capsys.readouterr().out
        assert GlossaryStore().read() == {"提交": "git commit only"}

    def test_record_requires_explanation(self):
        """Test record without an explanation is a usage error."""
        with pytest.raises(SystemExit) as exc:
            main(["record", "提交"])
        assert exc.value.code == 2

    def test_record_empty_term(self, capsys):
        """Test an empty term is reported as an error."""
        assert main(["record", " ", "nothing"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_list_empty(self, capsys):
        """Test list on an empty glossary."""
        assert main(["list"]) == 0
        assert capsys.readouterr().out.strip() == "No entries recorded."

    def test_list_entries(self, capsys):
        """Test list prints one 'term: explanation' line per entry."""
        GlossaryStore().add("提交", "git commit only")
        GlossaryStore().add("联调", "source debugging")
        main(["list"])
        assert capsys.readouterr().out.splitlines() == [
            "提交: git commit only",
            "联调: source debugging",
        ]

    def test_remove(self, capsys):
        """Test remove deletes an existing entry."""
        GlossaryStore().add("提交", "git commit only")
        assert main(["remove", "提交"]) == 0
        assert "Removed: 提交" in capsys.readouterr().out
        assert GlossaryStore().read() == {}

    def test_remove_missing(self, capsys):
        """Test removing an unknown term exits 1."""
        assert main(["remove", "提交"]) == 1
        assert "Not found: 提交" in capsys.readouterr().err

    def test_broken_glossary(self, capsys):
        """Test a malformed glossary file is reported, not raised."""
        GlossaryStore().path.write_text("{broken", encoding="utf-8")
        assert main(["list"]) == 1
        assert "Error:" in capsys.readouterr().err


class TestConfigCommand:
    """config command."""

    def test_show_all(self, capsys):
        """Test config with no args prints the whole config as JSON."""
        assert main(["config"]) == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown["smart"]["enabled"] is False
        assert shown["debug"] is False

    def test_show_value(self, capsys):
        """Test config with a key prints its value."""
        main(["config", "smart.model"])
        assert capsys.readouterr().out.strip() == "qwen3-0.6b"

    def test_show_section(self, capsys):
        """Test a section prints as JSON."""
        main(["config", "smart"])
        assert json.loads(capsys.readouterr().out)["model"] == "qwen3-0.6b"

    def test_show_unknown(self, capsys):
        """Test an unknown key prints None."""
        main(["config", "smart.nope"])
        assert capsys.readouterr().out.strip() == "None"

    def test_set_value(self, capsys):
        """Test config with key and value sets it."""
        assert main(["config", "smart.enabled", "true"]) == 0
        assert "Set smart.enabled = true" in capsys.readouterr().out
        assert load_config().smart.enabled is True

    def test_set_invalid(self, capsys):
        """Test an invalid value exits 1 without writing."""
        assert main(["config", "smart.fuzzy_threshold", "5"]) == 1
        assert "Error:" in capsys.readouterr().err
        assert not get_config_path().exists()


class TestMatchCommand:
    """match command."""

    def test_exact_match(self, capsys):
        """Test a matching message prints tagged results."""
        GlossaryStore().add("提交", "git commit only")
        assert main(["match", "帮我提交代码"]) == 0
        assert capsys.readouterr().out.strip() == "[exact] 提交 -> git commit only"

    def test_message_words_joined(self, capsys):
        """Test the message may be given as several arguments."""
        GlossaryStore().add("godot", "game engine")
        main(["match", "open", "the", "godot", "editor"])
        assert "[exact] godot -> game engine" in capsys.readouterr().out

    def test_no_match(self, capsys):
        """Test the no-match message."""
        GlossaryStore().add("提交", "git commit only")
        main(["match", "hello"])
        assert capsys.readouterr().out.strip() == "No matches found."


class TestParser:
    """Argument parsing."""

    def test_command_required(self):
        """Test running without a command is a usage error."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_unknown_command(self):
        """Test an unknown command is a usage error."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["install"])

    def test_debug_flag(self):
        """Test the global --debug flag."""
        args = build_parser().parse_args(["--debug", "list"])
        assert args.debug is True
        assert args.command == "list"
