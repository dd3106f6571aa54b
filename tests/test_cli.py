"""
Tests for the command-line interface.
"""

import json

import pytest

from humanise.cli import main, parse_arguments


class TestParseArguments:
    """Test argument parsing."""

    def test_duration(self):
        args = parse_arguments(['duration', '1234'])
        assert args.command == 'duration'
        assert args.milliseconds == 1234
        assert args.long_words is None
        assert args.verbose is False

    def test_short_flag(self):
        assert parse_arguments(['duration', '1', '--short']).long_words is False

    def test_long_flag(self):
        assert parse_arguments(['duration', '1', '--long']).long_words is True

    def test_short_and_long_exclusive(self):
        with pytest.raises(SystemExit):
            parse_arguments(['duration', '1', '--short', '--long'])

    def test_negative_milliseconds_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            parse_arguments(['duration', '-5'])
        assert excinfo.value.code == 2

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_arguments([])


class TestMain:
    """Test end-to-end CLI runs."""

    def test_duration(self, capsys):
        assert main(['duration', '62345']) == 0
        assert capsys.readouterr().out == "1 minute, 2 seconds, and 345 milliseconds\n"

    def test_duration_short(self, capsys):
        assert main(['duration', '62345', '--short']) == 0
        assert capsys.readouterr().out == "1 min, 2 secs, and 345 ms\n"

    def test_duration_zero(self, capsys):
        assert main(['duration', '0', '-s']) == 0
        assert capsys.readouterr().out == "0 secs\n"

    def test_duration_uses_config(self, capsys, monkeypatch):
        monkeypatch.setenv('HUMANISE_VERBOSE', 'false')
        assert main(['duration', '2000']) == 0
        assert capsys.readouterr().out == "2 secs\n"

    def test_flag_overrides_config(self, capsys, monkeypatch):
        monkeypatch.setenv('HUMANISE_VERBOSE', 'false')
        assert main(['duration', '2000', '--long']) == 0
        assert capsys.readouterr().out == "2 seconds\n"

    def test_timedelta(self, capsys):
        assert main(['timedelta', '--days', '3', '--hours', '7']) == 0
        assert capsys.readouterr().out == "3 days and 7 hours\n"

    def test_timedelta_negative(self, capsys):
        assert main(['timedelta', '--seconds=-90', '--short']) == 0
        assert capsys.readouterr().out == "1 min and 30 secs\n"

    def test_timedelta_overflow(self, capsys):
        assert main(['timedelta', '--days', '1e12']) == 1

    def test_list(self, capsys):
        assert main(['list', 'apples', 'bananas', 'strawberries']) == 0
        assert capsys.readouterr().out == "apples, bananas, and strawberries\n"

    def test_list_empty(self, capsys):
        assert main(['list']) == 0
        assert capsys.readouterr().out == "\n"

    def test_plural(self, capsys):
        assert main(['plural', '5', 'apple']) == 0
        assert capsys.readouterr().out == "apples\n"

    def test_plural_opposite(self, capsys):
        assert main(['plural', '1', 'make', '--opposite']) == 0
        assert capsys.readouterr().out == "makes\n"

    def test_config_show(self, capsys):
        assert main(['config']) == 0
        out = capsys.readouterr().out
        assert "Not found" in out
        assert "verbose: True" in out

    def test_config_init(self, capsys, isolated_user_config):
        assert main(['config', '--init']) == 0
        data = json.loads((isolated_user_config / 'config.json').read_text())
        assert data['verbose'] is True
        assert main(['config']) == 0
        assert "✓ Found" in capsys.readouterr().out
