"""Smoke tests for the command line interface."""

import json

import pytest
from helpers import ALICE, BOB, SERVER_CLASSES, user_info
from typer.testing import CliRunner

from demoreel import __version__
from demoreel.cli import app
from demoreel.core.config import reset_config
from demoreel.export import load_summary

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run in an empty directory and leave root logging alone."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for var in ("DEMOREEL_AIRSHOT_RULE", "DEMOREEL_AIRTIME_THRESHOLD", "DEMOREEL_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("demoreel.cli.configure_logging", lambda config: None)
    reset_config()


@pytest.fixture
def message_log(tmp_path):
    records = [
        {"kind": "header", "server": ""},
        {"kind": "data_tables", "classes": SERVER_CLASSES},
    ]
    for index, name, user_id, steam3 in (ALICE, BOB):
        records.append(
            {
                "kind": "string_entry",
                "table": "userinfo",
                "index": index,
                "text": name,
                "extra": user_info(name, user_id, steam3).hex(),
            }
        )
    records += [
        {"kind": "message", "tick": 0, "message": {"type": "server_info", "player_slot": 0, "interval_per_tick": 0.015}},
        {
            "kind": "message",
            "tick": 40,
            "message": {
                "type": "game_event",
                "event": {"name": "player_death", "userid": 20, "attacker": 10, "weapon": "scattergun"},
            },
        },
        {"kind": "message", "tick": 70, "message": {"type": "user_message", "kind": "SayText2", "client": 2, "text": "[gg]"}},
    ]
    path = tmp_path / "match.jsonl"
    path.write_text("\n".join(json.dumps(r) for r in records))
    return path


class TestGlobalOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "analyser.airshot_rule" in result.output


class TestAnalyseCommand:
    def test_analyse_writes_outputs(self, tmp_path, message_log):
        output = tmp_path / "summary.json"
        csv_path = tmp_path / "players.csv"
        result = runner.invoke(
            app, ["analyse", str(message_log), "--output", str(output), "--csv", str(csv_path)]
        )
        assert result.exit_code == 0, result.output
        assert "Alice" in result.output

        summary = load_summary(output)
        assert summary.local_user_id == 10
        assert len(summary.highlights) == 2
        assert csv_path.read_text().startswith("user_id,name")

    def test_analyse_with_airshot_rule(self, message_log):
        result = runner.invoke(app, ["analyse", str(message_log), "--airshot-rule", "airtime", "--threshold", "0.5"])
        assert result.exit_code == 0, result.output

    def test_malformed_log_exits_1(self, tmp_path):
        path = tmp_path / "bad.jsonl"
        path.write_text('{"kind": "header", "server": ""}\n{oops\n')
        result = runner.invoke(app, ["analyse", str(path)])
        assert result.exit_code == 1
        assert "line 2" in result.output

    def test_missing_log(self, tmp_path):
        result = runner.invoke(app, ["analyse", str(tmp_path / "missing.jsonl")])
        assert result.exit_code != 0


class TestShowCommand:
    @pytest.fixture
    def summary_path(self, tmp_path, message_log):
        output = tmp_path / "summary.json"
        runner.invoke(app, ["analyse", str(message_log), "--output", str(output)])
        return output

    def test_show_timeline(self, summary_path):
        result = runner.invoke(app, ["show", str(summary_path)])
        assert result.exit_code == 0, result.output
        assert "Kill" in result.output
        assert "[gg]" in result.output

    def test_show_filters(self, summary_path):
        result = runner.invoke(app, ["show", str(summary_path), "--no-kills", "--player", "20"])
        assert result.exit_code == 0, result.output
        assert "Timeline (1 of 2)" in result.output

    def test_invalid_chat_search(self, summary_path):
        result = runner.invoke(app, ["show", str(summary_path), "--chat", "("])
        assert result.exit_code == 1

    def test_invalid_summary(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 1
