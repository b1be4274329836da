"""Tests for the TradeJournal CLI."""

import pytest
from click.testing import CliRunner

from tradejournal.cli.main import LAZY_SUBCOMMANDS, cli
from tradejournal.cli.render import BAR_CHAR, bar


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[logging]\nlevel = \"WARNING\"\n")
    return path


def run(runner, config_file, *args, input=None):
    return runner.invoke(cli, ["--config", str(config_file), *args], input=input)


class TestCommandRegistration:
    """Lazy subcommands resolve to click commands."""

    def test_help_lists_commands(self, runner, config_file):
        result = run(runner, config_file, "--help")

        assert result.exit_code == 0
        for name in LAZY_SUBCOMMANDS:
            assert name in result.output

    def test_bad_config(self, runner, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[logging\n")

        result = runner.invoke(cli, ["--config", str(path), "sentiment", "good"])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output


class TestSentimentCommand:
    def test_positive(self, runner, config_file):
        result = run(runner, config_file, "sentiment", "Great profit today, feeling confident")

        assert result.exit_code == 0
        assert "Positive" in result.output
        assert "+3" in result.output

    def test_negative_unquoted(self, runner, config_file):
        result = run(runner, config_file, "sentiment", "Bad", "loss,", "worried", "about", "this", "bearish", "trend")

        assert result.exit_code == 0
        assert "Negative" in result.output

    def test_bad_lexicon(self, runner, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(f"[sentiment]\nlexicon = '{tmp_path / 'missing.toml'}'\n")

        result = runner.invoke(cli, ["--config", str(path), "sentiment", "good"])

        assert result.exit_code == 1
        assert "Lexicon Error" in result.output

    def test_malformed_lexicon_lists(self, runner, tmp_path):
        lexicon = tmp_path / "words.toml"
        lexicon.write_text("positive = 5\nnegative = [\"rug\"]\n")
        path = tmp_path / "config.toml"
        path.write_text(f"[sentiment]\nlexicon = '{lexicon}'\n")

        result = runner.invoke(cli, ["--config", str(path), "sentiment", "good"])

        assert result.exit_code == 1
        assert "Lexicon Error" in result.output


class TestPositionsCommand:
    def test_single_buy(self, runner, config_file):
        result = run(runner, config_file, "positions", "-e", "ABC:buy:10:5", "--no-chart")

        assert result.exit_code == 0
        assert "ABC" in result.output
        assert "$10.00" in result.output

    def test_flat_position(self, runner, config_file):
        result = run(runner, config_file, "positions", "-e", "ABC:buy:10:5", "-e", "ABC:sell:12:5")

        assert result.exit_code == 0
        assert "no position" in result.output
        assert "Performance Analytics" in result.output

    def test_overflowing_cost_still_renders(self, runner, config_file):
        result = run(runner, config_file, "positions", "-e", "ABC:buy:1e308:10")

        assert result.exit_code == 0, result.output
        assert "Performance Analytics" in result.output

    def test_bar_skips_non_finite_values(self):
        assert bar(float("inf"), 10.0, "red").plain == ""
        assert bar(5.0, float("inf"), "red").plain == ""
        assert bar(float("nan"), 10.0, "red").plain == ""
        assert bar(5.0, 10.0, "red").plain == BAR_CHAR * 8

    @pytest.mark.parametrize(
        "raw",
        ["ABC:buy:10", "ABC:hold:10:5", "ABC:buy:abc:5", "ABC:buy:10:-1", "ABC:buy:inf:5"],
    )
    def test_malformed_entry(self, runner, config_file, raw):
        result = run(runner, config_file, "positions", "-e", raw)

        assert result.exit_code == 2
        assert "--entry" in result.output


class TestSessionCommand:
    """Interactive session driven through stdin."""

    def test_entry_insights_performance_history(self, runner, config_file):
        script = "\n".join([
            "1",
            "2024-01-02",
            "ABC",
            "buy",
            "10",
            "5",
            "Great profit today",
            "y",
            "feeling confident",
            "",
            "2",
            "3",
            "4",
            "q",
        ]) + "\n"

        result = run(runner, config_file, "session", input=script)

        assert result.exit_code == 0, result.output
        assert "Recorded entry #1" in result.output
        assert "Sentiment Analysis: Positive" in result.output
        assert "Consider taking profits" in result.output
        assert "Performance Analytics" in result.output
        assert "2024-01-02 - ABC" in result.output
        assert "Session closed with 1 entries" in result.output

    def test_invalid_entry_is_not_recorded(self, runner, config_file):
        script = "\n".join(["1", "2024-01-02", "ABC", "buy", "abc", "5", "", "n", "4", "q"]) + "\n"

        result = run(runner, config_file, "session", input=script)

        assert result.exit_code == 0, result.output
        assert "Entry not recorded" in result.output
        assert "No journal entries yet" in result.output
        assert "Session closed with 0 entries" in result.output

    def test_capture_disabled_falls_back_to_typing(self, runner, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[capture]\nenabled = false\n")
        script = "\n".join(["1", "2024-01-02", "XYZ", "sell", "20", "3", "", "y", "worried", "2", "q"]) + "\n"

        result = runner.invoke(cli, ["--config", str(path), "session"], input=script)

        assert result.exit_code == 0, result.output
        assert "Sentiment Analysis: Negative" in result.output
        assert "Voice Input Analysis" in result.output

    def test_empty_views(self, runner, config_file):
        result = run(runner, config_file, "session", input="2\n3\n4\nq\n")

        assert result.exit_code == 0
        assert "No insights yet" in result.output
        assert "No positions yet" in result.output
