"""Tests for configuration loading."""

import pytest

from tradejournal import config
from tradejournal.analysis.sentiment import LexiconError
from tradejournal.config import Settings, load_config


class TestLoadConfig:
    """Settings from TOML files."""

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", tmp_path / "config.toml")

        settings = load_config()

        assert settings == Settings()
        assert settings.sentiment.key_word_limit == 5
        assert settings.logging.level == "WARNING"
        assert settings.capture.enabled

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(tmp_path / "nope.toml")

    def test_values(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            "[sentiment]\nkey_word_limit = 3\n\n"
            "[logging]\nlevel = \"debug\"\n\n"
            "[capture]\nenabled = false\n"
        )

        settings = load_config(path)

        assert settings.sentiment.key_word_limit == 3
        assert settings.logging.level == "DEBUG"
        assert not settings.capture.enabled

    @pytest.mark.parametrize(
        "content",
        [
            "[sentiment\n",
            "[sentiment]\nkey_word_limit = 0\n",
            "[logging]\nlevel = \"LOUD\"\n",
        ],
    )
    def test_invalid(self, tmp_path, content):
        path = tmp_path / "config.toml"
        path.write_text(content)

        with pytest.raises(ValueError):
            load_config(path)


class TestLexiconSetting:
    """Configured lexicon resolution."""

    def test_default_lexicon(self):
        assert "profit" in Settings().load_lexicon().positive

    def test_configured_lexicon(self, tmp_path):
        lexicon_path = tmp_path / "words.toml"
        lexicon_path.write_text('positive = ["moon"]\nnegative = ["rug"]\n')
        path = tmp_path / "config.toml"
        path.write_text(f"[sentiment]\nlexicon = '{lexicon_path}'\n")

        lexicon = load_config(path).load_lexicon()

        assert lexicon.positive == frozenset({"moon"})

    def test_missing_lexicon(self, tmp_path):
        settings = Settings.model_validate({"sentiment": {"lexicon": str(tmp_path / "none.toml")}})
        with pytest.raises(LexiconError):
            settings.load_lexicon()
