"""
Unit Tests for Configuration
============================
"""

from dataclasses import FrozenInstanceError

import pytest

from gsm7_codec import Gsm7Config, REPLACEMENT_CHARACTER


class TestPresets:
    """Tests for configuration presets."""

    def test_defaults(self):
        config = Gsm7Config()

        assert config.strict is False
        assert config.replacement_char == REPLACEMENT_CHARACTER == "\ufffd"
        assert config.max_input_length == 0
        assert config.validate_input is False
        assert Gsm7Config.default() == config

    def test_strict_mode(self):
        config = Gsm7Config.strict_mode()

        assert config.strict is True
        assert config.replacement_char == REPLACEMENT_CHARACTER
        assert config.max_input_length == 0

    def test_lenient(self):
        assert Gsm7Config.lenient().replacement_char == "?"
        assert Gsm7Config.lenient("*").replacement_char == "*"
        assert Gsm7Config.lenient().strict is False

    def test_with_methods_return_copies(self):
        base = Gsm7Config()

        limited = base.with_max_length(10)
        validated = base.with_validation()
        replaced = base.with_replacement("?")

        assert base.max_input_length == 0
        assert limited.max_input_length == 10
        assert validated.validate_input is True
        assert replaced.replacement_char == "?"

    def test_exceeds_limit(self):
        assert not Gsm7Config().exceeds_limit(10_000)
        assert Gsm7Config(max_input_length=5).exceeds_limit(6)
        assert not Gsm7Config(max_input_length=5).exceeds_limit(5)


class TestValidation:
    """Tests for field validation."""

    def test_is_immutable(self):
        config = Gsm7Config()

        with pytest.raises(FrozenInstanceError):
            config.strict = True

    @pytest.mark.parametrize("replacement", ["", "ab"])
    def test_replacement_must_be_one_character(self, replacement):
        with pytest.raises(ValueError):
            Gsm7Config(replacement_char=replacement)

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            Gsm7Config(max_input_length=-1)


class TestFromEnv:
    """Tests for environment-driven configuration."""

    def test_unset_gives_defaults(self, monkeypatch):
        for name in ("STRICT", "REPLACEMENT_CHAR", "MAX_INPUT_LENGTH", "VALIDATE_INPUT"):
            monkeypatch.delenv(f"GSM7_{name}", raising=False)

        assert Gsm7Config.from_env() == Gsm7Config()

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("GSM7_STRICT", "true")
        monkeypatch.setenv("GSM7_REPLACEMENT_CHAR", "?")
        monkeypatch.setenv("GSM7_MAX_INPUT_LENGTH", "160")
        monkeypatch.setenv("GSM7_VALIDATE_INPUT", "1")

        config = Gsm7Config.from_env()

        assert config == Gsm7Config(
            strict=True,
            replacement_char="?",
            max_input_length=160,
            validate_input=True,
        )

    def test_falsey_values(self, monkeypatch):
        monkeypatch.setenv("GSM7_STRICT", "no")
        monkeypatch.setenv("GSM7_VALIDATE_INPUT", "")

        config = Gsm7Config.from_env()

        assert config.strict is False
        assert config.validate_input is False

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("SMS_STRICT", "on")

        assert Gsm7Config.from_env(prefix="SMS_").strict is True
