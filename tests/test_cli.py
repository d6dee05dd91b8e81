"""
Unit Tests for the Command Line Demo
====================================
"""

import logging

from gsm7_codec import setup_logging
from gsm7_codec.cli import main


class TestMain:
    """Tests for the gsm7 entry point."""

    def test_encode_text(self, capsys):
        assert main(["Hello €"]) == 0

        out = capsys.readouterr().out
        assert "GSM 7-bit compatible: True" in out
        assert "Encoded length: 8 bytes" in out
        assert "Encoded: 48656c6c6f201b65" in out
        assert "Decoded: Hello €" in out

    def test_incompatible_text_lenient(self, capsys):
        assert main(["--replacement", "?", "a🦀"]) == 0

        out = capsys.readouterr().out
        assert "Encoded length: n/a bytes" in out
        assert "Decoded: a?" in out

    def test_strict_failure(self, capsys):
        assert main(["--strict", "Hello 🦀"]) == 1

        assert "not supported in GSM 7-bit" in capsys.readouterr().err

    def test_decode_hex(self, capsys):
        assert main(["--decode", "48691b65"]) == 0

        assert capsys.readouterr().out.strip() == "Hi€"

    def test_decode_strict_trailing_escape(self, capsys):
        assert main(["--strict", "--decode", "481b"]) == 1

        assert "Escape byte at end of input" in capsys.readouterr().err

    def test_max_length(self, capsys):
        assert main(["--max-length", "3", "Hello"]) == 1

        assert "exceeds maximum of 3" in capsys.readouterr().err

    def test_max_length_counts_characters(self, capsys):
        assert main(["--max-length", "3", "€€€"]) == 0

        out = capsys.readouterr().out
        assert "Encoded: 1b651b651b65" in out
        assert "Decoded: €€€" in out

    def test_bad_hex(self, capsys):
        assert main(["--decode", "zz"]) == 2

    def test_bad_replacement(self, capsys):
        assert main(["--replacement", "ab", "x"]) == 2

    def test_demo(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "Original: Hello {world} €!" in out
        assert "With replacement: Hello 🦀 World -> Hello ? World" in out


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_sets_level(self):
        root_logger = setup_logging(level="DEBUG", json_output=True)

        assert root_logger is logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1

    def test_unknown_level_defaults_to_info(self):
        root_logger = setup_logging(level="chatty")

        assert root_logger.level == logging.INFO
