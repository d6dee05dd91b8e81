"""
Unit Tests for Codec Registration
=================================
"""

import codecs

import pytest

import gsm7_codec


class TestEncodingNames:
    """Tests for str.encode / bytes.decode integration."""

    def test_encode_alphanumeric(self):
        assert "Abc1234".encode("gsm0338") == b"Abc1234"

    def test_encode_special_chars(self):
        assert "ü and € is à".encode("gsm0338") == b"~ and \x1be is \x7f"

    def test_encode_escaped(self):
        assert "{ brackets text }".encode("gsm0338") == b"\x1b( brackets text \x1b)"

    def test_decode_special_chars(self):
        assert b"~ and \x1be is \x7f".decode("gsm0338") == "ü and € is à"

    def test_aliases(self):
        assert codecs.lookup("gsm7").name == "gsm0338"
        assert codecs.lookup("GSM0338").name == "gsm0338"
        assert codecs.lookup("gsm03.38").name == "gsm0338"

    def test_register_is_idempotent(self):
        gsm7_codec.register()
        gsm7_codec.register()

        assert "€".encode("gsm0338") == b"\x1be"


class TestErrorHandlers:
    """Tests for codec error handling modes."""

    def test_strict_encode_error_position(self):
        with pytest.raises(UnicodeEncodeError) as exc_info:
            "ab🦀c".encode("gsm0338")

        assert exc_info.value.start == 2
        assert exc_info.value.end == 3
        assert isinstance(exc_info.value.__cause__, gsm7_codec.UnsupportedCharacterError)

    def test_replace_encode(self):
        assert "a🦀b".encode("gsm0338", "replace") == b"a?b"

    def test_strict_decode_error_position(self):
        with pytest.raises(UnicodeDecodeError) as exc_info:
            b"ok\x1b\xff".decode("gsm0338")

        assert exc_info.value.start == 2
        assert exc_info.value.end == 4

    def test_strict_decode_trailing_escape(self):
        with pytest.raises(UnicodeDecodeError) as exc_info:
            b"ok\x1b".decode("gsm0338")

        assert exc_info.value.start == 2

    def test_replace_decode(self):
        assert b"ok\x1b\xff".decode("gsm0338", "replace") == "ok?"

    def test_high_bytes_never_fail(self):
        assert b"a\x80".decode("gsm0338") == "a\ufffd"

    def test_ignore_encode(self):
        assert "a🦀{b".encode("gsm0338", "ignore") == b"a\x1b(b"

    def test_ignore_decode(self):
        assert b"a\x1b\xffb\x80\x1b".decode("gsm0338", "ignore") == "ab"

    def test_ignore_incremental_decoder(self):
        decoder = codecs.getincrementaldecoder("gsm0338")("ignore")

        assert decoder.decode(b"a\x1b") == "a"
        assert decoder.decode(b"e\x1b", final=True) == "€"

    def test_unknown_handler(self):
        with pytest.raises(ValueError):
            "abc".encode("gsm0338", "surrogateescape")
        with pytest.raises(ValueError):
            b"abc".decode("gsm0338", "backslashreplace")


class TestIncremental:
    """Tests for incremental codec objects."""

    def test_decoder_holds_back_split_escape(self):
        decoder = codecs.getincrementaldecoder("gsm0338")()

        assert decoder.decode(b"a\x1b") == "a"
        assert decoder.decode(b"e", final=True) == "€"

    def test_decoder_final_trailing_escape(self):
        decoder = codecs.getincrementaldecoder("gsm0338")("replace")

        assert decoder.decode(b"a\x1b", final=True) == "a?"

    def test_encoder(self):
        encoder = codecs.getincrementalencoder("gsm0338")()

        assert encoder.encode("{") + encoder.encode("}", final=True) == b"\x1b(\x1b)"
