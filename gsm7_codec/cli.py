"""
Command Line Demo
=================
Encode or decode GSM 03.38 data from the terminal.

Usage:
    gsm7 "Hello {world} €!"
    gsm7 --strict "Hello 🦀 World"
    gsm7 --decode 48656c6c6f1b65
"""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import Gsm7Config
from .decoder import decode, decode_with_config
from .encoder import encode_with_config
from .exceptions import Gsm7Error
from .logging_config import setup_logging
from .measurement import encoded_len, is_gsm7_compatible

logger = structlog.get_logger(__name__)

DEMO_TEXT = "Hello {world} €!"
DEMO_UNSUPPORTED = "Hello 🦀 World"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gsm7",
        description="GSM 03.38 7-bit alphabet encoder/decoder (unpacked, one byte per septet)",
    )
    parser.add_argument("text", nargs="?", help="Text to encode")
    parser.add_argument("-d", "--decode", metavar="HEX", help="Hex string to decode")
    parser.add_argument("--strict", action="store_true", help="Fail on unmapped input")
    parser.add_argument(
        "--replacement", metavar="CHAR", default=None,
        help="Replacement character for unmapped input (non-strict)",
    )
    parser.add_argument(
        "--max-length", type=int, default=0, metavar="N",
        help="Maximum input length (0 = unbounded)",
    )
    parser.add_argument("--validate", action="store_true", help="Validate before decoding")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Gsm7Config:
    config = Gsm7Config(
        strict=args.strict,
        max_input_length=args.max_length,
        validate_input=args.validate,
    )
    if args.replacement is not None:
        config = config.with_replacement(args.replacement)
    return config


def show_encoding(text: str, config: Gsm7Config) -> None:
    print(f"Original: {text}")
    compatible = is_gsm7_compatible(text)
    print(f"GSM 7-bit compatible: {compatible}")
    print(f"Encoded length: {encoded_len(text) if compatible else 'n/a'} bytes")

    encoded = encode_with_config(text, config)
    print(f"Encoded: {encoded.hex()}")
    # The input limit counts characters; the encoded form may be longer
    print(f"Decoded: {decode_with_config(encoded, config.with_max_length(0))}")


def run_demo() -> None:
    show_encoding(DEMO_TEXT, Gsm7Config.default())

    replaced = encode_with_config(DEMO_UNSUPPORTED, Gsm7Config.lenient("?"))
    print(f"With replacement: {DEMO_UNSUPPORTED} -> {decode(replaced)}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, json_output=args.json_logs)

    try:
        config = build_config(args)
        if args.decode is not None:
            print(decode_with_config(bytes.fromhex(args.decode), config))
        elif args.text is not None:
            show_encoding(args.text, config)
        else:
            run_demo()
    except Gsm7Error as exc:
        logger.info("cli_codec_error", **exc.to_dict())
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0
