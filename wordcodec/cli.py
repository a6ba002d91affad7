#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import binascii
import logging
import sys
from typing import IO, Optional, Sequence, Union

from wordcodec import APP_NAME
from wordcodec import __doc__ as description
from wordcodec import __version__, settings
from wordcodec.config import (
    get_default_language,
    get_log_privacy,
    get_separator,
    get_wordlist_path,
)
from wordcodec.dictionary import Dictionary
from wordcodec.errors import WordcodecError
from wordcodec.logging import PRIVATE, initialize_logger_from_args
from wordcodec.phrase import default_separator, split_phrase, to_phrase
from wordcodec.wordlists import (
    bip39_dictionary,
    list_languages,
    load_dictionary,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=description)
    parser.add_argument(
        "--debug", action="store_true", help="Print debug messages to STDOUT."
    )
    parser.add_argument(
        "--log-privacy",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Redact payloads from log messages (on unless configured off).",
    )
    parser.add_argument(
        "-l",
        "--language",
        default=get_default_language(settings),
        help="BIP39 word list to use as the dictionary.",
    )
    parser.add_argument(
        "-w",
        "--wordlist",
        default=get_wordlist_path(settings),
        help="File with one dictionary word per line; overrides --language.",
    )
    parser.add_argument(
        "-s",
        "--separator",
        default=get_separator(settings),
        help="String placed between words of an encoded phrase.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version="%(prog)s " + __version__
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode data as words.")
    encode.add_argument(
        "data",
        nargs="?",
        help="Hex-encoded data. Raw bytes are read from STDIN if omitted.",
    )
    encode.add_argument(
        "-t", "--text", action="store_true", help="Treat DATA as UTF-8 text."
    )

    decode = subparsers.add_parser("decode", help="Decode words into data.")
    decode.add_argument(
        "words",
        nargs="*",
        help="Words of the phrase. The phrase is read from STDIN if omitted.",
    )
    decode.add_argument(
        "-t",
        "--text",
        action="store_true",
        help="Print the data as UTF-8 text instead of hex.",
    )

    subparsers.add_parser("languages", help="List the BIP39 languages.")
    return parser


def load_cli_dictionary(args: argparse.Namespace) -> Dictionary:
    if args.wordlist:
        return load_dictionary(args.wordlist)
    try:
        return bip39_dictionary(args.language)
    except ValueError as e:
        raise WordcodecError(str(e)) from e


def read_data(args: argparse.Namespace, stdin: IO) -> bytes:
    if args.data is None:
        return stdin.buffer.read()
    if args.text:
        return args.data.encode("utf-8")
    try:
        return binascii.unhexlify(args.data)
    except binascii.Error as e:
        raise WordcodecError(f"Invalid hex data: {e}") from e


def run(args: argparse.Namespace, stdin: IO, stdout: IO) -> None:
    if args.command == "languages":
        for language in list_languages():
            print(language, file=stdout)
        return

    dictionary = load_cli_dictionary(args)
    logging.debug(
        "Using a %i-word dictionary (%i bits per word)",
        len(dictionary),
        dictionary.bits_per_word,
    )

    if args.command == "encode":
        separator = args.separator
        if separator is None:
            separator = default_separator(
                "english" if args.wordlist else args.language
            )
        phrase = to_phrase(read_data(args, stdin), dictionary, separator)
        logging.debug("Encoded phrase: %s", phrase, extra=PRIVATE)
        print(phrase, file=stdout)
    else:
        words = args.words or split_phrase(stdin.read())
        data = dictionary.decode(words)
        logging.debug("Decoded data: %s", data.hex(), extra=PRIVATE)
        if args.text:
            print(data.decode("utf-8", errors="replace"), file=stdout)
        else:
            print(data.hex(), file=stdout)


def main(argv: Optional[Sequence[str]] = None) -> Union[int, str]:
    args = build_parser().parse_args(argv)
    initialize_logger_from_args(
        args, sys.stdout, sys.stderr, get_log_privacy(settings)
    )

    try:
        run(args, sys.stdin, sys.stdout)
    except WordcodecError as e:
        logging.debug("%s failed: %s", args.command, e)
        return f"ERROR: {e}"
    except OSError as e:
        logging.debug("Could not read word list: %s", e)
        return f"ERROR: {e}"
    return 0


if __name__ == "__main__":
    sys.exit(main())
