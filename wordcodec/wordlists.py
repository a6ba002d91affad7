# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from mnemonic import Mnemonic

from wordcodec.dictionary import Dictionary

logger = logging.getLogger(__name__)


def list_languages() -> list[str]:
    return sorted(Mnemonic.list_languages())


def bip39_wordlist(language: str = "english") -> list[str]:
    lang = language.lower()
    if lang not in Mnemonic.list_languages():
        raise ValueError(f"Invalid language: {lang}")
    return list(Mnemonic(language=lang).wordlist)


@lru_cache(maxsize=None)
def _bip39_dictionary(language: str) -> Dictionary:
    return Dictionary(bip39_wordlist(language))


def bip39_dictionary(language: str = "english") -> Dictionary:
    """
    Return the 2048-word BIP39 list for ``language`` as a ``Dictionary``.

    Dictionaries are immutable, so one instance is shared per language.
    """
    return _bip39_dictionary(language.lower())


def load_wordlist(path: Union[str, Path]) -> list[str]:
    """
    Read a word list from a UTF-8 text file, one word per line.

    Empty lines are skipped. Only line endings are stripped; any other
    whitespace, including a whitespace-only line, is left in place and
    rejected when the list is turned into a ``Dictionary``. There is no
    comment syntax, since any text may be a word.
    """
    words = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.rstrip("\r\n")
            if not word:
                continue
            words.append(word)
    logger.debug("Loaded %i words from %s", len(words), path)
    return words


def load_dictionary(path: Union[str, Path]) -> Dictionary:
    return Dictionary(load_wordlist(path))
