# -*- coding: utf-8 -*-


class WordcodecError(Exception):
    pass


class DictionaryError(WordcodecError, ValueError):
    pass


class TooFewWordsError(DictionaryError):
    pass


class IncompleteDictionaryError(DictionaryError):
    pass


class UntrimmedWordError(DictionaryError):
    pass


class EmptyWordError(DictionaryError):
    pass


class DuplicateWordError(DictionaryError):
    pass


class DecodeError(WordcodecError, ValueError):
    pass


class EmptyMnemonicError(DecodeError):
    pass


class UnknownWordError(DecodeError):
    def __init__(self, word: str, position: int = 0) -> None:
        super().__init__(f"Unknown word at position {position}: {word!r}")
        self.word = word
        self.position = position


class UnknownIndexError(DecodeError):
    pass


class InvalidTailError(DecodeError):
    pass


class ChecksumMismatchError(DecodeError):
    pass
