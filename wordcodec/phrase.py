import re

from wordcodec.dictionary import Dictionary

_SEPARATORS = re.compile("[\\s\u3000]+")


def default_separator(language: str = "english") -> str:
    return "\u3000" if language.lower() == "japanese" else " "


def split_phrase(phrase: str) -> list[str]:
    return [word for word in _SEPARATORS.split(phrase) if word]


def to_phrase(
    data: bytes, dictionary: Dictionary, separator: str = " "
) -> str:
    return separator.join(dictionary.encode(data))


def from_phrase(phrase: str, dictionary: Dictionary) -> bytes:
    return dictionary.decode(split_phrase(phrase))
