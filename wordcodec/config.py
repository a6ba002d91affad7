# -*- coding: utf-8 -*-

from collections import defaultdict
from configparser import RawConfigParser
from typing import Optional

from typing_extensions import TypeAlias

Settings: TypeAlias = dict[str, dict[str, str]]


class Config:
    def __init__(self, filename: str) -> None:
        self.filename = filename

    def _read(self) -> RawConfigParser:
        config = RawConfigParser(allow_no_value=True)
        config.read(self.filename, encoding="utf-8")
        return config

    def load(self) -> Settings:
        config = self._read()
        settings: defaultdict = defaultdict(dict)
        for section in config.sections():
            for option, value in config.items(section):
                settings[section][option] = value
        return dict(settings)


def to_bool(s: str) -> bool:
    if s.lower() in ("false", "f", "no", "n", "off", "0", "none", ""):
        return False
    return True


def get_log_privacy(settings: Settings) -> bool:
    """
    Get whether payloads are redacted from logs when no command-line
    argument says otherwise. Privacy is on unless configured off.
    """
    private = settings.get("logging", {}).get("privacy")
    if not private:
        return True
    return to_bool(private)


def get_default_language(settings: Settings) -> str:
    """
    Get the BIP39 language whose word list is used when no word list file
    is given.
    """
    return settings.get("dictionary", {}).get("language") or "english"


def get_wordlist_path(settings: Settings) -> Optional[str]:
    """
    Get the configured word list file, if there is one.
    """
    return settings.get("dictionary", {}).get("wordlist") or None


def get_separator(settings: Settings) -> Optional[str]:
    """
    Get the configured phrase separator.

    ``None`` means "pick one to suit the language". The names "space" and
    "ideographic_space" stand for those characters.
    """
    separator = settings.get("phrase", {}).get("separator")
    if not separator:
        return None
    return {"space": " ", "ideographic_space": "\u3000"}.get(
        separator.lower(), separator
    )
