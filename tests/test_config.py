# -*- coding: utf-8 -*-

import os

import pytest

from wordcodec.config import (
    Config,
    get_default_language,
    get_log_privacy,
    get_separator,
    get_wordlist_path,
)


def test_config_load(tmpdir):
    config = Config(os.path.join(str(tmpdir), "test_load.ini"))
    with open(config.filename, "w") as f:
        f.write("[dictionary]\nlanguage = spanish\nwordlist =\n\n")
    assert config.load() == {
        "dictionary": {"language": "spanish", "wordlist": ""}
    }


def test_config_load_utf8(tmpdir):
    config = Config(os.path.join(str(tmpdir), "test_load_utf8.ini"))
    with open(config.filename, "w", encoding="utf-8") as f:
        f.write("[phrase]\nseparator = 🍇\n")
    assert config.load() == {"phrase": {"separator": "🍇"}}


def test_config_load_missing_file(tmpdir):
    config = Config(os.path.join(str(tmpdir), "missing.ini"))
    assert config.load() == {}


@pytest.mark.parametrize(
    "settings, expected",
    [
        ({}, True),
        ({"logging": {"privacy": ""}}, True),
        ({"logging": {"privacy": "true"}}, True),
        ({"logging": {"privacy": "false"}}, False),
        ({"logging": {"privacy": "Off"}}, False),
        ({"logging": {"privacy": "0"}}, False),
    ],
)
def test_get_log_privacy(settings, expected):
    assert get_log_privacy(settings) is expected


@pytest.mark.parametrize(
    "settings, expected",
    [
        ({}, "english"),
        ({"dictionary": {"language": ""}}, "english"),
        ({"dictionary": {"language": "czech"}}, "czech"),
    ],
)
def test_get_default_language(settings, expected):
    assert get_default_language(settings) == expected


@pytest.mark.parametrize(
    "settings, expected",
    [
        ({}, None),
        ({"dictionary": {"wordlist": ""}}, None),
        ({"dictionary": {"wordlist": "/tmp/words.txt"}}, "/tmp/words.txt"),
    ],
)
def test_get_wordlist_path(settings, expected):
    assert get_wordlist_path(settings) == expected


@pytest.mark.parametrize(
    "settings, expected",
    [
        ({}, None),
        ({"phrase": {"separator": ""}}, None),
        ({"phrase": {"separator": "space"}}, " "),
        ({"phrase": {"separator": "ideographic_space"}}, "\u3000"),
        ({"phrase": {"separator": "-"}}, "-"),
    ],
)
def test_get_separator(settings, expected):
    assert get_separator(settings) == expected
