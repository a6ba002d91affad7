from logging import getLogger

import pytest

from wordcodec.dictionary import Dictionary
from wordcodec.wordlists import bip39_dictionary

FOO_BAR_WORDS = ["foo", "bar", "fizz", "buzz"]

FRUIT_WORDS = [
    "🍇", "🍈", "🍉", "🍊", "🍋", "🍌", "🍍", "🥭", "🍎", "🍐", "🍑", "🍒", "🍓", "🫐", "🥝", "🍅", "🫒", "🥥", "🥑", "🍆", "🥔", "🥕", "🌽", "🌶️", "🫑", "🥒", "🥬", "🥦", "🧄", "🧅", "🥜", "🫘"
]


@pytest.fixture(scope="session")
def bip39():
    return bip39_dictionary("english")


@pytest.fixture()
def foo_bar():
    return Dictionary(FOO_BAR_WORDS)


@pytest.fixture()
def fruit():
    return Dictionary(FRUIT_WORDS)


@pytest.fixture()
def root_logger():
    logger = getLogger()
    handlers = list(logger.handlers)
    filters = list(logger.filters)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.filters[:] = filters
    logger.setLevel(level)
