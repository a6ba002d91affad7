"""Encode bytes as checksummed word sequences drawn from any dictionary."""

import os
from importlib.metadata import PackageNotFoundError, version

from wordcodec.config import Config

__author__ = "The wordcodec developers"
__url__ = "https://github.com/wordcodec/wordcodec"
__license__ = "GPLv3"


pkgdir = os.path.dirname(os.path.realpath(__file__))
pkgdir_resources = os.path.join(pkgdir, "resources")


settings = Config(os.path.join(pkgdir_resources, "config.txt")).load()


for envvar, value in os.environ.items():
    if envvar.startswith("WORDCODEC_"):
        words = envvar.split("_")
        if len(words) >= 3:
            section = words[1].lower()
            option = "_".join(words[2:]).lower()
            try:
                settings[section][option] = value
            except KeyError:
                settings[section] = {option: value}


try:
    APP_NAME = settings["application"]["name"]
except KeyError:
    APP_NAME = "wordcodec"


try:
    __version__ = version("wordcodec")
except PackageNotFoundError:
    __version__ = "Unknown"
