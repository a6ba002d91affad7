from argparse import Namespace
from datetime import datetime, timezone
from logging import (
    DEBUG,
    WARNING,
    Filter,
    Formatter,
    Handler,
    Logger,
    LogRecord,
    StreamHandler,
    getLogger,
)
from typing import IO, Literal, Optional

from attrs import Factory, define, field, frozen

REDACTED = "<redacted>"

# Pass as ``extra`` to mark a record whose arguments hold payload data
# (entropy, words) that must not reach the logs in privacy mode.
PRIVATE = {"private": True}

# Handlers installed by initialize_logger, by logger name.
_handlers: dict[str, Handler] = {}


def redact_private(record: LogRecord) -> None:
    """
    Redact private information in the given log record, in-place.

    Only records marked with ``PRIVATE`` are touched; their arguments are
    replaced while the message template is kept.
    """
    if not getattr(record, "private", False) or not record.args:
        return
    if isinstance(record.args, dict):
        record.args = {key: REDACTED for key in record.args}
    else:
        record.args = tuple(REDACTED for _ in record.args)


@frozen
class PrivacyFilter(Filter):
    """
    A stdlib logging filter which modifies log records in-place to redact
    sensitive information.
    """

    def filter(self, record: LogRecord) -> Literal[True]:
        redact_private(record)
        return True


class LogFormatter(Formatter):
    """
    Format the time component of records using ISO8601.
    """

    def formatTime(
        self, record: LogRecord, datefmt: Optional[str] = None
    ) -> str:
        return datetime.fromtimestamp(record.created, timezone.utc).isoformat()


@define
class LogPrivacy:
    """
    Represent the desired degree of privacy preserved by log events
    recorded by the system.

    :ivar logger: A logging object to which to propagate the privacy
        configuration.

    :ivar _explicit: Whether the current configuration was chosen by a user.

    :ivar _private: Whether records marked private are redacted.

    :ivar _filter: A logging filter which implements the log privacy behavior.
    """

    logger: Logger

    _explicit: bool = False
    _private: bool = False
    _filter: Filter = Factory(PrivacyFilter)

    def __attrs_post_init__(self) -> None:
        if self._private:
            self.logger.addFilter(self._filter)
        else:
            self.logger.removeFilter(self._filter)

    @property
    def private(self) -> bool:
        return self._private

    def integrate_privacy_configuration(
        self, explicit: bool, private: bool
    ) -> None:
        """
        Account for new information about how logging privacy should be
        configured.

        An implicit configuration never replaces an explicit one.

        :param explicit: Does this configuration represent an explicit choice
            by a user?

        :param private: Should the new privacy configuration be "private" or
            not ("exposed")?
        """
        if self._explicit and not explicit:
            return
        self._explicit = explicit
        if self._private != private:
            self._private = private
            if private:
                self.logger.addFilter(self._filter)
            else:
                self.logger.removeFilter(self._filter)


@frozen
class FileMode:
    """
    A logging mode where log records are written to an output stream.
    """

    outfile: IO[str]
    handler: Handler = field()

    @handler.default
    def _handler_default(self) -> StreamHandler:
        return StreamHandler(stream=self.outfile)


def initialize_logger(
    privacy: LogPrivacy, mode: FileMode, level: int = DEBUG
) -> None:
    fmt = "%(asctime)s %(levelname)s %(funcName)s %(message)s"
    handler = mode.handler
    handler.setFormatter(LogFormatter(fmt=fmt))

    logger = privacy.logger
    previous = _handlers.pop(logger.name, None)
    if previous is not None:
        logger.removeHandler(previous)
    logger.addHandler(handler)
    _handlers[logger.name] = handler
    logger.setLevel(level)
    logger.debug("Logging initialized")


def initialize_logger_from_args(
    args: Namespace, stdout: IO[str], stderr: IO[str], private: bool = True
) -> tuple[LogPrivacy, FileMode]:
    """
    Configure the root logger for a command-line run.

    ``private`` is the configured default; a ``--log-privacy`` or
    ``--no-log-privacy`` argument overrides it.
    """
    privacy = LogPrivacy(getLogger(), private=private)
    log_privacy = getattr(args, "log_privacy", None)
    if log_privacy is not None:
        privacy.integrate_privacy_configuration(
            explicit=True, private=log_privacy
        )

    if getattr(args, "debug", False):
        mode = FileMode(stdout)
        level = DEBUG
    else:
        mode = FileMode(stderr)
        level = WARNING

    initialize_logger(privacy, mode, level)

    return privacy, mode
