# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""Console logging: records below WARNING go to stdout, the rest to stderr"""

import logging
import sys
import typing as t

from colorama import Fore, Style

from azurefuncs_tools import HINT_LEVEL, get_logger
from azurefuncs_tools.environment import AzureFuncsSettings, load_settings
from azurefuncs_tools.errors import WarningAsExceptionError

TIME_FORMAT = '%Y-%m-%d %H:%M:%S'

LEVEL_STYLES: t.Dict[int, t.Tuple[str, str]] = {
    logging.DEBUG: ('DEBUG', Fore.LIGHTBLACK_EX),
    HINT_LEVEL: ('HINT', Fore.CYAN),
    logging.INFO: ('NOTICE', Fore.GREEN),
    logging.WARNING: ('WARNING', Fore.YELLOW),
    logging.ERROR: ('ERROR', Fore.RED),
    logging.CRITICAL: ('FATAL', Fore.RED + Style.BRIGHT),
}


class LevelRangeFilter(logging.Filter):
    """Pass records with ``low <= level < high``"""

    def __init__(self, low: int = logging.NOTSET, high: t.Optional[int] = None) -> None:
        super().__init__()
        self.low = low
        self.high = high

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno < self.low:
            return False

        return self.high is None or record.levelno < self.high


class WarningsAsErrorsFilter(logging.Filter):
    """
    Treat warnings as errors with exception when -W flag is passed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == logging.WARNING:
            raise WarningAsExceptionError(record.getMessage())

        return True


class ConsoleFormatter(logging.Formatter):
    """
    ``PREFIX: message`` lines, coloured when both output streams are terminals

    -  10 -> DEBUG
    -  15 -> HINT (custom level, default)
    -  20 -> NOTICE
    -  30 -> WARNING
    -  40 -> ERROR
    -  50 -> FATAL

    With ``timestamps`` every line starts with the local time.
    """

    def __init__(self, colored: bool = True, timestamps: bool = False) -> None:
        fmt = '%(levelprefix)s: %(message)s'
        if timestamps:
            fmt = '%(asctime)s ' + fmt

        super().__init__(fmt=fmt, datefmt=TIME_FORMAT)
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        prefix, color = LEVEL_STYLES.get(record.levelno, (record.levelname, ''))
        record.levelprefix = prefix

        line = super().format(record)
        if self.colored and color and sys.stdout.isatty() and sys.stderr.isatty():
            return f'{color}{line}{Style.RESET_ALL}'

        return line


def setup_logging(
    warnings_as_errors: bool = False,
    settings: t.Optional[AzureFuncsSettings] = None,
    timestamps: bool = False,
) -> None:
    """setup logger for azurefuncs"""
    settings = settings or load_settings()
    logger = get_logger()

    if settings.DEBUG_MODE:
        logger.setLevel(logging.DEBUG)
    elif settings.NO_HINTS:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(HINT_LEVEL)

    # cleanup first
    logger.handlers.clear()

    formatter = ConsoleFormatter(colored=not settings.NO_COLORS, timestamps=timestamps)
    streams = (
        (sys.stdout, LevelRangeFilter(high=logging.WARNING)),
        (sys.stderr, LevelRangeFilter(low=logging.WARNING)),
    )
    for stream, level_filter in streams:
        handler = logging.StreamHandler(stream)
        handler.addFilter(level_filter)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if warnings_as_errors:
        logger.handlers[-1].addFilter(WarningsAsErrorsFilter())

    logger.propagate = False  # ends here, don't propagate to root logger
