# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import logging
import re

import pytest

from azurefuncs_tools import (
    HINT_LEVEL,
    LOGGING_NAMESPACE,
    debug,
    error,
    get_logger,
    hint,
    notice,
    setup_logging,
    warn,
)
from azurefuncs_tools.environment import AzureFuncsSettings
from azurefuncs_tools.errors import WarningAsExceptionError
from azurefuncs_tools.logging import LevelRangeFilter


def test_levels_go_to_stdout_and_stderr(capsys):
    setup_logging(settings=AzureFuncsSettings(DEBUG_MODE=True, NO_COLORS=True))

    debug('a debug')
    hint('a hint')
    notice('a notice')
    warn('a warning')
    error('an error')

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ['DEBUG: a debug', 'HINT: a hint', 'NOTICE: a notice']
    assert captured.err.splitlines() == ['WARNING: a warning', 'ERROR: an error']


def test_default_level_is_hint(capsys):
    setup_logging(settings=AzureFuncsSettings(NO_COLORS=True))

    debug('hidden')
    hint('shown')

    assert get_logger().level == HINT_LEVEL
    assert capsys.readouterr().out == 'HINT: shown\n'


def test_no_hints(capsys):
    setup_logging(settings=AzureFuncsSettings(NO_HINTS=True, NO_COLORS=True))

    hint('hidden')
    notice('shown %s', 'with args')

    assert capsys.readouterr().out == 'NOTICE: shown with args\n'


def test_warnings_as_errors():
    setup_logging(warnings_as_errors=True, settings=AzureFuncsSettings(NO_COLORS=True))

    with pytest.raises(WarningAsExceptionError):
        warn('careful')


def test_caplog_sees_messages(caplog):
    with caplog.at_level(logging.WARNING, logger=LOGGING_NAMESPACE):
        warn('something odd')

    assert caplog.records[0].message == 'something odd'


def test_timestamps(capsys):
    setup_logging(settings=AzureFuncsSettings(NO_COLORS=True), timestamps=True)

    notice('listening')

    line = capsys.readouterr().out.rstrip('\n')
    assert re.match(r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} NOTICE: listening$', line)


@pytest.mark.parametrize(
    ('low', 'high', 'passed'),
    [
        (logging.NOTSET, logging.WARNING, [logging.DEBUG, HINT_LEVEL, logging.INFO]),
        (logging.WARNING, None, [logging.WARNING, logging.ERROR, logging.CRITICAL]),
    ],
)
def test_level_range_filter(low, high, passed):
    level_filter = LevelRangeFilter(low, high)
    levels = [
        logging.DEBUG,
        HINT_LEVEL,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    ]

    result = [
        level
        for level in levels
        if level_filter.filter(logging.LogRecord('test', level, __file__, 1, 'msg', None, None))
    ]

    assert result == passed


def test_warnings_as_errors_keeps_other_levels(capsys):
    setup_logging(warnings_as_errors=True, settings=AzureFuncsSettings(NO_COLORS=True))

    error('still logged')

    assert capsys.readouterr().err == 'ERROR: still logged\n'
