# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import logging as lib_logging

LOGGING_NAMESPACE = __package__
HINT_LEVEL = 15


def get_logger() -> lib_logging.Logger:
    """
    Get logger for azurefuncs.

    Use this instead of `logging.getLogger(__package__)` to get the universal logger for both
    the web handlers and the version tools
    """
    return lib_logging.getLogger(LOGGING_NAMESPACE)


from azurefuncs_tools.environment import AzureFuncsSettings, load_settings  # noqa: E402
from azurefuncs_tools.logging import setup_logging  # noqa: E402
from azurefuncs_tools.messages import (  # noqa: E402
    debug,
    error,
    hint,
    notice,
    warn,
)

__all__ = [
    'AzureFuncsSettings',
    'debug',
    'error',
    'get_logger',
    'hint',
    'load_settings',
    'notice',
    'setup_logging',
    'warn',
]
