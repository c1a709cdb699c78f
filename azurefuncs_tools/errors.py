# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0


import typing as t


class FatalError(RuntimeError):
    """Generic unrecoverable runtime error"""

    exit_code = 2

    def __init__(self, *args: t.Any, **kwargs: t.Any) -> None:
        super().__init__(*args)
        exit_code = kwargs.pop('exit_code', None)
        if exit_code:
            self.exit_code = exit_code


class ParseError(FatalError):
    """Malformed version or constraint literal"""

    def __init__(self, message: str, literal: t.Optional[str] = None) -> None:
        super().__init__(message)
        self.literal = literal


class VersionParseError(ParseError):
    pass


class ConstraintParseError(ParseError):
    pass


class ConfigurationError(FatalError):
    exit_code = 3


class VersionNotFoundError(FatalError):
    exit_code = 4


class WarningAsExceptionError(FatalError):
    pass
