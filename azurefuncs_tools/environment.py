# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""
This module contains utility functions for working with environment variables.
"""

import enum
import typing as t

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_core.core_schema import ValidationInfo, ValidatorFunctionWrapHandler
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from azurefuncs_tools.errors import ConfigurationError

DEFAULT_VERSIONS_SOURCE = (
    'https://raw.githubusercontent.com/WillAbides/goreleases/main/versions.txt'
)
DEFAULT_VERSIONS_MAX_AGE = 15 * 60
DEFAULT_PORT = 9834


class FallbackPolicy(str, enum.Enum):
    """When explicit candidates are given but none matches, whether to look at the cached list"""

    NEVER = 'never'
    UNLESS_EXCLUSIVE = 'unless-exclusive'


def _env_to_bool(value: str) -> bool:
    """Returns True if environment variable is set to 1, t, y, yes, true, or False otherwise"""

    return value.lower() in {'1', 't', 'true', 'y', 'yes'}


class AzureFuncsSettings(BaseSettings):
    """
    azurefuncs settings.

    All settings are read from the environment only.
    For fields with aliases, the first alias is the recommended one.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        populate_by_name=True,
        env_prefix='AZUREFUNCS_',
    )

    # LOGGING

    # by default log-level is hint(15)
    DEBUG_MODE: bool = Field(False, description='Enable debug mode.')  # log-level: debug(10)

    NO_HINTS: bool = Field(
        False, description='Disable hints in the output.'
    )  # log-level: notice/info(20)

    NO_COLORS: bool = Field(False, description='Disable colored output.')  # with colorama or not

    # SERVER

    VERSION: str = Field('dev', description='Version reported by the ping handler.')

    PORT: int = Field(
        default=DEFAULT_PORT,
        gt=0,
        lt=65536,
        validation_alias=AliasChoices('FUNCTIONS_CUSTOMHANDLER_PORT', 'AZUREFUNCS_PORT'),
        description="""
            Port the custom handler listens on.

            Aliases:

            - ``FUNCTIONS_CUSTOMHANDLER_PORT`` (set by the functions host)
            - ``AZUREFUNCS_PORT``
        """,
    )

    ENABLE_ENV_ENDPOINT: bool = Field(
        False,
        description='Serve /api/env, which dumps the process environment.',
    )

    # VERSIONS

    VERSIONS_SOURCE: str = Field(
        DEFAULT_VERSIONS_SOURCE,
        description='URL of the plaintext list of versions, one version per line.',
    )

    VERSIONS_MAX_AGE: float = Field(
        DEFAULT_VERSIONS_MAX_AGE,
        ge=0,
        description='Seconds before the cached list of versions is fetched again.',
    )

    FETCH_TIMEOUT: t.Optional[float] = Field(
        None,
        gt=0,
        description="""
            | Timeout for fetching the list of versions in seconds.
            | If not set, separate connect and read timeouts are used.
        """,
    )

    CACHE_WAIT_TIMEOUT: t.Optional[float] = Field(
        None,
        gt=0,
        description="""
            | Seconds a request waits for another request's refresh to finish.
            | If not set, requests wait until the refresh finishes.
        """,
    )

    CANDIDATES_FALLBACK: FallbackPolicy = Field(
        FallbackPolicy.NEVER,
        description="""
            | What to do when none of the explicit candidates match.
            | ``never``: never check the cached list when candidates are given.
            | ``unless-exclusive``: check the cached list unless ``exclusive`` is given.
        """,
    )

    SERVE_STALE: bool = Field(
        False,
        description='Serve the previously fetched list when refreshing it fails.',
    )

    @field_validator('*', mode='wrap')
    @classmethod
    def parse_env_bool(
        cls, v: t.Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> t.Any:
        field = cls.model_fields.get(info.field_name)

        if field.annotation is bool and isinstance(v, str):
            return _env_to_bool(v)

        if v == '' and field.annotation == t.Optional[float]:
            return None

        return handler(v)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: t.Type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> t.Tuple[PydanticBaseSettingsSource, ...]:
        # explicit arguments win, then the environment
        return (init_settings, env_settings)


def load_settings(**overrides: t.Any) -> AzureFuncsSettings:
    """Read settings from the environment, reporting invalid values as ConfigurationError"""
    try:
        return AzureFuncsSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f'Invalid configuration:\n{e}')
