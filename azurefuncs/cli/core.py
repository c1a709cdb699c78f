# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import sys
import typing as t

import click

from azurefuncs_tools import error, setup_logging
from azurefuncs_tools.__version__ import __version__ as azurefuncs_version
from azurefuncs_tools.errors import FatalError, WarningAsExceptionError

from .serve import init_serve
from .versions import init_resolve, init_versions

DEFAULT_SETTINGS: t.Dict[str, t.Any] = {
    'help_option_names': ['-h', '--help'],
    'show_default': True,
}


def initialize_cli():
    """
    Initialize the CLI.
    """

    @click.group(context_settings=DEFAULT_SETTINGS)
    @click.option(
        '--warnings-as-errors',
        '-W',
        is_flag=True,
        default=False,
        help='Treat warnings as errors.',
    )
    def cli(warnings_as_errors):
        setup_logging(warnings_as_errors)

    @cli.command()
    def version():
        """
        Print the version of azurefuncs.
        """
        print(azurefuncs_version)

    cli.add_command(init_serve())
    cli.add_command(init_resolve())
    cli.add_command(init_versions())

    return cli


def safe_cli():
    """
    CLI entry point with error handling.
    """
    try:
        cli = initialize_cli()
        cli()
    except WarningAsExceptionError as e:
        error(str(e))
        sys.exit(1)
    except FatalError as e:
        error(str(e))
        sys.exit(e.exit_code)
