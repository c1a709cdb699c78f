# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import click

from azurefuncs.web import create_app, run_server
from azurefuncs_tools import load_settings, setup_logging


def init_serve():
    @click.command()
    @click.option('--host', default='0.0.0.0', help='Interface to listen on.')  # nosec
    @click.option(
        '--port',
        type=int,
        default=None,
        help='Port to listen on. [default: FUNCTIONS_CUSTOMHANDLER_PORT or 9834]',
    )
    def serve(host, port):
        """
        Serve the function handlers.

        Warnings logged while handling requests never abort them, -W is ignored here.
        """
        settings = load_settings()
        setup_logging(settings=settings, timestamps=True)

        app = create_app(settings)
        run_server(app, host=host, port=port or settings.PORT)

    return serve
