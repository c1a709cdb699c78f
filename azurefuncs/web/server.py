# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""
Custom handler server

Creates the Flask application serving the function handlers under ``/api``.
One VersionResolver, and so one versions cache, is created per application.
"""

import typing as t

from flask import Flask, request

from azurefuncs_tools import AzureFuncsSettings, debug, load_settings, notice
from azurefuncs_tools.resolver import VersionResolver

RESOLVER_EXTENSION = 'azurefuncs.version_resolver'


def create_app(
    settings: t.Optional[AzureFuncsSettings] = None,
    resolver: t.Optional[VersionResolver] = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use, read from the environment when not given.
        resolver: Resolver for the version select handler, built from settings when not given.

    Raises:
        ConfigurationError: The settings do not describe a usable versions cache.
    """
    settings = settings or load_settings()

    app = Flask(__name__)
    app.config['AZUREFUNCS_SETTINGS'] = settings
    app.extensions[RESOLVER_EXTENSION] = resolver or VersionResolver.from_settings(settings)

    from azurefuncs.web.routes_misc import misc_bp
    from azurefuncs.web.routes_select import select_bp

    app.register_blueprint(select_bp, url_prefix='/api')
    app.register_blueprint(misc_bp, url_prefix='/api')

    @app.before_request
    def _log_request():
        notice(f'got a request {request.full_path.rstrip("?")}')

    debug(f'App created (versions source: {settings.VERSIONS_SOURCE})')
    return app


def run_server(app: Flask, host: str = '0.0.0.0', port: int = 9834) -> None:  # nosec
    """Serve the app with a thread per request"""
    notice(f'About to listen on {host}:{port}. Go to http://127.0.0.1:{port}/')
    app.run(host=host, port=port, threaded=True, use_reloader=False)
