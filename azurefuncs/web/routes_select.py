# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""
Version select handler

GET /api/goversion_select?constraint=1.x&candidates=1.15.2,1.16&exclusive

Responds with the greatest matching version as plain text.
"""

from http import HTTPStatus

from flask import Blueprint, Response, current_app, request

from azurefuncs_tools import error, hint
from azurefuncs_tools.client_errors import VersionsFetchError
from azurefuncs_tools.errors import ConstraintParseError, VersionParseError
from azurefuncs_tools.resolver import VersionResolver

from .server import RESOLVER_EXTENSION

select_bp = Blueprint('select', __name__)


def text_response(body: str, status: int = HTTPStatus.OK) -> Response:
    return Response(body + '\n', status=status, mimetype='text/plain')


def _resolver() -> VersionResolver:
    return current_app.extensions[RESOLVER_EXTENSION]


@select_bp.route('/goversion_select')
def goversion_select():
    args = request.args

    try:
        result = _resolver().resolve(
            constraint=args.get('constraint', ''),
            candidates=args.get('candidates', ''),
            exclusive='exclusive' in args,
        )
    except ConstraintParseError as e:
        hint(str(e))
        return text_response('invalid constraint', HTTPStatus.BAD_REQUEST)
    except VersionParseError as e:
        hint(str(e))
        return text_response(f'invalid version "{e.literal}"', HTTPStatus.BAD_REQUEST)
    except VersionsFetchError as e:
        error(str(e))
        return text_response('failed to fetch versions', HTTPStatus.INTERNAL_SERVER_ERROR)

    if result is None:
        return text_response('no matching version found', HTTPStatus.NOT_FOUND)

    return text_response(str(result))
