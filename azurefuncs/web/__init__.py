# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
from .server import create_app, run_server

__all__ = [
    'create_app',
    'run_server',
]
