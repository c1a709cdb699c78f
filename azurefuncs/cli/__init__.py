# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
from .core import initialize_cli, safe_cli

__all__ = [
    'initialize_cli',
    'safe_cli',
]
