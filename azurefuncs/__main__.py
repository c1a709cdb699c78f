# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
from azurefuncs.cli import safe_cli


def main():
    safe_cli()


if __name__ == '__main__':
    main()
