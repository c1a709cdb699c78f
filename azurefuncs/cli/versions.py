# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import click

from azurefuncs_tools import load_settings
from azurefuncs_tools.client_errors import VersionsFetchError
from azurefuncs_tools.constraints import DEFAULT_CONSTRAINT
from azurefuncs_tools.errors import FatalError, VersionNotFoundError
from azurefuncs_tools.resolver import VersionResolver

SOURCE_OPTION = click.option(
    '--source',
    default=None,
    help='URL of the list of versions. [default: AZUREFUNCS_VERSIONS_SOURCE or goreleases]',
)


def _resolver(source):
    overrides = {'VERSIONS_SOURCE': source} if source else {}
    return VersionResolver.from_settings(load_settings(**overrides))


def init_resolve():
    @click.command()
    @click.option('--constraint', '-c', default=DEFAULT_CONSTRAINT, help='Version constraint.')
    @click.option(
        '--candidates',
        default=None,
        help='Comma separated versions to pick from instead of the list of versions.',
    )
    @click.option(
        '--exclusive',
        is_flag=True,
        default=False,
        help=(
            'Do not check the list of versions when no candidate matches. '
            'Only matters with AZUREFUNCS_CANDIDATES_FALLBACK=unless-exclusive.'
        ),
    )
    @SOURCE_OPTION
    def resolve(constraint, candidates, exclusive, source):
        """
        Print the greatest version matching the constraint.
        """
        try:
            result = _resolver(source).resolve(constraint, candidates, exclusive=exclusive)
        except VersionsFetchError as e:
            raise FatalError(str(e))

        if result is None:
            raise VersionNotFoundError(f'No version matching "{constraint}" found')

        print(result)

    return resolve


def init_versions():
    @click.command()
    @SOURCE_OPTION
    def versions(source):
        """
        Print the list of versions, one per line.
        """
        try:
            fetched = _resolver(source).cache.get_versions()
        except VersionsFetchError as e:
            raise FatalError(str(e))

        for version in fetched:
            print(version)

    return versions
