# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""Release version literals and their ordering"""

import re
import typing as t
from functools import total_ordering

import semantic_version

from azurefuncs_tools.errors import VersionParseError
from azurefuncs_tools.messages import debug

NUMBER = r'0|[1-9][0-9]*'
PRERELEASE = r'[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*'
# Go writes pre-releases without a separator, e.g. 1.17beta1
GO_PRERELEASE = r'[A-Za-z][0-9A-Za-z]*(?:\.[0-9A-Za-z]+)*'

VERSION_REGEX = re.compile(
    r'^(?P<major>{nb})(?:\.(?P<minor>{nb})(?:\.(?P<patch>{nb}))?)?'
    r'(?:-(?P<prerelease>{pre})|(?P<go_prerelease>{go_pre}))?$'.format(
        nb=NUMBER, pre=PRERELEASE, go_pre=GO_PRERELEASE
    )
)

# "beta10" -> "beta", "10"
IDENTIFIER_RUN_REGEX = re.compile(r'[0-9]+|[A-Za-z]+')


def split_prerelease(prerelease: t.Optional[str]) -> t.Tuple[str, ...]:
    """
    Split a pre-release tag into semver identifiers.

    Go style tags have no separators (``beta1``, ``rc10``), so alphanumeric runs are split
    to keep numeric parts comparable as numbers.
    """
    if not prerelease:
        return ()

    identifiers = []
    for part in prerelease.split('.'):
        for run in IDENTIFIER_RUN_REGEX.findall(part):
            identifiers.append(str(int(run)) if run.isdigit() else run)

    return tuple(identifiers)


@total_ordering
class Version:
    """
    A release version like ``1.16.2``, ``1.16``, ``1.17beta1`` or ``1.2.0-rc.1``

    Omitted minor and patch parts are zero, so ``1.16 == 1.16.0``.
    The literal it was parsed from is kept and used as its string form.
    """

    def __init__(self, literal: str) -> None:
        if not isinstance(literal, str):
            raise VersionParseError(f'Invalid version "{literal}"', literal=literal)

        self.literal = literal.strip()

        match = VERSION_REGEX.match(self.literal)
        if not match:
            raise VersionParseError(f'Invalid version "{literal}"', literal=literal)

        try:
            self._semver = semantic_version.Version(
                major=int(match.group('major')),
                minor=int(match.group('minor') or 0),
                patch=int(match.group('patch') or 0),
                prerelease=split_prerelease(
                    match.group('prerelease') or match.group('go_prerelease')
                ),
            )
        except ValueError as e:
            raise VersionParseError(f'Invalid version "{literal}": {e}', literal=literal)

    @property
    def semver(self) -> semantic_version.Version:
        return self._semver

    @property
    def major(self) -> int:
        return self._semver.major

    @property
    def minor(self) -> int:
        return self._semver.minor

    @property
    def patch(self) -> int:
        return self._semver.patch

    @property
    def prerelease(self) -> t.Tuple[str, ...]:
        return tuple(self._semver.prerelease or ())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self._semver == other._semver

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self._semver < other._semver

    def __hash__(self) -> int:
        return hash(self._semver)

    def __repr__(self) -> str:
        return 'Version("{}")'.format(self.literal)

    def __str__(self) -> str:
        return self.literal


def parse_version(literal: str) -> Version:
    return Version(literal)


def parse_versions_text(text: str) -> t.List[Version]:
    """
    Parse a plaintext list with one version per line.

    Blank lines and lines that are not versions are skipped.
    """
    versions = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue

        try:
            versions.append(Version(line))
        except VersionParseError:
            debug(f'Skipping unparsable line in the versions list: "{line}"')

    return versions
