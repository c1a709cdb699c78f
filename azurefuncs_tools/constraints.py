# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""
Version constraints

Expressions use the npm range syntax of ``semantic_version.NpmSpec`` with a few additions::

    1.x                     any 1.y.z release
    >=1.15, <1.17           commas separate terms like spaces do
    ~1.16.2 || ^2           1.16.z from 1.16.2, or any 2.y.z release
    1.14 - 1.16             1.14.0 up to any 1.16.z release
    >=1.17beta1             Go pre-releases, read as 1.17.0-beta.1

Pre-release versions only match a group naming a pre-release of the same
``major.minor.patch``, so ``1.x`` never picks ``1.17beta1``.
"""

import re
import typing as t

import semantic_version

from azurefuncs_tools.errors import ConstraintParseError
from azurefuncs_tools.versions import GO_PRERELEASE, NUMBER, PRERELEASE, Version, split_prerelease

DEFAULT_CONSTRAINT = '1.x'

WILDCARDS = ('x', 'X', '*')

PARTIAL_REGEX = re.compile(
    r'^(?P<major>{part})(?:\.(?P<minor>{part})(?:\.(?P<patch>{part}))?)?'
    r'(?:-(?P<prerelease>{pre})|(?P<go_prerelease>{go_pre}))?$'.format(
        part=f'{NUMBER}|[xX*]', pre=PRERELEASE, go_pre=GO_PRERELEASE
    )
)
TERM_REGEX = re.compile(r'\s*(?P<op>[<>=~^]*)\s*(?P<version>[^\s<>=~^,]+)\s*')
HYPHEN_RANGE_REGEX = re.compile(r'^(?P<low>[^\s<>=~^,]+)\s+-\s+(?P<high>[^\s<>=~^,]+)$')

# npm operators, and == as an alias of =
OPERATORS = {
    '': '',
    '=': '=',
    '==': '=',
    '<': '<',
    '<=': '<=',
    '>': '>',
    '>=': '>=',
    '~': '~',
    '^': '^',
}


def _invalid(expression: str, reason: str) -> ConstraintParseError:
    return ConstraintParseError(f'Invalid constraint "{expression}": {reason}', literal=expression)


def npm_partial(text: str, expression: str) -> str:
    """
    Rewrite a possibly partial version the way NpmSpec reads it.

    Pre-releases need all three numbers there, so ``1.17beta1`` becomes ``1.17.0-beta.1``.
    """
    match = PARTIAL_REGEX.match(text)
    if not match:
        raise _invalid(expression, f'"{text}" is not a version')

    parts = [match.group(name) for name in ('major', 'minor', 'patch')]
    parts = [part for part in parts if part is not None]

    wildcard = False
    for part in parts:
        if part in WILDCARDS:
            wildcard = True
        elif wildcard:
            raise _invalid(expression, f'"{text}" has a version part after a wildcard')

    prerelease = split_prerelease(match.group('prerelease') or match.group('go_prerelease'))
    if not prerelease:
        return text

    if wildcard:
        raise _invalid(expression, f'"{text}" has a pre-release after a wildcard')

    numbers = parts + ['0'] * (3 - len(parts))
    return '{}-{}'.format('.'.join(numbers), '.'.join(prerelease))


def npm_alternative(text: str, expression: str) -> str:
    text = text.strip()
    if not text:
        raise _invalid(expression, 'empty alternative')

    hyphen_range = HYPHEN_RANGE_REGEX.match(text)
    if hyphen_range:
        return '{} - {}'.format(
            npm_partial(hyphen_range.group('low'), expression),
            npm_partial(hyphen_range.group('high'), expression),
        )

    blocks = []
    for chunk in text.split(','):
        chunk = chunk.strip()
        if not chunk:
            raise _invalid(expression, 'empty term')

        position = 0
        while position < len(chunk):
            match = TERM_REGEX.match(chunk, position)
            if not match:
                raise _invalid(expression, f'unexpected "{chunk[position:]}"')

            operator = match.group('op')
            if operator not in OPERATORS:
                raise _invalid(expression, f'unknown operator "{operator}"')

            blocks.append(OPERATORS[operator] + npm_partial(match.group('version'), expression))
            position = match.end()

    return ' '.join(blocks)


class Constraint:
    def __init__(self, text: str, spec: semantic_version.NpmSpec) -> None:
        self.text = text
        self.spec = spec

    def check(self, version: t.Union[Version, str]) -> bool:
        """True if the version satisfies the constraint"""
        if not isinstance(version, Version):
            version = Version(version)

        return self.spec.match(version.semver)

    def __repr__(self) -> str:
        return 'Constraint("{}")'.format(self.text)

    def __str__(self) -> str:
        return self.text


def parse_constraint(expression: t.Optional[str] = None) -> Constraint:
    """
    Parse a constraint expression.

    An empty expression means ``1.x``.
    """
    expression = (expression or '').strip() or DEFAULT_CONSTRAINT

    npm_expression = ' || '.join(
        npm_alternative(alternative, expression) for alternative in expression.split('||')
    )
    try:
        spec = semantic_version.NpmSpec(npm_expression)
    except ValueError as e:
        raise _invalid(expression, str(e))

    return Constraint(expression, spec)
