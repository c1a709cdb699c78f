# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
import typing as t

import requests

from azurefuncs_tools.cache import VersionCache
from azurefuncs_tools.client_errors import VersionsFetchError
from azurefuncs_tools.constraints import Constraint, parse_constraint
from azurefuncs_tools.environment import AzureFuncsSettings, FallbackPolicy
from azurefuncs_tools.errors import VersionParseError
from azurefuncs_tools.messages import debug, warn
from azurefuncs_tools.versions import Version


def max_match(constraint: Constraint, versions: t.Iterable[Version]) -> t.Optional[Version]:
    """Greatest version satisfying the constraint, or None if there is none"""
    result: t.Optional[Version] = None
    for version in versions:
        if not constraint.check(version):
            continue

        if result is None or version > result:
            result = version

    return result


def parse_candidates(candidates: str) -> t.List[Version]:
    """Parse a comma separated list of versions"""
    versions = []
    for literal in candidates.split(','):
        if not literal.strip():
            raise VersionParseError(
                f'Empty version in candidates "{candidates}"', literal=literal
            )

        versions.append(Version(literal))

    return versions


class VersionResolver:
    """
    Picks the greatest version matching a constraint among explicit candidates
    or the versions cached from the remote list.
    """

    def __init__(
        self,
        cache: VersionCache,
        fallback_policy: FallbackPolicy = FallbackPolicy.NEVER,
        serve_stale: bool = False,
        wait_timeout: t.Optional[float] = None,
    ) -> None:
        self.cache = cache
        self.fallback_policy = FallbackPolicy(fallback_policy)
        self.serve_stale = serve_stale
        self.wait_timeout = wait_timeout

    def resolve(
        self,
        constraint: t.Optional[str] = None,
        candidates: t.Optional[str] = None,
        exclusive: bool = False,
    ) -> t.Optional[Version]:
        """
        Resolve the constraint.

        Raises ConstraintParseError or VersionParseError for malformed input and
        VersionsFetchError when no candidates are given and the versions list cannot
        be fetched. Returns None when no version matches.
        """
        parsed_constraint = parse_constraint(constraint)

        if not candidates:
            return max_match(parsed_constraint, self.cached_versions())

        result = max_match(parsed_constraint, parse_candidates(candidates))
        if result is not None:
            return result

        if exclusive or self.fallback_policy == FallbackPolicy.NEVER:
            debug(f'No candidate matches "{parsed_constraint}"')
            return None

        debug(f'No candidate matches "{parsed_constraint}", checking the versions list')
        try:
            return max_match(parsed_constraint, self.cached_versions())
        except VersionsFetchError as e:
            warn(f'Ignoring the versions list, it cannot be fetched: {e}')
            return None

    def cached_versions(self) -> t.List[Version]:
        try:
            return self.cache.get_versions(wait_timeout=self.wait_timeout)
        except VersionsFetchError as e:
            if self.serve_stale and e.versions:
                warn(f'Using {len(e.versions)} previously fetched versions')
                return e.versions

            raise

    @classmethod
    def from_settings(
        cls,
        settings: AzureFuncsSettings,
        session: t.Optional[requests.Session] = None,
    ) -> 'VersionResolver':
        cache = VersionCache(
            settings.VERSIONS_SOURCE,
            settings.VERSIONS_MAX_AGE,
            session=session,
            timeout=settings.FETCH_TIMEOUT,
        )
        return cls(
            cache,
            fallback_policy=settings.CANDIDATES_FALLBACK,
            serve_stale=settings.SERVE_STALE,
            wait_timeout=settings.CACHE_WAIT_TIMEOUT,
        )
