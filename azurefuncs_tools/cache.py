# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0
"""Time bounded cache of the remote list of versions"""

import threading
import time
import typing as t
from urllib.parse import urlparse

import requests

from azurefuncs_tools.client_errors import CacheBusyError, VersionsFetchError
from azurefuncs_tools.errors import ConfigurationError
from azurefuncs_tools.http_client import Timeout, create_session, get_text
from azurefuncs_tools.messages import debug
from azurefuncs_tools.versions import Version, parse_versions_text

SUPPORTED_SCHEMES = ('http', 'https', 'file')


class VersionCache:
    """
    Versions fetched from ``source``, one per line, kept for ``max_age`` seconds.

    The lock is held for the staleness check, the fetch and the update, so there is
    never more than one fetch in flight. A failed fetch keeps the previous list and
    does not move the fetch time, so the next call tries again.
    """

    def __init__(
        self,
        source: str,
        max_age: float,
        session: t.Optional[requests.Session] = None,
        clock: t.Callable[[], float] = time.monotonic,
        timeout: t.Optional[Timeout] = None,
    ) -> None:
        if not source:
            raise ConfigurationError('Versions source is not set')

        scheme = urlparse(source).scheme
        if scheme not in SUPPORTED_SCHEMES:
            raise ConfigurationError(
                f'Versions source "{source}" must be one of: '
                + ', '.join(f'{s}://' for s in SUPPORTED_SCHEMES)
            )

        if max_age < 0:
            raise ConfigurationError(f'Versions max age must not be negative, got {max_age}')

        if isinstance(timeout, (int, float)) and timeout <= 0:
            raise ConfigurationError(f'Fetch timeout must be positive, got {timeout}')

        self.source = source
        self.max_age = max_age
        self.timeout = timeout
        self._session = session or create_session()
        self._clock = clock

        self._lock = threading.Lock()
        self._versions: t.List[Version] = []
        self._fetched_at: t.Optional[float] = None

    @property
    def fetched_at(self) -> t.Optional[float]:
        return self._fetched_at

    def is_stale(self) -> bool:
        if self._fetched_at is None:
            return True

        return self._clock() - self._fetched_at > self.max_age

    def get_versions(self, wait_timeout: t.Optional[float] = None) -> t.List[Version]:
        """
        Return the cached versions, fetching them first when stale.

        Raises VersionsFetchError carrying the previous versions when the fetch fails,
        and CacheBusyError when another refresh holds the cache longer than ``wait_timeout``.
        """
        acquired = self._lock.acquire(timeout=-1 if wait_timeout is None else wait_timeout)
        if not acquired:
            raise CacheBusyError(
                'Timed out waiting for the versions list to refresh',
                endpoint=self.source,
                versions=self._versions,
            )

        try:
            if not self.is_stale():
                return list(self._versions)

            self._refresh()
            return list(self._versions)
        finally:
            self._lock.release()

    def _refresh(self) -> None:
        try:
            text = get_text(self._session, self.source, timeout=self.timeout)
        except VersionsFetchError as e:
            debug(f'Failed to refresh the versions list: {e}')
            e.versions = list(self._versions)
            raise

        versions = parse_versions_text(text)

        self._versions = versions
        self._fetched_at = self._clock()

        debug(f'Fetched {len(versions)} versions from {self.source}')
        debug(f'Next refresh of the versions list in {self.max_age}s')
