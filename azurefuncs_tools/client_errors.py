# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0

import http.client as http_client
import typing as t

if t.TYPE_CHECKING:
    from azurefuncs_tools.versions import Version


class VersionsFetchError(Exception):
    """
    The remote versions list could not be refreshed.

    The error is transient: ``versions`` holds whatever the cache had before the
    failed refresh (possibly nothing), so callers can still decide to serve it.
    """

    def __init__(
        self,
        message: t.Any = 'Failed to fetch versions',
        endpoint: t.Optional[str] = None,
        status_code: t.Optional[int] = None,
        versions: t.Optional[t.List['Version']] = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
        self.versions: t.List['Version'] = list(versions or [])

    def request_info(self) -> t.List[str]:
        messages = []
        if self.endpoint is not None:
            messages.append(f'URL: {self.endpoint}')

        if self.status_code is not None:
            messages.append(
                'Status code: {} {}'.format(
                    self.status_code, http_client.responses.get(self.status_code, '')
                )
            )

        return messages

    def __str__(self) -> str:
        return '\n'.join([super().__str__()] + self.request_info())


class NetworkConnectionError(VersionsFetchError):
    pass


class CacheBusyError(VersionsFetchError):
    pass
