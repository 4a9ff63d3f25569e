import logging
from typing import Mapping, NamedTuple, Optional, Protocol

import requests

from ..errors import TransportError

_LOGGER = logging.getLogger(__name__)


class HttpResponse(NamedTuple):
    status: int
    headers: Mapping[str, str]
    body: bytes


class Transport(Protocol):
    """Anything able to run a single HTTP exchange."""

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> HttpResponse:
        ...


class HttpClient:
    """Default :class:`Transport` on top of a ``requests.Session``."""

    def __init__(self, *, timeout: float = 5, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> HttpResponse:
        try:
            r = self.session.request(
                method, url, headers=dict(headers), data=body, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"failed to talk to the govee api: {e}") from e

        _LOGGER.debug("%s %s -> %s", method, r.url, r.status_code)
        return HttpResponse(r.status_code, dict(r.headers), r.content)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
