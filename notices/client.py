"""HTTP adapter for the Gazette notices JSON feed.

One call to `NoticesClient.fetch` performs exactly one GET against the
configured endpoint. Failures are returned as a `FetchResult` carrying a
`TransportError` or `DecodeError` rather than raised, so the request
handler can turn them into an inline error block.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import requests
from django.conf import settings

from .errors import DecodeError, NoticesError, TransportError

logger = logging.getLogger(__name__)

PAGE_PARAM = "results-page"


@dataclass(frozen=True)
class FetchResult:
    data: dict[str, Any] | None = None
    error: NoticesError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: dict[str, Any]) -> "FetchResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: NoticesError) -> "FetchResult":
        return cls(error=error)


def decode_body(text: str) -> dict[str, Any]:
    """Decode a feed body, raising `DecodeError` unless it is a JSON object.

    A literal `null` counts as undecodable, like any other body that
    does not yield an object.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise DecodeError("Error decoding JSON response.") from exc
    if not isinstance(data, dict):
        raise DecodeError("Error decoding JSON response.")
    return data


class NoticesClient:
    """Fetch pages of the notices feed through an injected session.

    `verify` defaults to False: the upstream feed has been served with
    certificates the default trust store rejects. Set
    `NOTICES_API_VERIFY_TLS=1` to turn verification back on.
    """

    def __init__(
        self,
        session: requests.Session,
        url: str,
        *,
        verify: bool = False,
        timeout: float | None = None,
    ) -> None:
        self.session = session
        self.url = url
        self.verify = verify
        self.timeout = timeout

    def fetch(self, page: int) -> FetchResult:
        try:
            response = self.session.get(
                self.url,
                params={PAGE_PARAM: page},
                verify=self.verify,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Notices feed request failed for page %s: %s", page, exc)
            return FetchResult.failure(TransportError(str(exc)))

        try:
            data = decode_body(response.text)
        except DecodeError as exc:
            logger.warning("Notices feed returned an undecodable body for page %s", page)
            return FetchResult.failure(exc)

        logger.debug("Fetched notices page %s", page)
        return FetchResult.success(data)

    def close(self) -> None:
        self.session.close()


def get_notices_client() -> NoticesClient:
    """Build a client from settings with a fresh session."""
    session = requests.Session()
    session.headers.update({"User-Agent": settings.NOTICES_USER_AGENT, "Accept": "application/json"})
    return NoticesClient(
        session,
        settings.NOTICES_API_URL,
        verify=settings.NOTICES_API_VERIFY_TLS,
        timeout=settings.NOTICES_API_TIMEOUT,
    )
