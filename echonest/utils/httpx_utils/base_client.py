import logging
from typing import Self

import httpx

LOGGER = logging.getLogger(__name__)


class APIBaseClient:
    """
    Base class that wraps a distinct httpx.Client instance bound to a single API host.
    Subclasses are implemented with their own request construction and response handling.
    No retries, throttling or caching are layered on top of the wrapped client.
    """

    def __init__(
        self,
        base_api_url: str,
        timeout_seconds: float,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_domain = base_api_url
        self._client = httpx.Client(
            base_url=self._base_domain,
            timeout=timeout_seconds,
            headers={"Accept": "application/json"} | (headers or {}),
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close_client()

    def close_client(self) -> None:
        if self._client:
            LOGGER.debug(f"{self.__class__.__name__}: closing httpx client for {self._base_domain}")
            self._client.close()

    @property
    def base_domain(self) -> str:
        return self._base_domain
