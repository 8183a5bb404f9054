from __future__ import annotations

from typing import Any, Optional, Protocol

import requests

from config import REQUEST_TIMEOUT, logger
from errors import TransportError


class JsonClient(Protocol):
    def get_json(self, url: str) -> Any:
        """GET ``url`` and return the parsed JSON body, or raise TransportError."""


class RequestsJsonClient:
    """requests-backed implementation of JsonClient. One attempt, no retry."""

    def __init__(
        self, session: Optional[requests.Session] = None, timeout: Optional[float] = REQUEST_TIMEOUT
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsJsonClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise TransportError(str(exc)) from exc
        except ValueError as exc:
            logger.error("Invalid JSON from %s: %s", url, exc)
            raise TransportError(str(exc)) from exc
