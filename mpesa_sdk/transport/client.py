import json
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Self

import requests

from mpesa_sdk.errors import MpesaError
from mpesa_sdk.models.request import RequestAttempt
from mpesa_sdk.transport.logger import RequestLog

logger = logging.getLogger(__name__)


class TransportError(MpesaError):
    """Raised when an HTTP call fails: connectivity, status or response parsing."""

    def __init__(self, message: str, error: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.error = error
        self.status_code = status_code
        self.body = body


class Client:
    """JSON-over-HTTP client used by the SDK operations."""

    def __init__(
        self,
        timeout_seconds: float = 30,
        headers: dict | None = None,
        access_token: str | None = None,
        session: requests.Session | None = None,
        request_log: RequestLog | None = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if access_token:
            self.headers["Authorization"] = f"Bearer {access_token}"
        self.headers.update(headers or {})
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.request_log = request_log if request_log is not None else RequestLog()

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "Client":
        return cls(
            timeout_seconds=settings.timeout_seconds,
            access_token=settings.access_token,
            **kwargs,
        )

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def request(self, method: str, url: str, body: dict) -> dict:
        """Send ``body`` as JSON and return the parsed JSON response.

        Raises TransportError on timeout, connection failure, a non-2xx
        status or a response that is not JSON. An empty response body
        yields an empty dict.
        """
        start = time.monotonic()
        status_code = None
        error = None
        try:
            try:
                resp = self.session.request(
                    method,
                    url,
                    data=json.dumps(body, default=str),
                    headers=self.headers,
                    timeout=self.timeout_seconds,
                )
            except requests.exceptions.Timeout as e:
                raise TransportError(f"{method} {url} timed out", "timeout") from e
            except requests.exceptions.ConnectionError as e:
                raise TransportError(f"{method} {url} could not connect: {e}", "connection_error") from e
            except requests.exceptions.RequestException as e:
                raise TransportError(f"{method} {url} failed: {e}", str(e)) from e

            status_code = resp.status_code
            if not 200 <= status_code < 300:
                raise TransportError(
                    f"{method} {url} returned HTTP {status_code}",
                    "http_error",
                    status_code=status_code,
                    body=resp.text,
                )
            return self._parse(resp, method, url)
        except TransportError as e:
            error = e.error
            raise
        except BaseException:
            error = "unexpected"
            raise
        finally:
            self._record(method, url, status_code, error, start)

    @staticmethod
    def _parse(resp: requests.Response, method: str, url: str) -> dict:
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(
                f"{method} {url} returned a non-JSON body",
                "invalid_response",
                status_code=resp.status_code,
                body=resp.text,
            ) from e

    def _record(self, method: str, url: str, status_code: int | None, error: str | None, start: float) -> None:
        elapsed_ms = (time.monotonic() - start) * 1000
        attempt = RequestAttempt(
            attempt_id=f"req_{uuid.uuid4().hex[:16]}",
            method=method,
            url=url,
            status_code=status_code,
            timestamp=datetime.now(timezone.utc),
            response_time_ms=elapsed_ms,
            error=error,
        )
        self.request_log.log(attempt)
        if error is None:
            logger.debug("%s %s -> %s in %.1fms", method, url, status_code, elapsed_ms)
        else:
            logger.warning("%s %s failed (%s, status=%s)", method, url, error, status_code)
