import threading

from mpesa_sdk.models.request import RequestAttempt


class RequestLog:
    """Thread-safe record of transport attempts made by a Client."""

    def __init__(self):
        self._attempts: list[RequestAttempt] = []
        self._lock = threading.Lock()

    def log(self, attempt: RequestAttempt) -> None:
        with self._lock:
            self._attempts.append(attempt)

    def get_attempts(self, url: str | None = None) -> list[RequestAttempt]:
        with self._lock:
            if url is None:
                return list(self._attempts)
            return [a for a in self._attempts if a.url == url]

    def get_failed_attempts(self) -> list[RequestAttempt]:
        with self._lock:
            return [a for a in self._attempts if a.error is not None]

    def clear(self) -> None:
        with self._lock:
            self._attempts.clear()
