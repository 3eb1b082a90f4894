from dataclasses import dataclass
from datetime import datetime


@dataclass
class RequestAttempt:
    attempt_id: str
    method: str
    url: str
    status_code: int | None
    timestamp: datetime
    response_time_ms: float
    error: str | None = None  # "timeout", "connection_error", "http_error", "invalid_response"

    @property
    def succeeded(self) -> bool:
        return self.error is None
