import os
from dataclasses import dataclass


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    confirmation_url: str = ""
    timeout_seconds: float = 30
    access_token: str | None = None
    collect_all_errors: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        raw_timeout = os.getenv("MPESA_TIMEOUT_SECONDS", "30").strip()
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"MPESA_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError(f"MPESA_TIMEOUT_SECONDS must be positive, got {raw_timeout!r}")

        return cls(
            confirmation_url=os.getenv("MPESA_CONFIRMATION_URL", "").strip(),
            timeout_seconds=timeout,
            access_token=os.getenv("MPESA_ACCESS_TOKEN") or None,
            collect_all_errors=_env_flag("MPESA_COLLECT_ALL_ERRORS"),
        )
