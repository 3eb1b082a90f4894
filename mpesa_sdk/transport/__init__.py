from .client import Client, TransportError
from .logger import RequestLog

__all__ = [
    "Client",
    "TransportError",
    "RequestLog",
]
