from .confirmation import FIELD_NAMES, ConfirmationPayload
from .request import RequestAttempt

__all__ = [
    "FIELD_NAMES", "ConfirmationPayload",
    "RequestAttempt",
]
