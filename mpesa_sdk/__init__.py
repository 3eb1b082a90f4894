from .c2b import ConfirmationForwarder
from .config import Settings
from .errors import MpesaError
from .models import ConfirmationPayload
from .transport import Client, TransportError
from .validation import ValidationError, Validator

__all__ = [
    "ConfirmationForwarder",
    "Settings",
    "MpesaError",
    "ConfirmationPayload",
    "Client", "TransportError",
    "ValidationError", "Validator",
]
