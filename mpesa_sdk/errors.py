class MpesaError(Exception):
    """Base class for errors raised by the SDK."""
