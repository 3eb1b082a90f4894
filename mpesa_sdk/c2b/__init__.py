from .confirm import ConfirmationForwarder

__all__ = ["ConfirmationForwarder"]
