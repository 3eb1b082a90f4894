from .factories import ConfirmationFactory

__all__ = ["ConfirmationFactory"]
