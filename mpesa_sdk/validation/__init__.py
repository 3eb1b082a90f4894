from .rules import CONFIRMATION_RULES, Rule
from .validator import FieldError, ValidationError, Validator, is_numeric

__all__ = [
    "CONFIRMATION_RULES", "Rule",
    "FieldError", "ValidationError", "Validator", "is_numeric",
]
