import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from mpesa_sdk.errors import MpesaError
from mpesa_sdk.validation.rules import Rule

logger = logging.getLogger(__name__)

# ASCII digits only, no underscore grouping.
NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class FieldError:
    field: str
    rule: Rule

    def __str__(self) -> str:
        return f"{self.field}: {self.rule.message}"


class ValidationError(MpesaError):
    """Raised when a payload does not satisfy its rules.

    ``field`` and ``rule`` describe the first violation; ``errors`` holds
    every violation that was checked.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))

    @property
    def field(self) -> str:
        return self.errors[0].field

    @property
    def rule(self) -> Rule:
        return self.errors[0].rule

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


def is_numeric(value) -> bool:
    """True for real numbers and strings holding a finite decimal number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return Decimal(value).is_finite()
    if not isinstance(value, str):
        return False
    text = value.strip()
    if NUMBER_PATTERN.fullmatch(text) is None:
        return False
    try:
        return Decimal(text).is_finite()
    except InvalidOperation:
        return False


_CHECKS = {
    Rule.STRING: lambda value: isinstance(value, str),
    Rule.NUMERIC: is_numeric,
}


class Validator:
    """Checks mappings against a field -> rules schema."""

    @staticmethod
    def validate(
        data: Mapping,
        rules: Mapping[str, Iterable[Rule] | str],
        collect_all: bool = False,
    ) -> None:
        """Raise ValidationError if ``data`` violates ``rules``.

        Each field is checked for presence, then for type. By default the
        first violation raises; with ``collect_all`` every field is checked
        and all violations are reported together.
        """
        if not isinstance(data, Mapping):
            raise ValidationError([FieldError("<payload>", Rule.REQUIRED)])

        errors: list[FieldError] = []
        for field, field_rules in rules.items():
            if isinstance(field_rules, str):
                field_rules = Rule.parse(field_rules)
            error = Validator._check_field(data, field, tuple(field_rules))
            if error is None:
                continue
            errors.append(error)
            if not collect_all:
                break

        if errors:
            logger.debug("Validation failed: %s", "; ".join(str(e) for e in errors))
            raise ValidationError(errors)

    @staticmethod
    def _check_field(data: Mapping, field: str, field_rules: tuple[Rule, ...]) -> FieldError | None:
        value = data.get(field)
        if value is None:
            if Rule.REQUIRED in field_rules:
                return FieldError(field, Rule.REQUIRED)
            return None  # optional and absent

        for rule in field_rules:
            check = _CHECKS.get(rule)
            if check is not None and not check(value):
                return FieldError(field, rule)
        return None
