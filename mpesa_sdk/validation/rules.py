from enum import Enum
from types import MappingProxyType


class Rule(Enum):
    REQUIRED = "required"
    STRING = "string"
    NUMERIC = "numeric"

    @classmethod
    def parse(cls, spec: str, separator: str = "|") -> tuple["Rule", ...]:
        """Parse a rule string such as ``"required|string"``.

        Unknown keywords raise ValueError rather than being ignored, so a
        misspelled ``"require"`` cannot silently drop a required check.
        """
        rules = []
        for keyword in spec.split(separator):
            keyword = keyword.strip()
            if not keyword:
                continue
            try:
                rules.append(cls(keyword))
            except ValueError:
                raise ValueError(f"unknown validation rule {keyword!r} in {spec!r}") from None
        return tuple(rules)

    @property
    def message(self) -> str:
        if self is Rule.REQUIRED:
            return "is required"
        return f"must be {self.value}"


REQUIRED_STRING = (Rule.REQUIRED, Rule.STRING)

CONFIRMATION_RULES: MappingProxyType[str, tuple[Rule, ...]] = MappingProxyType({
    "RequestType": REQUIRED_STRING,
    "TransactionType": REQUIRED_STRING,
    "TransID": REQUIRED_STRING,
    "TransTime": REQUIRED_STRING,
    "TransAmount": (Rule.REQUIRED, Rule.NUMERIC),
    "BusinessShortCode": REQUIRED_STRING,
    "BillRefNumber": REQUIRED_STRING,
    "InvoiceNumber": REQUIRED_STRING,
    "OrgAccountBalance": REQUIRED_STRING,
    "ThirdPartyTransID": REQUIRED_STRING,
    "MSISDN": REQUIRED_STRING,
    "FirstName": REQUIRED_STRING,
    "MiddleName": REQUIRED_STRING,
    "LastName": REQUIRED_STRING,
})
