from dataclasses import dataclass, fields
from decimal import Decimal


# Wire name for each ConfirmationPayload attribute, in schema order.
FIELD_NAMES = {
    "request_type": "RequestType",
    "transaction_type": "TransactionType",
    "trans_id": "TransID",
    "trans_time": "TransTime",
    "trans_amount": "TransAmount",
    "business_short_code": "BusinessShortCode",
    "bill_ref_number": "BillRefNumber",
    "invoice_number": "InvoiceNumber",
    "org_account_balance": "OrgAccountBalance",
    "third_party_trans_id": "ThirdPartyTransID",
    "msisdn": "MSISDN",
    "first_name": "FirstName",
    "middle_name": "MiddleName",
    "last_name": "LastName",
}


@dataclass(frozen=True)
class ConfirmationPayload:
    """A C2B transaction confirmation as posted to a merchant's confirmation URL."""

    request_type: str
    transaction_type: str  # "Pay Bill", "Buy Goods", ...
    trans_id: str
    trans_time: str  # YYYYMMDDHHMMSS
    trans_amount: str | Decimal | int | float
    business_short_code: str
    bill_ref_number: str
    invoice_number: str
    org_account_balance: str
    third_party_trans_id: str
    msisdn: str
    first_name: str
    middle_name: str
    last_name: str

    def to_dict(self) -> dict:
        """Return the payload keyed by its wire field names."""
        return {FIELD_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "ConfirmationPayload":
        missing = [wire for wire in FIELD_NAMES.values() if wire not in data]
        if missing:
            raise KeyError(f"missing fields: {missing}")
        return cls(**{attr: data[wire] for attr, wire in FIELD_NAMES.items()})
