import uuid
from datetime import datetime, timezone

from mpesa_sdk.models.confirmation import ConfirmationPayload


class ConfirmationFactory:
    """Factory for C2B confirmation payloads with sensible defaults."""

    @staticmethod
    def create(**overrides) -> dict:
        """Build a valid payload keyed by wire field names.

        Overrides use wire names too, e.g. ``create(TransAmount="250.00")``.
        """
        now = datetime.now(timezone.utc)
        defaults = {
            "RequestType": "Pay",
            "TransactionType": "Pay Bill",
            "TransID": f"T{uuid.uuid4().hex[:9].upper()}",
            "TransTime": now.strftime("%Y%m%d%H%M%S"),
            "TransAmount": "100.00",
            "BusinessShortCode": "600000",
            "BillRefNumber": "INV001",
            "InvoiceNumber": "",
            "OrgAccountBalance": "500.00",
            "ThirdPartyTransID": "",
            "MSISDN": "254700000000",
            "FirstName": "Jane",
            "MiddleName": "",
            "LastName": "Doe",
        }
        defaults.update(overrides)
        return defaults

    @staticmethod
    def create_payload(**overrides) -> ConfirmationPayload:
        return ConfirmationPayload.from_dict(ConfirmationFactory.create(**overrides))

    @staticmethod
    def without(field: str, **overrides) -> dict:
        payload = ConfirmationFactory.create(**overrides)
        del payload[field]
        return payload
