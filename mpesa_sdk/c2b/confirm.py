import logging
from collections.abc import Mapping
from typing import Self

from mpesa_sdk.config import Settings
from mpesa_sdk.models.confirmation import ConfirmationPayload
from mpesa_sdk.transport.client import Client
from mpesa_sdk.validation.rules import CONFIRMATION_RULES
from mpesa_sdk.validation.validator import ValidationError, Validator

logger = logging.getLogger(__name__)


class ConfirmationForwarder:
    """Validates C2B confirmation payloads and posts them to a callback URL."""

    def __init__(
        self,
        client: Client,
        collect_all: bool = False,
        default_url: str = "",
    ):
        self.client = client
        self.collect_all = collect_all
        self.default_url = default_url
        self.rules = CONFIRMATION_RULES
        self._owns_client = False

    @classmethod
    def from_settings(cls, settings: Settings, client: Client | None = None) -> "ConfirmationForwarder":
        forwarder = cls(
            client=client or Client.from_settings(settings),
            collect_all=settings.collect_all_errors,
            default_url=settings.confirmation_url,
        )
        forwarder._owns_client = client is None
        return forwarder

    def close(self) -> None:
        """Close the client if this forwarder built it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def forward(self, payload: Mapping | ConfirmationPayload, destination_url: str | None = None) -> dict:
        """Validate ``payload`` and POST it to ``destination_url``.

        Args:
            payload: Confirmation fields keyed by wire name, or a ConfirmationPayload.
            destination_url: Callback endpoint. Falls back to ``default_url``.

        Returns:
            The client's parsed response, unchanged.

        Raises:
            ValidationError: The payload is missing a field or a field has the
                wrong type. No request is made.
            TransportError: Raised by the client; propagated as-is.
        """
        if isinstance(payload, ConfirmationPayload):
            payload = payload.to_dict()

        try:
            Validator.validate(payload, self.rules, collect_all=self.collect_all)
        except ValidationError as e:
            logger.warning("Rejected C2B confirmation: %s", e)
            raise

        url = destination_url or self.default_url
        if not url or not url.strip():
            raise ValueError("destination_url must be a non-empty string")

        logger.info("Forwarding C2B confirmation %s to %s", payload["TransID"], url)
        return self.client.request("POST", url, dict(payload))
