import pytest

from mpesa_sdk.c2b.confirm import ConfirmationForwarder
from mpesa_sdk.callback_receiver.server import CallbackReceiverServer
from mpesa_sdk.transport.client import Client
from mpesa_sdk.transport.logger import RequestLog
from mpesa_sdk.utils.factories import ConfirmationFactory


class FakeTransport:
    """Records request() calls and replies with a fixed response or error."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response if response is not None else {"status": "ok"}
        self.error = error
        self.calls: list[tuple[str, str, dict]] = []

    def request(self, method: str, url: str, body: dict) -> dict:
        self.calls.append((method, url, body))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def example_payload():
    return {
        "RequestType": "Pay",
        "TransactionType": "Pay Bill",
        "TransID": "T1",
        "TransTime": "20230101120000",
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


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def forwarder(fake_transport):
    return ConfirmationForwarder(client=fake_transport)


@pytest.fixture
def request_log():
    return RequestLog()


@pytest.fixture
def client(request_log):
    return Client(timeout_seconds=5, request_log=request_log)


@pytest.fixture
def http_forwarder(client):
    return ConfirmationForwarder(client=client)


@pytest.fixture
def receiver():
    server = CallbackReceiverServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def confirmation_factory():
    return ConfirmationFactory


@pytest.fixture
def make_transport():
    return FakeTransport
