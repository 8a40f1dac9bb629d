"""Pytest bootstrap configuration.

Shared fixtures: a recording in-memory transport and a client factory.
"""
import json

import pytest

from sberbank_acquiring import AcquiringClient


OK_BODY = json.dumps({"errorCode": 0, "errorMessage": "No error."})


class FakeTransport:
    """Records every exchange and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: str = OK_BODY):
        self.status_code = status_code
        self.body = body
        self.calls: list[dict] = []

    async def request(self, uri, method="GET", headers=None, body=""):
        self.calls.append({"uri": uri, "method": method, "headers": dict(headers or {}), "body": body})
        return self.status_code, self.body

    @property
    def last(self) -> dict:
        return self.calls[-1]

    def last_json(self) -> dict:
        return json.loads(self.last["body"])


@pytest.fixture
def fake_transport():
    def _make(status_code: int = 200, body=OK_BODY) -> FakeTransport:
        if not isinstance(body, str):
            body = json.dumps(body)
        return FakeTransport(status_code, body)
    return _make


@pytest.fixture
def make_client(fake_transport):
    """Build a token-authenticated client wired to a FakeTransport."""

    def _make(*, response=OK_BODY, status_code: int = 200, **options):
        transport = fake_transport(status_code, response)
        if "user_name" not in options and "token" not in options:
            options["token"] = "abrakadabra"
        client = AcquiringClient(http_client=transport, **options)
        return client, transport
    return _make
