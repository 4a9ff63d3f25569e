from typing import Optional

import pytest

from goveekit import CommandKind, Device, GoveeClient, HttpResponse
from helpers import API_KEY, ExplodingTransport, RecordingTransport


@pytest.fixture
def light() -> Device:
    return Device(
        device="34:20:03:15:82:ae",
        model="H6089",
        name="fake device",
        controllable=True,
        retrievable=True,
        supported_commands=frozenset(CommandKind),
    )


@pytest.fixture
def plug() -> Device:
    return Device(
        device="34:20:03:2e:30:2b",
        model="H5081",
        name="Smart Plug",
        controllable=True,
        retrievable=True,
        supported_commands={CommandKind.TURN},
    )


@pytest.fixture
def make_client():
    def _make(*responses: HttpResponse, base_url: Optional[str] = None):
        transport = RecordingTransport(*responses)
        kwargs = {"base_url": base_url} if base_url else {}
        return GoveeClient(API_KEY, transport=transport, **kwargs), transport

    return _make


@pytest.fixture
def offline_client() -> GoveeClient:
    return GoveeClient(API_KEY, transport=ExplodingTransport())
