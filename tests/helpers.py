"""Canned vendor bodies and fake transports used across the tests."""

import json
from typing import Any, NamedTuple, Optional

import pytest

from goveekit import HttpResponse

API_KEY = "foobarbaz"

DEVICES_BODY = {
    "data": {
        "devices": [
            {
                "device": "99:A5:A4:C1:38:29:DA:7B",
                "model": "H6159",
                "deviceName": "test light",
                "controllable": True,
                "retrievable": True,
                "supportCmds": ["turn", "brightness", "color", "colorTem"],
            },
            {
                "device": "C6:EA:B8:56:C8:C6:89:BE",
                "model": "H6188",
                "deviceName": "H6188_89BE",
                "controllable": True,
                "retrievable": True,
                "supportCmds": ["turn", "brightness", "color", "colorTem"],
            },
            {
                "device": "34:20:03:2e:30:2b",
                "model": "H5081",
                "deviceName": "Smart Plug",
                "controllable": True,
                "retrievable": True,
                "supportCmds": ["turn"],
            },
        ]
    },
    "message": "Success",
    "code": 200,
}

STATE_BODY = {
    "data": {
        "device": "34:20:03:15:82:ae",
        "model": "H6089",
        "properties": [
            {"online": False},
            {"powerState": "off"},
            {"brightness": 82},
            {"color": {"r": 11, "g": 22, "b": 33}},
        ],
    },
    "message": "Success",
    "code": 201,
}

CONTROL_BODY = {"data": {}, "message": "Success", "code": 200}


def json_response(payload: Any, status: int = 200) -> HttpResponse:
    return HttpResponse(status, {"Content-Type": "application/json"}, json.dumps(payload).encode())


class Call(NamedTuple):
    method: str
    url: str
    headers: dict
    body: Optional[bytes]


class RecordingTransport:
    """Answers with queued responses and remembers every request."""

    def __init__(self, *responses: HttpResponse):
        self.responses = list(responses)
        self.calls: list[Call] = []

    def request(self, method, url, headers, body=None):
        self.calls.append(Call(method, url, dict(headers), body))
        return self.responses.pop(0)


class ExplodingTransport:
    def request(self, method, url, headers, body=None):
        pytest.fail(f"unexpected {method} {url}")
