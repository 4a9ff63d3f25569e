import json

import pytest

from goveekit import Color, CommandKind, DecodeError, PowerState
from goveekit.models.device import (
    BrightnessProperty,
    ColorProperty,
    ColorTemperatureProperty,
    OnlineProperty,
    PowerStateProperty,
    UnknownProperty,
)
from goveekit.models.responses import decode_control, decode_devices, decode_state
from helpers import CONTROL_BODY, DEVICES_BODY, STATE_BODY


def _body(payload) -> bytes:
    return json.dumps(payload).encode()


def test_devices_keep_vendor_order():
    devices = decode_devices(_body(DEVICES_BODY)).data

    assert len(devices) == 3
    assert [d.model for d in devices] == ["H6159", "H6188", "H5081"]
    assert devices[0].name == "test light"
    assert devices[0].supported_commands == frozenset(CommandKind)
    assert devices[2].supported_commands == {CommandKind.TURN}


def test_devices_envelope_fields():
    envelope = decode_devices(_body(DEVICES_BODY))
    assert envelope.message == "Success"
    assert envelope.code == 200


def test_supports(light, plug):
    assert light.supports(CommandKind.COLOR_TEM)
    assert plug.supports(CommandKind.TURN)
    assert not plug.supports(CommandKind.BRIGHTNESS)


def test_device_str(light):
    assert str(light) == "(H6089, fake device)"


def test_unknown_command_token_is_a_decode_error():
    payload = json.loads(json.dumps(DEVICES_BODY))
    payload["data"]["devices"][0]["supportCmds"].append("ColorTem")

    with pytest.raises(DecodeError) as exc:
        decode_devices(_body(payload))
    assert exc.value.typename == "DevicesResponse"


@pytest.mark.parametrize(
    "payload",
    [
        {"message": "Success", "code": 200},
        {"data": None, "message": "Success", "code": 200},
        {"data": {}, "message": "Success", "code": 200},
        {"data": {"devices": None}, "message": "Success", "code": 200},
    ],
)
def test_missing_devices_object_decodes_to_none(payload):
    assert decode_devices(_body(payload)).data is None


def test_empty_device_list_is_valid():
    envelope = decode_devices(_body({"data": {"devices": []}, "message": "Success", "code": 200}))
    assert len(envelope.data) == 0


def test_extra_top_level_keys_are_ignored():
    payload = dict(DEVICES_BODY, requestId="abc")
    assert len(decode_devices(_body(payload)).data) == 3


@pytest.mark.parametrize("body", [b"", b"not json", b'{"data": {"devices": []}, "code": 200}'])
def test_structural_problems_are_decode_errors(body):
    with pytest.raises(DecodeError):
        decode_devices(body)


def test_state_properties_in_order():
    state = decode_state(_body(STATE_BODY)).data

    assert state.device == "34:20:03:15:82:ae"
    assert state.properties == [
        OnlineProperty(online=False),
        PowerStateProperty(power_state=PowerState.OFF),
        BrightnessProperty(brightness=82),
        ColorProperty(color=Color(r=11, g=22, b=33)),
    ]


def test_state_accessors():
    state = decode_state(_body(STATE_BODY)).data

    assert state.online is False
    assert state.power_state is PowerState.OFF
    assert state.brightness == 82
    assert state.color == Color(r=11, g=22, b=33)
    assert state.color_temperature is None


def test_unrecognized_properties_do_not_spoil_the_list():
    payload = json.loads(json.dumps(STATE_BODY))
    payload["data"]["properties"] = [
        {"mode": 3},
        {"brightness": "very"},
        {"powerState": "on"},
        "garbage",
        {"colorTemInKelvin": 3200},
    ]

    props = decode_state(_body(payload)).data.properties

    assert props[0] == UnknownProperty(raw={"mode": 3})
    assert props[1] == UnknownProperty(raw={"brightness": "very"})
    assert props[2] == PowerStateProperty(power_state=PowerState.ON)
    assert props[3] == UnknownProperty(raw="garbage")
    assert props[4] == ColorTemperatureProperty(color_tem=3200)


def test_properties_dump_back_to_vendor_shape():
    payload = json.loads(json.dumps(STATE_BODY))
    payload["data"]["properties"] += [{"colorTem": 3000}, {"mode": 3}]

    props = decode_state(_body(payload)).data.properties

    assert [p.model_dump(mode="json", by_alias=True) for p in props] == payload["data"]["properties"]


def test_state_requires_data():
    with pytest.raises(DecodeError) as exc:
        decode_state(_body({"message": "Success", "code": 200}))
    assert exc.value.typename == "StateResponse"


def test_control_ack():
    envelope = decode_control(_body(CONTROL_BODY))
    assert envelope.data == {}
    assert envelope.code == 200


def test_find():
    devices = decode_devices(_body(DEVICES_BODY)).data

    assert devices.find("smart plug").model == "H5081"
    assert devices.find("C6:EA:B8:56:C8:C6:89:BE").name == "H6188_89BE"
    assert devices.find("kitchen") is None
