"""Control commands and the ``PUT /v1/devices/control`` request body.

A command serializes as ``{"name": <command-name>, "value": <payload>}``; the
request wraps it as ``{"device": ..., "model": ..., "cmd": {...}}``.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError as PydanticValidationError,
)

from ..errors import UnsupportedCommandError, ValidationError
from ..models.color import Color
from ..models.device import Device
from ..models.enums import CommandKind, PowerState

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100

# Inclusive on both ends, from the vendor documentation.
COLOR_TEM_MIN = 2000
COLOR_TEM_MAX = 9000


def _reason(err: PydanticValidationError) -> str:
    errors = err.errors()
    return errors[0]["msg"] if errors else str(err)


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as err:
            raise ValidationError(
                f"invalid {type(self).__name__} value {data.get('value')!r}: {_reason(err)}"
            ) from err

    @property
    def kind(self) -> CommandKind:
        return CommandKind(self.name)  # type: ignore[attr-defined]


class TurnCommand(_Command):
    name: Literal["turn"] = "turn"
    value: PowerState


class BrightnessCommand(_Command):
    name: Literal["brightness"] = "brightness"
    value: int = Field(..., ge=BRIGHTNESS_MIN, le=BRIGHTNESS_MAX, strict=True)


class ColorCommand(_Command):
    name: Literal["color"] = "color"
    value: Color


class ColorTemperatureCommand(_Command):
    name: Literal["colorTem"] = "colorTem"
    value: int = Field(..., ge=COLOR_TEM_MIN, le=COLOR_TEM_MAX, strict=True)


ControlCommand = Annotated[
    Union[TurnCommand, BrightnessCommand, ColorCommand, ColorTemperatureCommand],
    Field(discriminator="name"),
]

_command_adapter: TypeAdapter[ControlCommand] = TypeAdapter(ControlCommand)


class ControlRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    device: str
    model: str
    cmd: ControlCommand

    def to_json(self) -> bytes:
        return self.model_dump_json().encode()


def _validated(kind: CommandKind, value: Any) -> ControlCommand:
    try:
        return _command_adapter.validate_python({"name": kind.value, "value": value})
    except PydanticValidationError as err:
        raise ValidationError(f"invalid {kind} value {value!r}: {_reason(err)}") from err


def turn(state: PowerState) -> TurnCommand:
    return _validated(CommandKind.TURN, state)  # type: ignore[return-value]


def brightness(level: int) -> BrightnessCommand:
    return _validated(CommandKind.BRIGHTNESS, level)  # type: ignore[return-value]


def color(value: Any) -> ColorCommand:
    """Build a color command from a :class:`Color`, a hex string or an (r, g, b) tuple."""
    return _validated(CommandKind.COLOR, value)  # type: ignore[return-value]


def color_temperature(kelvin: int) -> ColorTemperatureCommand:
    return _validated(CommandKind.COLOR_TEM, kelvin)  # type: ignore[return-value]


def build_command(device: Device, kind: Union[CommandKind, str], payload: Any) -> ControlCommand:
    """Validate ``payload`` as a ``kind`` command for ``device``.

    The capability check runs first and is purely local.

    Raises:
        UnsupportedCommandError: if the device does not support ``kind``.
        ValidationError: if ``kind`` is not a command name, or the payload
            is out of range or malformed.
    """
    try:
        kind = CommandKind(kind)
    except ValueError as err:
        raise ValidationError(f"unknown command {kind!r}") from err
    if not device.supports(kind):
        raise UnsupportedCommandError(kind, device)
    return _validated(kind, payload)


def serialize(device_id: str, model: str, cmd: ControlCommand) -> dict[str, Any]:
    return ControlRequest(device=device_id, model=model, cmd=cmd).model_dump(mode="json")
