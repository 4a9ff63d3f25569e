import logging
from typing import Any, ClassVar, Iterator, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError as PydanticValidationError,
    field_validator,
    model_serializer,
)

from .color import Color
from .enums import CommandKind, PowerState

_LOGGER = logging.getLogger(__name__)


class Device(BaseModel):
    """A device as listed by ``GET /v1/devices``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    device: str  # vendor address, e.g. "34:20:03:15:82:ae"
    model: str  # e.g. "H6089"
    name: str = Field(alias="deviceName")
    controllable: bool
    retrievable: bool
    supported_commands: frozenset[CommandKind] = Field(alias="supportCmds")

    def supports(self, kind: CommandKind) -> bool:
        return kind in self.supported_commands

    def __str__(self) -> str:
        return f"({self.model}, {self.name})"


class Devices(BaseModel):
    """The ``data`` object of a devices response, in vendor order."""

    model_config = ConfigDict(frozen=True)

    devices: list[Device]

    def __iter__(self) -> Iterator[Device]:  # type: ignore[override]
        return iter(self.devices)

    def __len__(self) -> int:
        return len(self.devices)

    def __getitem__(self, index: int) -> Device:
        return self.devices[index]

    def find(self, name_or_address: str) -> Optional[Device]:
        """Look a device up by its address, or by its display name ignoring case."""
        for device in self.devices:
            if device.device == name_or_address:
                return device
        wanted = name_or_address.casefold()
        for device in self.devices:
            if device.name.casefold() == wanted:
                return device
        return None

    def __str__(self) -> str:
        return "".join(f"{device}\n" for device in self.devices)


# State properties. The vendor sends them as a list of single-key objects,
# e.g. [{"online": false}, {"powerState": "off"}, {"brightness": 82}].

class _Property(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    wire_keys: ClassVar[frozenset[str]] = frozenset()


class OnlineProperty(_Property):
    wire_keys = frozenset({"online"})

    online: bool


class PowerStateProperty(_Property):
    wire_keys = frozenset({"powerState"})

    power_state: PowerState = Field(alias="powerState")


class BrightnessProperty(_Property):
    wire_keys = frozenset({"brightness"})

    brightness: int


class ColorProperty(_Property):
    wire_keys = frozenset({"color"})

    color: Color


class ColorTemperatureProperty(_Property):
    wire_keys = frozenset({"colorTem", "colorTemInKelvin"})

    color_tem: int = Field(
        validation_alias=AliasChoices("colorTem", "colorTemInKelvin", "color_tem"),
        serialization_alias="colorTem",
    )


class UnknownProperty(_Property):
    """A property object this library does not recognize, kept verbatim."""

    raw: Any

    @model_serializer
    def _dump(self) -> Any:
        return self.raw


DeviceProperty = Union[
    OnlineProperty,
    PowerStateProperty,
    BrightnessProperty,
    ColorProperty,
    ColorTemperatureProperty,
    UnknownProperty,
]

_KNOWN_PROPERTIES: tuple[type[_Property], ...] = (
    OnlineProperty,
    PowerStateProperty,
    BrightnessProperty,
    ColorProperty,
    ColorTemperatureProperty,
)


def parse_property(raw: Any) -> DeviceProperty:
    """Decode one element of ``properties`` by the key it carries.

    Anything unrecognized or malformed becomes an :class:`UnknownProperty`
    so one odd element never spoils the rest of the list.
    """
    if isinstance(raw, _Property):
        return raw  # type: ignore[return-value]
    if isinstance(raw, dict):
        for prop_type in _KNOWN_PROPERTIES:
            if raw.keys() & prop_type.wire_keys:
                try:
                    return prop_type.model_validate(raw)  # type: ignore[return-value]
                except PydanticValidationError as err:
                    _LOGGER.debug("Keeping malformed property %r as unknown: %s", raw, err)
                    break
    return UnknownProperty(raw=raw)


class DeviceState(BaseModel):
    """The ``data`` object of ``GET /v1/devices/state``."""

    model_config = ConfigDict(frozen=True)

    device: str
    model: str
    properties: list[DeviceProperty]

    @field_validator("properties", mode="before")
    @classmethod
    def _parse_properties(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [parse_property(item) for item in value]
        return value

    def _first(self, prop_type: type[_Property], attr: str) -> Any:
        for prop in self.properties:
            if isinstance(prop, prop_type):
                return getattr(prop, attr)
        return None

    @property
    def online(self) -> Optional[bool]:
        return self._first(OnlineProperty, "online")

    @property
    def power_state(self) -> Optional[PowerState]:
        return self._first(PowerStateProperty, "power_state")

    @property
    def brightness(self) -> Optional[int]:
        return self._first(BrightnessProperty, "brightness")

    @property
    def color(self) -> Optional[Color]:
        return self._first(ColorProperty, "color")

    @property
    def color_temperature(self) -> Optional[int]:
        return self._first(ColorTemperatureProperty, "color_tem")
