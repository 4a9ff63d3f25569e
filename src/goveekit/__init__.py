"""Client for the Govee developer cloud API."""

from .api.http_client import HttpClient, HttpResponse, Transport
from .client import GoveeClient
from .commands.base import (
    BrightnessCommand,
    ColorCommand,
    ColorTemperatureCommand,
    ControlCommand,
    ControlRequest,
    TurnCommand,
    brightness,
    build_command,
    color,
    color_temperature,
    serialize,
    turn,
)
from .config import DEFAULT_API_URL, GoveeSettings
from .errors import (
    ConfigurationError,
    DecodeError,
    DeviceNotFoundError,
    EmptyResultError,
    GoveeError,
    HttpStatusError,
    TransportError,
    UnsupportedCommandError,
    ValidationError,
)
from .models.color import Color
from .models.device import Device, DeviceProperty, Devices, DeviceState
from .models.enums import CommandKind, PowerState

__all__ = [
    "DEFAULT_API_URL",
    "BrightnessCommand",
    "Color",
    "ColorCommand",
    "ColorTemperatureCommand",
    "CommandKind",
    "ConfigurationError",
    "ControlCommand",
    "ControlRequest",
    "DecodeError",
    "Device",
    "DeviceNotFoundError",
    "DeviceProperty",
    "DeviceState",
    "Devices",
    "EmptyResultError",
    "GoveeClient",
    "GoveeError",
    "GoveeSettings",
    "HttpClient",
    "HttpResponse",
    "HttpStatusError",
    "PowerState",
    "Transport",
    "TransportError",
    "TurnCommand",
    "UnsupportedCommandError",
    "ValidationError",
    "brightness",
    "build_command",
    "color",
    "color_temperature",
    "serialize",
    "turn",
]
