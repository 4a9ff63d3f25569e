"""Exceptions raised by goveekit.

Every exception derives from :class:`GoveeError`, so callers can catch the
whole family at once. None of them carries the API key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models.device import Device
    from .models.enums import CommandKind


class GoveeError(Exception):
    """Base class for all goveekit errors."""


class ConfigurationError(GoveeError):
    """Settings are incomplete, e.g. no API key was configured."""


class ValidationError(GoveeError, ValueError):
    """Local input was rejected before any request was made."""


class UnsupportedCommandError(ValidationError):
    """The device does not list the command in its ``supportCmds``."""

    def __init__(self, kind: CommandKind, device: Device) -> None:
        self.kind = kind
        self.device = device
        super().__init__(f"Unsupported command '{kind}' for {device}")


class TransportError(GoveeError):
    """The HTTP exchange itself failed (DNS, connection, timeout...)."""


class HttpStatusError(GoveeError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: int, message: Optional[str] = None) -> None:
        self.status = status
        self.message = message
        text = f"http error: {status}"
        if message:
            text = f"{text} ({message})"
        super().__init__(text)


class DecodeError(GoveeError):
    """A response body did not match the expected shape."""

    def __init__(self, typename: str, source: Exception) -> None:
        self.typename = typename
        self.source = source
        super().__init__(f"could not parse {typename} data from json: {source}")


class EmptyResultError(GoveeError):
    """A successful response carried no usable payload."""


class DeviceNotFoundError(GoveeError):
    """No device matched a name or address lookup."""
