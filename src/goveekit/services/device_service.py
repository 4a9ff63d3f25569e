import logging
from typing import Any, Union

from ..api.govee_api import ENDPOINT_CONTROL, GoveeApi
from ..commands.base import ControlCommand, ControlRequest, build_command
from ..errors import UnsupportedCommandError
from ..models.color import Color
from ..models.device import Device
from ..models.enums import CommandKind, PowerState
from ..models.responses import ControlResponse

_LOGGER = logging.getLogger(__name__)


class DeviceService:
    def __init__(self, api: GoveeApi):
        self.api = api

    def control(self, device: Device, cmd: ControlCommand) -> ControlResponse:
        """Send an already built command.

        The capability check happens here as well, so a command built for
        another device never reaches the network.
        """
        if not device.supports(cmd.kind):
            raise UnsupportedCommandError(cmd.kind, device)

        body = ControlRequest(device=device.device, model=device.model, cmd=cmd).to_json()
        _LOGGER.debug("Sending %s to %s", cmd.kind, device)
        return self.api.put(ENDPOINT_CONTROL, ControlResponse, body)

    def send(self, device: Device, kind: CommandKind, payload: Any) -> ControlResponse:
        return self.control(device, build_command(device, kind, payload))

    def set_power(self, device: Device, state: Union[PowerState, bool]) -> ControlResponse:
        if isinstance(state, bool):
            state = PowerState.from_bool(state)
        return self.send(device, CommandKind.TURN, state)

    def set_brightness(self, device: Device, level: int) -> ControlResponse:
        return self.send(device, CommandKind.BRIGHTNESS, level)

    def set_color(
        self, device: Device, color: Union[Color, str, tuple[int, int, int]]
    ) -> ControlResponse:
        return self.send(device, CommandKind.COLOR, color)

    def set_color_temperature(self, device: Device, kelvin: int) -> ControlResponse:
        return self.send(device, CommandKind.COLOR_TEM, kelvin)
