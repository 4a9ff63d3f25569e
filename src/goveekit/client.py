from typing import Optional, Union

from pydantic import SecretStr

from .api.govee_api import GoveeApi
from .api.http_client import HttpClient, Transport
from .commands.base import ControlCommand
from .config import DEFAULT_API_URL, GoveeSettings
from .models.color import Color
from .models.device import Device, Devices, DeviceState
from .models.enums import PowerState
from .models.responses import ControlResponse
from .repo.device_repository import DeviceRepository
from .services.device_service import DeviceService


class GoveeClient:
    """Entry point for the Govee developer API.

    Every method performs exactly one HTTP exchange, except for
    commands the device does not support, which fail locally with
    :class:`~goveekit.errors.UnsupportedCommandError`.

    Example::

        with GoveeClient.from_env() as client:
            lamp = client.list_devices()[0]
            client.set_power(lamp, True)
            client.set_color(lamp, "#FF8800")
    """

    def __init__(
        self,
        api_key: Union[str, SecretStr],
        base_url: str = DEFAULT_API_URL,
        transport: Optional[Transport] = None,
    ) -> None:
        # only a transport built here is closed by close()
        self._owns_transport = transport is None
        self.api = GoveeApi(api_key, base_url=base_url, transport=transport or HttpClient())
        self.repository = DeviceRepository(self.api)
        self.service = DeviceService(self.api)

    @classmethod
    def from_settings(
        cls, settings: GoveeSettings, transport: Optional[Transport] = None
    ) -> "GoveeClient":
        client = cls(
            settings.api_key,
            base_url=settings.base_url,
            transport=transport or HttpClient(timeout=settings.timeout),
        )
        client._owns_transport = transport is None
        return client

    @classmethod
    def from_env(cls, transport: Optional[Transport] = None) -> "GoveeClient":
        return cls.from_settings(GoveeSettings.from_env(), transport=transport)

    def __repr__(self) -> str:
        return f"GoveeClient(base_url={self.api.base_url!r})"

    # reads

    def list_devices(self) -> Devices:
        return self.repository.list_devices()

    def get_state(self, device: Device) -> DeviceState:
        return self.repository.get_state(device)

    def find_device(self, name_or_address: str) -> Device:
        return self.repository.find_device(name_or_address)

    # control

    def control(self, device: Device, cmd: ControlCommand) -> ControlResponse:
        return self.service.control(device, cmd)

    def set_power(self, device: Device, state: Union[PowerState, bool]) -> ControlResponse:
        return self.service.set_power(device, state)

    def set_brightness(self, device: Device, level: int) -> ControlResponse:
        return self.service.set_brightness(device, level)

    def set_color(
        self, device: Device, color: Union[Color, str, tuple[int, int, int]]
    ) -> ControlResponse:
        return self.service.set_color(device, color)

    def set_color_temperature(self, device: Device, kelvin: int) -> ControlResponse:
        return self.service.set_color_temperature(device, kelvin)

    # lifecycle

    def close(self) -> None:
        if self._owns_transport:
            self.api.transport.close()  # type: ignore[attr-defined]

    def __enter__(self) -> "GoveeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
