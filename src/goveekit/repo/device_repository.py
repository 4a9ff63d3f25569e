from ..api.govee_api import ENDPOINT_DEVICES, ENDPOINT_STATE, GoveeApi
from ..errors import DeviceNotFoundError, EmptyResultError
from ..models.device import Device, Devices, DeviceState
from ..models.responses import DevicesResponse, StateResponse


class DeviceRepository:
    def __init__(self, api: GoveeApi):
        self.api = api

    def list_devices(self) -> Devices:
        """All devices bound to the API key, in the order the API lists them.

        Raises:
            EmptyResultError: if the response carries no devices object.
        """
        envelope = self.api.get(ENDPOINT_DEVICES, DevicesResponse)
        if envelope.data is None:
            raise EmptyResultError("No devices were returned from the API")
        return envelope.data

    def get_state(self, device: Device) -> DeviceState:
        envelope = self.api.get(
            ENDPOINT_STATE,
            StateResponse,
            params={"device": device.device, "model": device.model},
        )
        return envelope.data

    def find_device(self, name_or_address: str) -> Device:
        device = self.list_devices().find(name_or_address)
        if device is None:
            raise DeviceNotFoundError(f"No device named or addressed {name_or_address!r}")
        return device
