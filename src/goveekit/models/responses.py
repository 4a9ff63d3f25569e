"""Typed views of the ``{"data": ..., "message": ..., "code": ...}`` envelope."""

from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError as PydanticValidationError, field_validator

from ..errors import DecodeError
from .device import Devices, DeviceState

DataT = TypeVar("DataT")
EnvelopeT = TypeVar("EnvelopeT", bound="ResponseEnvelope")


class ResponseEnvelope(BaseModel, Generic[DataT]):
    data: DataT
    message: str
    code: int


class DevicesResponse(ResponseEnvelope[Optional[Devices]]):
    # A missing data object or devices list is reported as "no devices" by
    # the caller, not as a decode failure.
    data: Optional[Devices] = None

    @field_validator("data", mode="before")
    @classmethod
    def _blank_data(cls, value: Any) -> Any:
        if isinstance(value, dict) and value.get("devices") is None:
            return None
        return value


class StateResponse(ResponseEnvelope[DeviceState]):
    pass


class ControlResponse(ResponseEnvelope[Any]):
    """Acknowledgement of a control request; ``data`` is usually ``{}``."""


def decode(model: type[EnvelopeT], body: Union[bytes, str]) -> EnvelopeT:
    """Validate a raw JSON body against one of the envelope models.

    Raises:
        DecodeError: if the body is not JSON or does not match ``model``.
    """
    try:
        return model.model_validate_json(body)
    except PydanticValidationError as err:
        raise DecodeError(model.__name__, err) from err


def decode_devices(body: Union[bytes, str]) -> DevicesResponse:
    return decode(DevicesResponse, body)


def decode_state(body: Union[bytes, str]) -> StateResponse:
    return decode(StateResponse, body)


def decode_control(body: Union[bytes, str]) -> ControlResponse:
    return decode(ControlResponse, body)
