import logging
from typing import Optional, TypeVar, Union
from urllib.parse import urlencode, urljoin

from pydantic import BaseModel, SecretStr, ValidationError as PydanticValidationError

from ..config import DEFAULT_API_URL
from ..errors import HttpStatusError
from ..models.responses import ResponseEnvelope, decode
from .http_client import HttpClient, HttpResponse, Transport

_LOGGER = logging.getLogger(__name__)

API_KEY_HEADER = "Govee-API-Key"

ENDPOINT_DEVICES = "v1/devices"
ENDPOINT_STATE = "v1/devices/state"
ENDPOINT_CONTROL = "v1/devices/control"

EnvelopeT = TypeVar("EnvelopeT", bound=ResponseEnvelope)


class GoveeApi:
    """Authenticated access to the Govee endpoints through a :class:`Transport`.

    Holds only immutable configuration, so one instance can serve
    concurrent callers as long as the transport can.
    """

    def __init__(
        self,
        api_key: Union[str, SecretStr],
        base_url: str = DEFAULT_API_URL,
        transport: Optional[Transport] = None,
    ) -> None:
        self._api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        self.base_url = base_url
        self.transport = transport or HttpClient()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def url_for(self, endpoint: str, params: Optional[dict[str, str]] = None) -> str:
        url = urljoin(self.base_url.rstrip("/") + "/", endpoint)
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            API_KEY_HEADER: self._api_key.get_secret_value(),
            "Accept": "application/json",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[dict[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> HttpResponse:
        """Run one exchange and reject non-2xx answers.

        Raises:
            TransportError: if the transport could not complete the exchange.
            HttpStatusError: if the status is outside 200..299.
        """
        url = self.url_for(endpoint, params)
        _LOGGER.debug("%s %s", method, url)
        response = self.transport.request(method, url, self._headers(body is not None), body)
        if not 200 <= response.status < 300:
            raise HttpStatusError(response.status, _vendor_message(response.body))
        return response

    def get(
        self,
        endpoint: str,
        model: type[EnvelopeT],
        params: Optional[dict[str, str]] = None,
    ) -> EnvelopeT:
        response = self.request("GET", endpoint, params=params)
        return decode(model, response.body)

    def put(self, endpoint: str, model: type[EnvelopeT], body: bytes) -> EnvelopeT:
        response = self.request("PUT", endpoint, body=body)
        return decode(model, response.body)


class _ErrorBody(BaseModel):
    message: Optional[str] = None


def _vendor_message(body: bytes) -> Optional[str]:
    """Pull ``message`` out of an error body, if it has one."""
    try:
        return _ErrorBody.model_validate_json(body).message
    except PydanticValidationError:
        return None
