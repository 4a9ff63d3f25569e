import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from .errors import ConfigurationError

DEFAULT_API_URL = "https://developer-api.govee.com"
DEFAULT_TIMEOUT = 5

ENV_API_KEY = "GOVEE_API_KEY"
ENV_API_URL = "GOVEE_API_URL"
ENV_TIMEOUT = "GOVEE_TIMEOUT"


class GoveeSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    base_url: str = DEFAULT_API_URL
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "GoveeSettings":
        """Read settings from the environment, loading a ``.env`` file first if one is found."""
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        api_key = os.getenv(ENV_API_KEY)
        if not api_key:
            raise ConfigurationError(f"{ENV_API_KEY} is not set")

        try:
            return cls(
                api_key=api_key,
                base_url=os.getenv(ENV_API_URL) or DEFAULT_API_URL,
                timeout=os.getenv(ENV_TIMEOUT) or DEFAULT_TIMEOUT,
            )
        except ValidationError as e:
            raise ConfigurationError(f"invalid settings: {e}") from e
