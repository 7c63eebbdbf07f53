# config.py
from enum import Enum
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

    def api(self) -> str:
        """Base URL of the public REST API for this network"""
        return NETWORK_API_URLS[self]

    @classmethod
    def from_name(cls, name: str) -> "Network":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown network: {name!r}") from None


NETWORK_API_URLS = {
    Network.MAINNET: "https://api.looksrare.org/api/v1",
    Network.TESTNET: "https://api-rinkeby.looksrare.org/api/v1",
}

DEFAULT_REQUEST_TIMEOUT = 30.0
API_KEY_HEADER = "X-Looks-Api-Key"


class Settings(BaseSettings):
    NETWORK: Network = Network.MAINNET
    API_URL: Optional[str] = None  # overrides the network base URL, e.g. for a local mirror
    API_KEY: Optional[str] = None
    REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    @field_validator("NETWORK", mode="before")
    @classmethod
    def _parse_network(cls, value):
        if isinstance(value, str):
            return Network.from_name(value)
        return value

    @property
    def api_url(self) -> str:
        return (self.API_URL or self.NETWORK.api()).rstrip("/")

    class Config:
        env_prefix = "LOOKSRARE_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
