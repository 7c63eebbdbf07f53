"""
LooksRare REST API client
Read-only access to accounts and orders over aiohttp
"""

import json
import logging
from typing import Callable, List, Optional, Tuple, Type, TypeVar, Union

import aiohttp
from pydantic import ValidationError

from looksrare_api.config import API_KEY_HEADER, DEFAULT_REQUEST_TIMEOUT, Network, Settings
from looksrare_api.config import settings as default_settings
from looksrare_api.exceptions import (
    AccountNotFound, LooksRareApiError, OrdersNotFound, ResponseDecodeError
)
from looksrare_api.models import (
    Account, AccountRequest, AccountResponse, Envelope, Order, OrdersRequest, OrdersResponse
)
from looksrare_api.query import QueryParams, encode_account_request, encode_orders_request

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Envelope)


def _envelope_message(body: Union[str, bytes]) -> Optional[str]:
    """Best-effort read of the envelope `message` from a body that failed validation"""
    try:
        parsed = json.loads(body)
    except ValueError:
        return None
    if isinstance(parsed, dict) and isinstance(parsed.get("message"), str):
        return parsed["message"]
    return None


def decode_envelope(model: Type[E], body: Union[str, bytes], status: Optional[int] = None) -> E:
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise ResponseDecodeError(str(e), status=status, message=_envelope_message(body)) from e


def unwrap_envelope(envelope: Envelope, not_found: Callable[[Optional[str]], LooksRareApiError]):
    """Return the envelope payload, or raise the endpoint's not-found error when it is absent"""
    if envelope.data is None:
        raise not_found(envelope.message)
    return envelope.data


class LooksRareApi:
    """
    Client for the LooksRare public API:
    - GET /accounts  -> Account
    - GET /orders    -> list of Order

    A session passed in by the caller is shared and never closed here;
    otherwise the client opens its own on first use and closes it in close().
    """

    def __init__(
        self,
        network: Network = Network.MAINNET,
        session: Optional[aiohttp.ClientSession] = None,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        self.network = network
        self.api_url = (api_url or network.api()).rstrip("/")
        self.timeout = timeout
        self.headers = {API_KEY_HEADER: api_key} if api_key else {}
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, session: Optional[aiohttp.ClientSession] = None
    ) -> "LooksRareApi":
        settings = settings or default_settings
        return cls(
            network=settings.NETWORK,
            session=session,
            api_url=settings.api_url,
            api_key=settings.API_KEY,
            timeout=settings.REQUEST_TIMEOUT,
        )

    async def __aenter__(self) -> "LooksRareApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def _get(self, path: str, params: QueryParams) -> Tuple[int, bytes]:
        """Issue a GET and return (status, raw body). 5xx responses raise ClientResponseError."""
        url = f"{self.api_url}/{path}"
        logger.debug("GET %s params=%s", url, params)

        async with self._get_session().get(url, params=params, headers=self.headers) as resp:
            logger.debug("GET %s -> %s", url, resp.status)
            if resp.status >= 500:
                resp.raise_for_status()
            body = await resp.read()

        return resp.status, body

    async def get_account(self, request: AccountRequest) -> Account:
        """Fetch the account profile for an address"""
        status, body = await self._get("accounts", encode_account_request(request))
        envelope = decode_envelope(AccountResponse, body, status)

        return unwrap_envelope(
            envelope, lambda message: AccountNotFound(request.address, message)
        )

    async def get_orders(self, request: OrdersRequest) -> List[Order]:
        """Fetch orders matching the request filters, in server order"""
        status, body = await self._get("orders", encode_orders_request(request))
        envelope = decode_envelope(OrdersResponse, body, status)

        return unwrap_envelope(envelope, OrdersNotFound)
