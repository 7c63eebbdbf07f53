from looksrare_api.client import LooksRareApi
from looksrare_api.config import Network, Settings
from looksrare_api.exceptions import (
    AccountNotFound, LooksRareApiError, OrdersNotFound, ResponseDecodeError
)
from looksrare_api.models import (
    Account, AccountRequest, Order, OrdersRequest, Pagination, Sort, Status
)
from looksrare_api.query import encode_account_request, encode_orders_request

__all__ = [
    "LooksRareApi",
    "Network",
    "Settings",
    "LooksRareApiError",
    "ResponseDecodeError",
    "AccountNotFound",
    "OrdersNotFound",
    "Account",
    "AccountRequest",
    "Order",
    "OrdersRequest",
    "Pagination",
    "Sort",
    "Status",
    "encode_account_request",
    "encode_orders_request",
]
