# query.py
"""
Query string encoding for LooksRare request models
Pure functions: a request model in, an ordered list of (key, value) pairs out
"""

from enum import Enum
from typing import List, Tuple

from looksrare_api.models import AccountRequest, OrdersRequest

QueryParams = List[Tuple[str, str]]

# (attribute, wire key) in declaration order
ORDERS_SCALAR_FIELDS = (
    ("is_order_ask", "isOrderAsk"),
    ("collection", "collection"),
    ("token_id", "tokenId"),
    ("signer", "signer"),
    ("nonce", "nonce"),
    ("strategy", "strategy"),
    ("currency", "currency"),
    ("price", "price"),
    ("start_time", "startTime"),
)

STATUS_KEY = "status[]"
PAGINATION_FIRST_KEY = "pagination[first]"
PAGINATION_CURSOR_KEY = "pagination[cursor]"
SORT_KEY = "sort"


def to_query_value(value) -> str:
    """Stringify a field value the way the API expects it"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return str(value)


def encode_account_request(request: AccountRequest) -> QueryParams:
    return [("address", request.address)]


def encode_orders_request(request: OrdersRequest) -> QueryParams:
    """
    Encode an OrdersRequest into query parameters.

    Absent fields are skipped. `status` repeats the `status[]` key once per
    element in list order, `pagination` expands to bracketed sub-keys.
    """
    params: QueryParams = []

    for attr, key in ORDERS_SCALAR_FIELDS:
        value = getattr(request, attr)
        if value is not None:
            params.append((key, to_query_value(value)))

    if request.status is not None:
        params.extend((STATUS_KEY, to_query_value(status)) for status in request.status)

    if request.pagination is not None:
        if request.pagination.first is not None:
            params.append((PAGINATION_FIRST_KEY, to_query_value(request.pagination.first)))
        if request.pagination.cursor is not None:
            params.append((PAGINATION_CURSOR_KEY, request.pagination.cursor))

    if request.sort is not None:
        params.append((SORT_KEY, to_query_value(request.sort)))

    return params
