# models.py
"""
Pydantic models for the LooksRare REST API
Domain types, request models and the response envelope
"""

import re
from enum import Enum, unique
from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field
from web3 import Web3


# ============================================================================
# SCALAR TYPES
# ============================================================================

_HEX_ADDRESS = re.compile(r"0x[0-9a-fA-F]{40}")
_DECIMAL = re.compile(r"[0-9]+")


def to_address(value: str) -> str:
    """Normalize a 20-byte hex address (any letter case) to its checksummed form"""
    if not _HEX_ADDRESS.fullmatch(value):
        raise ValueError(f"not a 20-byte hex address: {value!r}")
    return Web3.to_checksum_address(value)


def to_decimal_string(value):
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"negative value: {value}")
        return str(value)
    if isinstance(value, str) and not _DECIMAL.fullmatch(value):
        raise ValueError(f"not a decimal string: {value!r}")
    return value


Address = Annotated[str, AfterValidator(to_address)]
DecimalString = Annotated[str, BeforeValidator(to_decimal_string)]
Uint256 = Annotated[int, Field(ge=0, lt=2**256)]
Uint64 = Annotated[int, Field(ge=0, lt=2**64)]


# ============================================================================
# ENUMERATIONS - member values are the wire tokens
# ============================================================================

class WireToken(str, Enum):
    def to_str(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, token: str):
        return cls(token)


@unique
class Status(WireToken):
    CANCELLED = "CANCELLED"
    EXECUTED = "EXECUTED"
    EXPIRED = "EXPIRED"
    VALID = "VALID"


@unique
class Sort(WireToken):
    EXPIRING_SOON = "EXPIRING_SOON"
    NEWEST = "NEWEST"
    PRICE_ASC = "PRICE_ASC"
    PRICE_DESC = "PRICE_DESC"


# ============================================================================
# DOMAIN TYPES
# ============================================================================

class Account(BaseModel):
    """User profile returned by the accounts endpoint"""
    address: Address
    name: Optional[str] = None
    biography: Optional[str] = None
    website_link: Optional[str] = Field(default=None, alias="websiteLink")
    instagram_link: Optional[str] = Field(default=None, alias="instagramLink")
    twitter_link: Optional[str] = Field(default=None, alias="twitterLink")
    is_verified: Optional[bool] = Field(default=None, alias="isVerified")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    class Config:
        frozen = True
        extra = "allow"
        populate_by_name = True


class Order(BaseModel):
    """Maker order returned by the orders endpoint"""
    hash: Optional[str] = None
    collection_address: Address = Field(alias="collectionAddress")
    token_id: DecimalString = Field(alias="tokenId")
    is_order_ask: bool = Field(alias="isOrderAsk")
    signer: Address
    strategy: Address
    currency: Address = Field(alias="currencyAddress")
    amount: Optional[int] = None
    price: Uint256
    nonce: DecimalString
    start_time: Uint64 = Field(alias="startTime")
    end_time: Optional[Uint64] = Field(default=None, alias="endTime")
    min_percentage_to_ask: Optional[int] = Field(default=None, alias="minPercentageToAsk")
    params: Optional[str] = None
    status: str
    signature: Optional[str] = None
    v: Optional[int] = None
    r: Optional[str] = None
    s: Optional[str] = None

    @property
    def status_enum(self) -> Status:
        return Status.from_str(self.status)

    class Config:
        frozen = True
        extra = "allow"
        populate_by_name = True


# ============================================================================
# REQUEST MODELS
# ============================================================================

class Pagination(BaseModel):
    first: Optional[Uint64] = None
    cursor: Optional[str] = None

    class Config:
        frozen = True
        extra = "forbid"


class AccountRequest(BaseModel):
    address: Address

    class Config:
        frozen = True
        extra = "forbid"


class OrdersRequest(BaseModel):
    """
    Filters for the orders endpoint. Every field is optional;
    an empty request asks for the unfiltered, default-sorted first page.

    `status` distinguishes None (no filter) from [] (explicitly empty).
    """
    is_order_ask: Optional[bool] = None
    collection: Optional[Address] = None
    token_id: Optional[DecimalString] = None
    signer: Optional[Address] = None
    nonce: Optional[DecimalString] = None
    strategy: Optional[Address] = None
    currency: Optional[Address] = None
    price: Optional[Uint256] = None
    start_time: Optional[Uint64] = None
    status: Optional[List[Status]] = None
    pagination: Optional[Pagination] = None
    sort: Optional[Sort] = None

    class Config:
        frozen = True
        extra = "forbid"


# ============================================================================
# RESPONSE ENVELOPE
# ============================================================================

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Outer object of every API response; `data` is absent when nothing matched"""
    success: bool
    message: Optional[str] = None
    data: Optional[T] = None


AccountResponse = Envelope[Account]
OrdersResponse = Envelope[List[Order]]
