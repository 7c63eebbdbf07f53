"""Errors raised by the LooksRare client.

Transport failures are not wrapped: they reach the caller as the
``aiohttp.ClientError`` raised by the session.
"""

from typing import Optional


class LooksRareApiError(Exception):
    """Base class for every error produced while decoding an API response."""


class ResponseDecodeError(LooksRareApiError):
    """The body is not JSON or does not match the expected envelope."""

    def __init__(self, detail: str, status: Optional[int] = None, message: Optional[str] = None):
        self.detail = detail
        self.status = status
        self.message = message
        text = f"Could not decode response (status: {status}): {detail}"
        if message:
            text += f" - API message: {message}"
        super().__init__(text)


class AccountNotFound(LooksRareApiError):
    def __init__(self, address: str, message: Optional[str] = None):
        self.address = address
        self.message = message
        super().__init__(f"Account not found (address: {address})")


class OrdersNotFound(LooksRareApiError):
    def __init__(self, message: Optional[str] = None):
        self.message = message
        super().__init__("Orders not found" + (f": {message}" if message else ""))
