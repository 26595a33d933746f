"""
Accounts Client Library.

A typed HTTP client for the organisation accounts API.

Example usage:
    ```python
    from accounts_client import AccountsClient, AccountAttributes, NotFoundError

    with AccountsClient(base_url="http://localhost:8080") as client:
        account = client.create(
            "ad27e265-9605-4b4b-a0e5-3003ea9cc4dc",
            "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c",
            AccountAttributes(country="GB", base_currency="GBP", bank_id="400300"),
        )

        page = client.list_page(0, 10)

        client.delete(account.id, account.version)

        try:
            client.fetch(account.id)
        except NotFoundError:
            pass
    ```
"""

__version__ = "0.1.0"

# Main client
from accounts_client.client import AccountsClient

# HTTP transport (for advanced usage)
from accounts_client.http import HTTPClient, JSON_API_MEDIA_TYPE

# Configuration
from accounts_client.config import (
    DEFAULT_BASE_URL,
    AccountsClientSettings,
    configure_settings,
    get_settings,
)

# Models
from accounts_client.models import (
    Account,
    AccountAttributes,
    AccountCreateRequest,
    AccountResponse,
    AccountsResponse,
)

# Exceptions
from accounts_client.exceptions import (
    # Base exception
    AccountsClientError,
    # Transport errors
    TransportError,
    TimeoutError,
    ConnectionError,
    # Remote errors
    RemoteError,
    ValidationError,
    NotFoundError,
    ConflictError,
    ServerError,
    # Decode errors
    DecodeError,
    # Utilities
    exception_from_response,
)

__all__ = [
    "__version__",
    "AccountsClient",
    "HTTPClient",
    "JSON_API_MEDIA_TYPE",
    "DEFAULT_BASE_URL",
    "AccountsClientSettings",
    "configure_settings",
    "get_settings",
    "Account",
    "AccountAttributes",
    "AccountCreateRequest",
    "AccountResponse",
    "AccountsResponse",
    "AccountsClientError",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "RemoteError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
    "DecodeError",
    "exception_from_response",
]
