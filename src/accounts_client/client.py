"""
Organisation accounts API client.

This module provides the AccountsClient class, the primary entry point
for creating, fetching, deleting and listing accounts.
"""

from typing import Any, Dict, Optional, Type, TypeVar, Union
from urllib.parse import quote
import logging

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from accounts_client.config import AccountsClientSettings
from accounts_client.exceptions import DecodeError
from accounts_client.http import HTTPClient
from accounts_client.models import (
    ACCOUNT_TYPE,
    Account,
    AccountAttributes,
    AccountCreateRequest,
    AccountResponse,
    AccountsResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

ACCOUNTS_PATH = "/v1/organisation/accounts"


class AccountsClient:
    """
    Client for the organisation accounts endpoints.

    The client holds no state between calls apart from its configuration
    and the underlying HTTP client, so one instance may be shared.

    Example usage:
        ```python
        with AccountsClient(base_url="http://localhost:8080") as client:
            account = client.create(
                "ad27e265-9605-4b4b-a0e5-3003ea9cc4dc",
                "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c",
                AccountAttributes(country="GB", bank_id="400300"),
            )
            client.fetch(account.id)
            client.delete(account.id, account.version)
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        http_client: Optional[httpx.Client] = None,
        settings: Optional[AccountsClientSettings] = None,
    ):
        """
        Initialize the accounts client.

        Args:
            base_url: Base URL for the API (default from settings)
            timeout: Request timeout in seconds (default from settings)
            headers: Additional headers to include in all requests
            http_client: Pre-configured httpx.Client, e.g. for custom TLS or proxies
            settings: Settings to resolve defaults from
        """
        self._http = HTTPClient(
            base_url,
            timeout=timeout,
            headers=headers,
            client=http_client,
            settings=settings,
        )

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return self._http.base_url

    @property
    def http(self) -> HTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _item_path(id: str) -> str:
        return f"{ACCOUNTS_PATH}/{quote(str(id), safe='')}"

    @staticmethod
    def _decode(model: Type[T], content: bytes) -> T:
        """Decode a response body into the given model."""
        try:
            return model.model_validate_json(content)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Invalid {model.__name__} payload: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    @staticmethod
    def _encode(
        id: str,
        organisation_id: str,
        attributes: Union[AccountAttributes, Dict[str, Any], None],
    ) -> bytes:
        """Build and serialize a create request."""
        try:
            if not isinstance(attributes, AccountAttributes):
                attributes = AccountAttributes.model_validate(attributes or {})
            request = AccountCreateRequest(
                data=Account(
                    id=id,
                    organisation_id=organisation_id,
                    type=ACCOUNT_TYPE,
                    attributes=attributes,
                )
            )
        except PydanticValidationError as e:
            raise DecodeError(
                f"Invalid account payload: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e
        return request.model_dump_json(exclude_none=True).encode("utf-8")

    # =========================================================================
    # Operations
    # =========================================================================

    def create(
        self,
        id: str,
        organisation_id: str,
        attributes: Union[AccountAttributes, Dict[str, Any]],
    ) -> Account:
        """
        Create an account.

        Args:
            id: Caller-chosen account identifier
            organisation_id: Owning organisation identifier
            attributes: Account attributes (model or plain dict)

        Returns:
            The account as stored by the service

        Raises:
            DecodeError: If the payload cannot be built or the response parsed
            ConflictError: If an account with the same id exists
            RemoteError: On any other non-2xx response
            TransportError: If the service could not be reached
        """
        body = self._encode(id, organisation_id, attributes)
        content = self._http.post(ACCOUNTS_PATH, body)
        account = self._decode(AccountResponse, content).data
        logger.debug("Created account %s (version %s)", account.id, account.version)
        return account

    def fetch(self, id: str) -> Account:
        """
        Fetch a single account by id.

        Raises:
            NotFoundError: If the account does not exist (HTTP 404)
        """
        content = self._http.get(self._item_path(id))
        return self._decode(AccountResponse, content).data

    def delete(self, id: str, version: int) -> None:
        """
        Delete an account.

        The service rejects the request if version does not match the
        stored version. The response body is ignored.

        Raises:
            DecodeError: If version is not an integer (e.g. unset)
            ConflictError: If version is stale
            NotFoundError: If the account does not exist
        """
        if not isinstance(version, int) or isinstance(version, bool):
            raise DecodeError(
                f"Account version must be an integer, got {version!r}",
                details={"id": id, "version": version},
            )
        self._http.delete(f"{self._item_path(id)}?version={version:d}")
        logger.debug("Deleted account %s (version %s)", id, version)

    def list(self) -> AccountsResponse:
        """List accounts using the service's default paging."""
        return self._list(ACCOUNTS_PATH)

    def list_page(self, page_number: int, page_size: int) -> AccountsResponse:
        """
        List one page of accounts.

        Args:
            page_number: Zero-based page number
            page_size: Maximum number of accounts on the page

        Values are sent as given; the service decides how to treat them.
        """
        return self._list(
            f"{ACCOUNTS_PATH}/?page[number]={page_number}&page[size]={page_size}"
        )

    def _list(self, path: str) -> AccountsResponse:
        content = self._http.get(path)
        return self._decode(AccountsResponse, content)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()
        logger.debug("Client closed")

    def __enter__(self) -> "AccountsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
