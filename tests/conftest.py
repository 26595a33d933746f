"""Pytest configuration and fixtures for accounts-client tests."""

import json
from typing import Any, Dict, List, Optional
from urllib.parse import unquote

import httpx
import pytest
import respx

from accounts_client.config import reset_settings


ACCOUNT_ID = "0d27e265-9605-4b4b-a0e5-3003ea9cc4db"
ORGANISATION_ID = "eb0bd6f5-c3f5-44b2-b677-acd23cdde73b"
ACCOUNTS_PATH = "/v1/organisation/accounts"


# ============================================================================
# Payload Builders
# ============================================================================


def make_account_data(
    id: str = ACCOUNT_ID,
    organisation_id: str = ORGANISATION_ID,
    attributes: Optional[Dict[str, Any]] = None,
    version: int = 0,
) -> Dict[str, Any]:
    """Build an account resource as the service returns it."""
    return {
        "type": "accounts",
        "id": id,
        "organisation_id": organisation_id,
        "version": version,
        "created_on": "2021-03-01T10:00:00.000Z",
        "modified_on": "2021-03-01T10:00:00.000Z",
        "attributes": attributes if attributes is not None else {
            "country": "GB",
            "base_currency": "GBP",
            "bank_id": "400300",
            "bank_id_code": "GBDSC",
            "bic": "NWBKGB22",
        },
    }


def make_account_response(**kwargs: Any) -> Dict[str, Any]:
    data = make_account_data(**kwargs)
    return {
        "data": data,
        "links": {"self": f"{ACCOUNTS_PATH}/{data['id']}"},
    }


# ============================================================================
# In-memory Accounts Service
# ============================================================================


class FakeAccountsService:
    """
    Minimal stand-in for the accounts API, mounted via httpx.MockTransport.

    Accounts are listed in creation order. Pagination follows the
    page[number]/page[size] query parameters; the default page size is 100.
    """

    def __init__(self) -> None:
        self.accounts: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.rstrip("/")

        if path == ACCOUNTS_PATH:
            if request.method == "POST":
                return self._create(request)
            if request.method == "GET":
                return self._list(request)
        elif path.startswith(ACCOUNTS_PATH + "/"):
            account_id = unquote(path[len(ACCOUNTS_PATH) + 1:])
            if request.method == "GET":
                return self._fetch(account_id)
            if request.method == "DELETE":
                return self._delete(account_id, request)

        return self._error(404, "not found")

    @staticmethod
    def _error(status_code: int, message: str) -> httpx.Response:
        return httpx.Response(status_code, json={"error_message": message})

    def _create(self, request: httpx.Request) -> httpx.Response:
        data = json.loads(request.content)["data"]
        if data["id"] in self.accounts:
            return self._error(409, "Account cannot be created as it violates a duplicate constraint")
        account = {
            **data,
            "version": 0,
            "created_on": "2021-03-01T10:00:00.000Z",
            "modified_on": "2021-03-01T10:00:00.000Z",
        }
        self.accounts[data["id"]] = account
        return httpx.Response(
            201,
            json={"data": account, "links": {"self": f"{ACCOUNTS_PATH}/{data['id']}"}},
        )

    def _fetch(self, account_id: str) -> httpx.Response:
        account = self.accounts.get(account_id)
        if account is None:
            return self._error(404, f"record {account_id} does not exist")
        return httpx.Response(
            200,
            json={"data": account, "links": {"self": f"{ACCOUNTS_PATH}/{account_id}"}},
        )

    def _delete(self, account_id: str, request: httpx.Request) -> httpx.Response:
        account = self.accounts.get(account_id)
        if account is None:
            return httpx.Response(404)
        if str(account["version"]) != request.url.params.get("version"):
            return self._error(409, "invalid version")
        del self.accounts[account_id]
        return httpx.Response(204)

    def _list(self, request: httpx.Request) -> httpx.Response:
        number = int(request.url.params.get("page[number]", 0))
        size = int(request.url.params.get("page[size]", 100))
        ordered = list(self.accounts.values())
        start = number * size
        return httpx.Response(
            200,
            json={
                "data": ordered[start:start + size],
                "links": {"self": request.url.raw_path.decode()},
            },
        )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep environment and programmatic settings from leaking between tests."""
    for name in ("ACCOUNTS_API_BASE_URL", "ACCOUNTS_API_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return "http://accountapi:8080"


@pytest.fixture
def attributes_data():
    """Sample account attributes."""
    return {
        "country": "GB",
        "base_currency": "GBP",
        "bank_id": "400300",
        "bank_id_code": "GBDSC",
        "bic": "NWBKGB22",
    }


@pytest.fixture
def api(base_url):
    """respx router scoped to the test base URL."""
    with respx.mock(base_url=base_url, assert_all_called=False) as router:
        yield router


@pytest.fixture
def fake_service():
    return FakeAccountsService()


@pytest.fixture
def service_client(base_url, fake_service):
    """AccountsClient wired to the in-memory service."""
    from accounts_client import AccountsClient

    with httpx.Client(transport=fake_service.transport()) as http_client:
        with AccountsClient(base_url, http_client=http_client) as client:
            yield client
