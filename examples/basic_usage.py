"""
Basic usage example for the accounts client.

This example demonstrates:
- Client initialization
- Create, fetch, list and delete
- Error handling

Run against a local instance of the accounts API:

    ACCOUNTS_API_BASE_URL=http://localhost:8080 python examples/basic_usage.py
"""

import uuid

from accounts_client import (
    AccountAttributes,
    AccountsClient,
    ConflictError,
    NotFoundError,
    TransportError,
)


def main():
    """Main example function."""

    account_id = str(uuid.uuid4())
    organisation_id = str(uuid.uuid4())

    # Base URL comes from ACCOUNTS_API_BASE_URL when not passed explicitly
    with AccountsClient() as client:
        try:
            print(f"Creating account {account_id} on {client.base_url}...")
            account = client.create(
                account_id,
                organisation_id,
                AccountAttributes(
                    country="GB",
                    base_currency="GBP",
                    bank_id="400300",
                    bank_id_code="GBDSC",
                    bic="NWBKGB22",
                ),
            )
            print(f"Created account (version {account.version})")

            fetched = client.fetch(account_id)
            print(f"Fetched account, BIC {fetched.attributes.bic}")

            page = client.list_page(0, 10)
            print(f"First page holds {len(page.data)} accounts")
            for item in page.data:
                print(f"  - {item.id} ({item.attributes.country})")

            try:
                client.delete(account_id, fetched.version + 1)
            except ConflictError as e:
                print(f"Stale version rejected: {e}")

            client.delete(account_id, fetched.version)
            print("Deleted account")

            try:
                client.fetch(account_id)
            except NotFoundError:
                print("Account no longer exists")

        except TransportError as e:
            print(f"Could not reach the accounts API: {e}")


if __name__ == "__main__":
    main()
