"""
Pydantic models for the organisation accounts resource and its JSON:API envelopes.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

ACCOUNT_TYPE = "accounts"


class AccountAttributes(BaseModel):
    """
    Domain fields of an account.

    Attributes not modelled here are kept as extra fields and written
    back out on serialization.
    """

    bank_id: Optional[str] = Field(None, description="Local bank identifier (e.g. sort code)")
    bank_id_code: Optional[str] = Field(None, description="Bank identifier scheme code (e.g. GBDSC)")
    base_currency: Optional[str] = Field(None, description="ISO 4217 currency code")
    bic: Optional[str] = Field(None, description="SWIFT BIC")
    country: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 country code")

    account_number: Optional[str] = None
    iban: Optional[str] = None
    name: Optional[List[str]] = None
    alternative_names: Optional[List[str]] = None
    account_classification: Optional[str] = None
    joint_account: Optional[bool] = None
    account_matching_opt_out: Optional[bool] = None
    secondary_identification: Optional[str] = None
    switched: Optional[bool] = None
    status: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class Account(BaseModel):
    id: str = Field(description="Caller-supplied account identifier")
    organisation_id: str = Field(description="Owning organisation identifier")
    type: str = Field(ACCOUNT_TYPE, description="Resource type discriminator")
    version: Optional[int] = Field(None, description="Optimistic-concurrency token")
    created_on: Optional[str] = None
    modified_on: Optional[str] = None
    attributes: AccountAttributes = Field(default_factory=AccountAttributes)


class AccountResponse(BaseModel):
    """Single-resource envelope."""

    data: Account
    links: Dict[str, str] = Field(default_factory=dict)


class AccountsResponse(BaseModel):
    """Collection envelope. Pagination links are passed through untouched."""

    data: List[Account] = Field(default_factory=list)
    links: Dict[str, str] = Field(default_factory=dict)

    @property
    def ids(self) -> List[str]:
        return [account.id for account in self.data]


class AccountCreateRequest(BaseModel):
    """Outbound envelope for account creation."""

    data: Account
