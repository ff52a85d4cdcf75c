from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

from starkbank_sdk.api_client import StarkBankApiClient, resolve_client, rest
from starkbank_sdk.api_client.helpers import (
    check_date,
    check_date_or_datetime,
    check_datetime,
)
from starkbank_sdk.api_client.resource import Resource, ResourceDescriptor

TransferStatus = Literal["created", "processing", "success", "failed", "canceled"]


@dataclass(frozen=True, kw_only=True)
class Transfer(Resource):
    """
    Bank transfer to a receiver account.

    #### Required:
    - amount: value in cents. ex: 1234 (= R$ 12.34)
    - name, tax_id: receiver name and CPF/CNPJ.
    - bank_code: 1 to 3 digits of the receiver bank, or its ISPB for Pix. ex: "341"
    - branch_code: receiver branch. Use "-" before a verifier digit. ex: "1357-9"
    - account_number: receiver account. Use "-" before the verifier digit. ex: "876543-2"

    #### Optional:
    - scheduled: date or datetime when the transfer is processed.
    - tags: strings for later searches.

    #### Return-only:
    - id, fee, status, transaction_ids, created, updated.
    """

    amount: int
    name: str
    tax_id: str
    bank_code: str
    branch_code: str
    account_number: str
    scheduled: date | datetime | str | None = None
    tags: list[str] | None = None
    fee: int | None = None
    status: TransferStatus | None = None
    transaction_ids: list[str] | None = None
    created: datetime | str | None = None
    updated: datetime | str | None = None

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "scheduled", check_date_or_datetime(self.scheduled))
        object.__setattr__(self, "created", check_datetime(self.created))
        object.__setattr__(self, "updated", check_datetime(self.updated))


resource = ResourceDescriptor(name="Transfer", maker=Transfer)


def create(transfers: list[Transfer], client: StarkBankApiClient | None = None) -> list[Transfer]:
    return rest.post(resolve_client(client), resource, transfers)


def get(id: str, client: StarkBankApiClient | None = None) -> Transfer:
    return rest.get_by_id(resolve_client(client), resource, id)


def delete(id: str, client: StarkBankApiClient | None = None) -> Transfer:
    """Cancels a scheduled transfer that was not processed yet."""
    return rest.delete_by_id(resolve_client(client), resource, id)


def pdf(id: str, client: StarkBankApiClient | None = None) -> bytes:
    """Transfer receipt. Only available for "processing" and "success" transfers."""
    return rest.get_pdf(resolve_client(client), resource, id)


def query(
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    transaction_ids: list[str] | None = None,
    status: TransferStatus | None = None,
    tax_id: str | None = None,
    sort: str | None = None,
    tags: list[str] | None = None,
    ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> rest.ResourceQuery:
    return rest.get_list(
        resolve_client(client),
        resource,
        limit=limit,
        after=check_date(after),
        before=check_date(before),
        transaction_ids=transaction_ids,
        status=status,
        tax_id=tax_id,
        sort=sort,
        tags=tags,
        ids=ids,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    transaction_ids: list[str] | None = None,
    status: TransferStatus | None = None,
    tax_id: str | None = None,
    sort: str | None = None,
    tags: list[str] | None = None,
    ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> tuple[list[Transfer], str | None]:
    return rest.get_page(
        resolve_client(client),
        resource,
        cursor=cursor,
        limit=limit,
        after=check_date(after),
        before=check_date(before),
        transaction_ids=transaction_ids,
        status=status,
        tax_id=tax_id,
        sort=sort,
        tags=tags,
        ids=ids,
    )
