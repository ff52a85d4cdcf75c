from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

from starkbank_sdk.api_client import StarkBankApiClient, resolve_client, rest
from starkbank_sdk.api_client.exceptions import StarkBankValueError
from starkbank_sdk.api_client.helpers import check_date, check_datetime
from starkbank_sdk.api_client.resource import Resource, ResourceDescriptor

UtilityPaymentStatus = Literal["created", "processing", "success", "failed", "canceled"]


@dataclass(frozen=True, kw_only=True)
class UtilityPayment(Resource):
    """
    Payment of a utility bill (water, power, phone...) identified by its bar code.

    Either line or bar_code must be given before calling create.

    - line: digitable line. ex: "83660000001 3 08400010100 6 ..."
    - bar_code: bar code number. ex: "83660000001084000101008143100010601813"
    - description: text to identify the payment.
    - scheduled: payment date. API default is today.
    - tags: strings for later searches.

    Return-only: id, amount, fee, status, created.
    """

    description: str
    line: str | None = None
    bar_code: str | None = None
    scheduled: date | str | None = None
    tags: list[str] | None = None
    amount: int | None = None
    fee: int | None = None
    status: UtilityPaymentStatus | None = None
    created: datetime | str | None = None

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "scheduled", check_date(self.scheduled))
        object.__setattr__(self, "created", check_datetime(self.created))


resource = ResourceDescriptor(name="UtilityPayment", maker=UtilityPayment)


def create(payments: list[UtilityPayment], client: StarkBankApiClient | None = None) -> list[UtilityPayment]:
    for payment in payments:
        if not (payment.line or payment.bar_code):
            raise StarkBankValueError("Either line or bar_code must be provided")
    return rest.post(resolve_client(client), resource, payments)


def get(id: str, client: StarkBankApiClient | None = None) -> UtilityPayment:
    return rest.get_by_id(resolve_client(client), resource, id)


def pdf(id: str, client: StarkBankApiClient | None = None) -> bytes:
    return rest.get_pdf(resolve_client(client), resource, id)


def query(
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    status: UtilityPaymentStatus | None = None,
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
        status=status,
        tags=tags,
        ids=ids,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    status: UtilityPaymentStatus | None = None,
    tags: list[str] | None = None,
    ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> tuple[list[UtilityPayment], str | None]:
    return rest.get_page(
        resolve_client(client),
        resource,
        cursor=cursor,
        limit=limit,
        after=check_date(after),
        before=check_date(before),
        status=status,
        tags=tags,
        ids=ids,
    )


def delete(id: str, client: StarkBankApiClient | None = None) -> UtilityPayment:
    return rest.delete_by_id(resolve_client(client), resource, id)
