from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

from starkbank_sdk.api_client import StarkBankApiClient, resolve_client, rest
from starkbank_sdk.api_client.helpers import check_date, check_datetime
from starkbank_sdk.api_client.resource import Resource, ResourceDescriptor

InvoiceStatus = Literal["created", "paid", "canceled", "overdue", "expired"]


@dataclass(frozen=True, kw_only=True)
class Invoice(Resource):
    """
    Pix charge sent to a payer.

    #### Required:
    - amount: value in cents. ex: 400000 (= R$ 4000.00)
    - tax_id, name: payer CPF/CNPJ and name.

    #### Optional:
    - due: due datetime. API default is now + 2 days.
    - expiration: seconds after due until the invoice expires. ex: 123456789
    - fine: fine for overdue payment in %. ex: 2.5
    - interest: monthly interest for overdue payment in %. ex: 5.2
    - discounts: list of {"percentage": float, "due": datetime}.
    - descriptions: list of {"key": str, "value": str}.
    - tags: strings for later searches.

    #### Return-only:
    - id, pdf, link, nominal_amount, fine_amount, interest_amount,
      discount_amount, brcode, fee, status, created, updated.
    """

    amount: int
    tax_id: str
    name: str
    due: datetime | str | None = None
    expiration: int | None = None
    fine: float | None = None
    interest: float | None = None
    discounts: list[dict] | None = None
    descriptions: list[dict] | None = None
    tags: list[str] | None = None
    pdf: str | None = None
    link: str | None = None
    nominal_amount: int | None = None
    fine_amount: int | None = None
    interest_amount: int | None = None
    discount_amount: int | None = None
    brcode: str | None = None
    fee: int | None = None
    status: InvoiceStatus | None = None
    created: datetime | str | None = None
    updated: datetime | str | None = None

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "due", check_datetime(self.due))
        object.__setattr__(self, "created", check_datetime(self.created))
        object.__setattr__(self, "updated", check_datetime(self.updated))


resource = ResourceDescriptor(name="Invoice", maker=Invoice)


def create(invoices: list[Invoice], client: StarkBankApiClient | None = None) -> list[Invoice]:
    return rest.post(resolve_client(client), resource, invoices)


def get(id: str, client: StarkBankApiClient | None = None) -> Invoice:
    return rest.get_by_id(resolve_client(client), resource, id)


def update(
    id: str,
    status: Literal["canceled"] | None = None,
    amount: int | None = None,
    due: datetime | str | None = None,
    expiration: int | None = None,
    client: StarkBankApiClient | None = None,
) -> Invoice:
    """
    Updates an open Invoice. Sending status="canceled" cancels it.
    Only the given fields are sent.
    """
    return rest.patch_by_id(
        resolve_client(client),
        resource,
        id,
        status=status,
        amount=amount,
        due=check_datetime(due),
        expiration=expiration,
    )


def pdf(id: str, client: StarkBankApiClient | None = None) -> bytes:
    return rest.get_pdf(resolve_client(client), resource, id)


def qrcode(id: str, size: int | None = None, client: StarkBankApiClient | None = None) -> bytes:
    """PNG image of the Invoice Pix QR code. size goes from 1 to 50."""
    return rest.get_content(resolve_client(client), resource, id, "qrcode", size=size)


def query(
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    status: InvoiceStatus | None = None,
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
    status: InvoiceStatus | None = None,
    tags: list[str] | None = None,
    ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> tuple[list[Invoice], str | None]:
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
