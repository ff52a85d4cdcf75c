from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

from starkbank_sdk.api_client import StarkBankApiClient, resolve_client, rest
from starkbank_sdk.api_client.helpers import check_date, check_datetime
from starkbank_sdk.api_client.resource import Resource, ResourceDescriptor

BoletoStatus = Literal["created", "registered", "overdue", "paid", "canceled", "failed"]
PdfLayout = Literal["default", "booklet"]


@dataclass(frozen=True, kw_only=True)
class Boleto(Resource):
    """
    Boleto (payment slip) charged to a payer.

    A locally built Boleto is not sent to the API until `create` is called.
    `create` returns new Boleto objects with the return-only fields filled.

    #### Required:
    - amount: value in cents. Minimum 200. ex: 1234 (= R$ 12.34)
    - name, tax_id: payer name and CPF/CNPJ, with or without formatting.
    - street_line_1, street_line_2, district, city, state_code, zip_code: payer address.

    #### Optional:
    - due: due date. API default is today + 2 days.
    - fine: fine for overdue payment in %. ex: 2.5
    - interest: monthly interest for overdue payment in %. ex: 5.2
    - overdue_limit: days until automatic cancellation after due date (max 59).
    - receiver_name, receiver_tax_id: final receiver, when not the project owner.
    - descriptions: list of {"text": str, "amount": int}.
    - discounts: list of {"percentage": float, "date": date}.
    - tags: strings for later searches.

    #### Return-only:
    - id, fee, line, bar_code, our_number, status, created.
    """

    amount: int
    name: str
    tax_id: str
    street_line_1: str
    street_line_2: str
    district: str
    city: str
    state_code: str
    zip_code: str
    due: date | str | None = None
    fine: float | None = None
    interest: float | None = None
    overdue_limit: int | None = None
    receiver_name: str | None = None
    receiver_tax_id: str | None = None
    tags: list[str] | None = None
    descriptions: list[dict] | None = None
    discounts: list[dict] | None = None
    fee: int | None = None
    line: str | None = None
    bar_code: str | None = None
    our_number: str | None = None
    status: BoletoStatus | None = None
    created: datetime | str | None = None

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "due", check_date(self.due))
        object.__setattr__(self, "created", check_datetime(self.created))


resource = ResourceDescriptor(name="Boleto", maker=Boleto)


def create(boletos: list[Boleto], client: StarkBankApiClient | None = None) -> list[Boleto]:
    return rest.post(resolve_client(client), resource, boletos)


def get(id: str, client: StarkBankApiClient | None = None) -> Boleto:
    return rest.get_by_id(resolve_client(client), resource, id)


def pdf(id: str, layout: PdfLayout | None = None, client: StarkBankApiClient | None = None) -> bytes:
    """Boleto PDF file. layout "booklet" prints the payment booklet version."""
    return rest.get_pdf(resolve_client(client), resource, id, layout=layout)


def query(
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    status: BoletoStatus | None = None,
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
    status: BoletoStatus | None = None,
    tags: list[str] | None = None,
    ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> tuple[list[Boleto], str | None]:
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


def delete(id: str, client: StarkBankApiClient | None = None) -> Boleto:
    return rest.delete_by_id(resolve_client(client), resource, id)
