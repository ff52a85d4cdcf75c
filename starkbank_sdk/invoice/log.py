from dataclasses import dataclass
from datetime import date, datetime

from starkbank_sdk.api_client import StarkBankApiClient, resolve_client, rest
from starkbank_sdk.api_client.helpers import check_date, check_datetime
from starkbank_sdk.api_client.resource import Resource, ResourceDescriptor, log_maker
from starkbank_sdk.invoice.invoice import Invoice, resource as invoice_resource


@dataclass(frozen=True, kw_only=True)
class Log(Resource):
    """
    Invoice event log. type is the event that changed the Invoice,
    ex: "created", "paid", "credited", "canceled" or "overdue".
    """

    created: datetime | str
    type: str
    errors: list[str]
    invoice: Invoice

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "created", check_datetime(self.created))


resource = ResourceDescriptor(
    name="InvoiceLog", maker=log_maker(Log, "invoice", invoice_resource)
)


def get(id: str, client: StarkBankApiClient | None = None) -> Log:
    return rest.get_by_id(resolve_client(client), resource, id)


def query(
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    types: list[str] | str | None = None,
    invoice_ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> rest.ResourceQuery:
    return rest.get_list(
        resolve_client(client),
        resource,
        limit=limit,
        after=check_date(after),
        before=check_date(before),
        types=types,
        invoice_ids=invoice_ids,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    types: list[str] | str | None = None,
    invoice_ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> tuple[list[Log], str | None]:
    return rest.get_page(
        resolve_client(client),
        resource,
        cursor=cursor,
        limit=limit,
        after=check_date(after),
        before=check_date(before),
        types=types,
        invoice_ids=invoice_ids,
    )
