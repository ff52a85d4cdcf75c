from dataclasses import dataclass
from datetime import date, datetime

from starkbank_sdk.api_client import StarkBankApiClient, resolve_client, rest
from starkbank_sdk.api_client.helpers import check_date, check_datetime
from starkbank_sdk.api_client.resource import Resource, ResourceDescriptor, log_maker
from starkbank_sdk.boleto.boleto import Boleto, resource as boleto_resource


@dataclass(frozen=True, kw_only=True)
class Log(Resource):
    """
    Generated by the API every time a Boleto changes. Never created by the user.

    - boleto: the Boleto as it was when the event happened.
    - errors: errors linked to the event.
    - type: event that triggered the log. ex: "registered" or "paid"
    - created: creation datetime of the log.
    """

    created: datetime | str
    type: str
    errors: list[str]
    boleto: Boleto

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "created", check_datetime(self.created))


resource = ResourceDescriptor(
    name="BoletoLog", maker=log_maker(Log, "boleto", boleto_resource)
)


def get(id: str, client: StarkBankApiClient | None = None) -> Log:
    return rest.get_by_id(resolve_client(client), resource, id)


def query(
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    types: list[str] | str | None = None,
    boleto_ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> rest.ResourceQuery:
    return rest.get_list(
        resolve_client(client),
        resource,
        limit=limit,
        after=check_date(after),
        before=check_date(before),
        types=types,
        boleto_ids=boleto_ids,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    types: list[str] | str | None = None,
    boleto_ids: list[str] | None = None,
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
        boleto_ids=boleto_ids,
    )
