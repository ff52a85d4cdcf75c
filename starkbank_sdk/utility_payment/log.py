from dataclasses import dataclass
from datetime import date, datetime

from starkbank_sdk.api_client import StarkBankApiClient, resolve_client, rest
from starkbank_sdk.api_client.helpers import check_date, check_datetime
from starkbank_sdk.api_client.resource import Resource, ResourceDescriptor, log_maker
from starkbank_sdk.utility_payment.utility_payment import UtilityPayment, resource as payment_resource


@dataclass(frozen=True, kw_only=True)
class Log(Resource):
    created: datetime | str
    type: str
    errors: list[str]
    payment: UtilityPayment

    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "created", check_datetime(self.created))


resource = ResourceDescriptor(
    name="UtilityPaymentLog", maker=log_maker(Log, "payment", payment_resource)
)


def get(id: str, client: StarkBankApiClient | None = None) -> Log:
    return rest.get_by_id(resolve_client(client), resource, id)


def query(
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    types: list[str] | str | None = None,
    payment_ids: list[str] | None = None,
    client: StarkBankApiClient | None = None,
) -> rest.ResourceQuery:
    return rest.get_list(
        resolve_client(client),
        resource,
        limit=limit,
        after=check_date(after),
        before=check_date(before),
        types=types,
        payment_ids=payment_ids,
    )


def page(
    cursor: str | None = None,
    limit: int | None = None,
    after: date | str | None = None,
    before: date | str | None = None,
    types: list[str] | str | None = None,
    payment_ids: list[str] | None = None,
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
        payment_ids=payment_ids,
    )
