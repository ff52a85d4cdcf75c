import logging
from typing import Any, Iterator

from starkbank_sdk.api_client.abstract_client import StarkBankAbstractApiClient
from starkbank_sdk.api_client.exceptions import StarkBankValueError
from starkbank_sdk.api_client.helpers import build_query_params, to_api_json, to_wire_value
from starkbank_sdk.api_client.resource import ResourceDescriptor

logger = logging.getLogger("starkbankLogger")

MAX_PAGE_SIZE = 100


def _check_id(id: str) -> str:
    if not id:
        raise StarkBankValueError("id not provided")
    return str(id)


def post(client: StarkBankAbstractApiClient, resource: ResourceDescriptor, entities: list) -> list:
    entities = list(entities)
    payload = {resource.last_name_plural: [to_api_json(entity) for entity in entities]}
    response = client.post(resource.endpoint, data=payload)
    created = [resource.make(json) for json in response[resource.last_name_plural]]
    logger.info(f"{resource.name}: {len(created)} created")
    return created


def get_by_id(client: StarkBankAbstractApiClient, resource: ResourceDescriptor, id: str) -> Any:
    response = client.get(f"{resource.endpoint}/{_check_id(id)}")
    return resource.make(response[resource.last_name])


def delete_by_id(client: StarkBankAbstractApiClient, resource: ResourceDescriptor, id: str) -> Any:
    response = client.delete(f"{resource.endpoint}/{_check_id(id)}")
    logger.info(f"{resource.name} {id} deleted")
    return resource.make(response[resource.last_name])


def patch_by_id(
    client: StarkBankAbstractApiClient, resource: ResourceDescriptor, id: str, **changes
) -> Any:
    payload = {key: value for key, value in changes.items() if value is not None}
    if not payload:
        raise StarkBankValueError("No changes provided")
    response = client.patch(
        f"{resource.endpoint}/{_check_id(id)}", data=to_wire_value(payload)
    )
    logger.info(f"{resource.name} {id} updated: {', '.join(payload)}")
    return resource.make(response[resource.last_name])


def get_content(
    client: StarkBankAbstractApiClient,
    resource: ResourceDescriptor,
    id: str,
    sub_resource: str,
    **params,
) -> bytes:
    return client.get_content(
        f"{resource.endpoint}/{_check_id(id)}/{sub_resource}",
        params=build_query_params(**params),
    )


def get_pdf(client: StarkBankAbstractApiClient, resource: ResourceDescriptor, id: str, **params) -> bytes:
    return get_content(client, resource, id, "pdf", **params)


def get_page(
    client: StarkBankAbstractApiClient,
    resource: ResourceDescriptor,
    cursor: str | None = None,
    limit: int | None = None,
    **filters,
) -> tuple[list, str | None]:
    if limit is not None and limit < 1:
        raise StarkBankValueError(f"Invalid page limit: {limit}")
    limit = MAX_PAGE_SIZE if limit is None else min(limit, MAX_PAGE_SIZE)
    params = build_query_params(cursor=cursor, limit=limit, **filters)
    response = client.get(resource.endpoint, params=params)
    entities = [resource.make(json) for json in response[resource.last_name_plural]]
    next_cursor = response.get("cursor") or None
    logger.debug(f"{resource.name} page: {len(entities)} items, next cursor {next_cursor}")
    return entities, next_cursor


def get_list(
    client: StarkBankAbstractApiClient,
    resource: ResourceDescriptor,
    limit: int | None = None,
    **filters,
) -> "ResourceQuery":
    return ResourceQuery(client, resource, limit=limit, **filters)


class ResourceQuery:
    """Lazy sequence over every remote object matching the filters.

    Pages are fetched on demand while iterating. Each call to iter() starts
    again from the first page, so the same query can be consumed more than
    once, each time with fresh requests.
    """

    def __init__(
        self,
        client: StarkBankAbstractApiClient,
        resource: ResourceDescriptor,
        limit: int | None = None,
        **filters,
    ):
        if limit is not None and limit < 0:
            raise StarkBankValueError(f"Invalid limit: {limit}")
        self.client = client
        self.resource = resource
        self.limit = limit
        self.filters = filters

    def __iter__(self) -> Iterator[Any]:
        remaining = self.limit
        cursor = None
        while remaining is None or remaining > 0:
            entities, cursor = get_page(
                self.client,
                self.resource,
                cursor=cursor,
                limit=remaining,
                **self.filters,
            )
            for entity in entities[:remaining]:
                yield entity
            if remaining is not None:
                remaining -= len(entities[:remaining])
            if not cursor:
                break

    def __repr__(self):
        return f"ResourceQuery({self.resource.name}, limit={self.limit}, filters={self.filters})"
