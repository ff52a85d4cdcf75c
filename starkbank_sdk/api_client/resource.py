from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from starkbank_sdk.api_client.helpers import camel_to_kebab, from_api_json


@dataclass(frozen=True, kw_only=True)
class Resource:
    id: str | None = None


@dataclass(frozen=True)
class ResourceDescriptor:
    """Name and deserializer of a remote resource.

    The name drives the URL and the JSON envelope keys:
    "Boleto" -> endpoint "boleto", keys "boleto"/"boletos";
    "UtilityPaymentLog" -> endpoint "utility-payment/log", keys "log"/"logs".
    """

    name: str
    maker: Callable[..., Any]

    @property
    def endpoint(self) -> str:
        return camel_to_kebab(self.name).replace("-log", "/log")

    @property
    def last_name(self) -> str:
        return camel_to_kebab(self.name).split("-")[-1]

    @property
    def last_name_plural(self) -> str:
        name = self.last_name
        if name.endswith("s"):
            return name
        if name.endswith("y") and not name.endswith("ey"):
            return f"{name[:-1]}ies"
        return f"{name}s"

    def make(self, json: dict) -> Any:
        return from_api_json(self.maker, json)


def log_maker(log_class: type, parent_field: str, parent: ResourceDescriptor) -> Callable[..., Any]:
    """Builds the deserializer of a log resource.

    The nested parent payload goes through the parent descriptor's own maker,
    so the log holds a typed parent object instead of a raw mapping.
    """

    def make(
        id: str | None = None,
        created: str | datetime | None = None,
        type: str | None = None,
        errors: list[str] | None = None,
        **payload,
    ):
        return log_class(
            id=id,
            created=created,
            type=type,
            errors=errors or [],
            **{parent_field: parent.make(payload.get(parent_field))},
        )

    return make
