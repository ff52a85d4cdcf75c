import inspect
import re
from dataclasses import fields, is_dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable

from starkbank_sdk.api_client.exceptions import StarkBankValueError

STATUS_CODE_DESCRIPTIONS = {
    200: "Success",
    400: "Invalid request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    429: "Too many requests",
    500: "Internal server error",
    502: "Bad gateway",
    503: "Service unavailable",
    504: "Gateway timeout",
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])|(?<=[a-z])(?=[0-9])")


def get_status_code_description(status_code: int) -> str:
    description = STATUS_CODE_DESCRIPTIONS.get(status_code, "Unknown error")
    return f"{status_code} - {description}"


def try_parse_response_to_json(response) -> dict | None:
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def camel_to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(word.capitalize() for word in rest)


def camel_to_kebab(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def check_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise StarkBankValueError(f"Invalid datetime string: {value!r}") from e
    raise StarkBankValueError(f"Expected date, datetime or ISO string, got {type(value).__name__}")


def check_date(value: Any) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            if len(value) <= 10:
                return date.fromisoformat(value)
            return datetime.fromisoformat(value).date()
        except ValueError as e:
            raise StarkBankValueError(f"Invalid date string: {value!r}") from e
    raise StarkBankValueError(f"Expected date, datetime or ISO string, got {type(value).__name__}")


def check_date_or_datetime(value: Any) -> date | datetime | None:
    """Keeps plain dates as dates and anything carrying a time as a datetime."""
    if isinstance(value, str) and len(value) <= 10:
        return check_date(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return check_datetime(value)


def to_iso_date_string(value: str | date | datetime) -> str:
    parsed = check_date(value)
    if parsed is None:
        raise StarkBankValueError("Date not provided")
    return parsed.isoformat()


def to_wire_value(value: Any) -> Any:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {
            snake_to_camel(key): to_wire_value(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple)):
        return [to_wire_value(item) for item in value]
    return value


def to_api_json(entity: Any) -> dict:
    """Serializes a resource dataclass into the camelCase payload the API expects.

    Fields left as None are not sent, so return-only attributes of a local
    object never reach the API.
    """
    if not is_dataclass(entity):
        raise StarkBankValueError(f"Cannot serialize {type(entity).__name__}")
    payload = {field.name: getattr(entity, field.name) for field in fields(entity)}
    return to_wire_value(payload)


def _to_snake_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {camel_to_snake(key): _to_snake_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_snake_keys(item) for item in value]
    return value


def from_api_json(maker: Callable[..., Any], json: dict | None) -> Any:
    """Builds an object with maker from an API payload.

    Keys are matched against maker's keyword parameters after snake_case
    conversion. Keys the maker does not know are dropped and parameters
    missing from the payload receive None. A maker taking **kwargs receives
    every key.
    """
    if json is None:
        return None
    params = {camel_to_snake(key): _to_snake_keys(value) for key, value in json.items()}
    accepted = inspect.signature(maker).parameters.values()
    if any(parameter.kind is parameter.VAR_KEYWORD for parameter in accepted):
        return maker(**params)
    return maker(
        **{
            parameter.name: params.get(parameter.name)
            for parameter in accepted
            if parameter.kind in (parameter.KEYWORD_ONLY, parameter.POSITIONAL_OR_KEYWORD)
        }
    )


def build_query_params(**filters) -> dict:
    params = {}
    for name, value in filters.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set)):
            value = ",".join(str(item) for item in value)
        elif isinstance(value, (date, datetime)):
            value = to_iso_date_string(value)
        elif isinstance(value, bool):
            value = str(value).lower()
        params[snake_to_camel(name)] = value
    return params
