import logging

from .client import StarkBankApiClient
from .client_configuration import StarkBankClientConfiguration
from .exceptions import StarkBankConfigurationError

logger = logging.getLogger("starkbankLogger")

default_client: StarkBankApiClient | None = None


def set_default_client(client: StarkBankApiClient) -> None:
    """
    One-time setup of the client used by every operation called without an explicit `client`.
    Call it once at startup, before any request. It is not meant to be swapped while requests run.
    """
    if not isinstance(client, StarkBankApiClient):
        raise StarkBankConfigurationError("Invalid client provided.")

    global default_client
    default_client = client
    logger.info(f"Default client set for {client.config.access_id} ({client.config.environment})")


def get_default_client() -> StarkBankApiClient:
    if default_client is None:
        raise StarkBankConfigurationError(
            "No client provided and no default client set. Call set_default_client first."
        )
    return default_client


def resolve_client(client: StarkBankApiClient | None = None) -> StarkBankApiClient:
    return client if client is not None else get_default_client()
