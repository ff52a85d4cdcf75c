from starkbank_sdk.api_client import (
    get_default_client,
    set_default_client,
)
from starkbank_sdk.api_client.client import StarkBankApiClient
from starkbank_sdk.api_client.client_configuration import StarkBankClientConfiguration
from starkbank_sdk.api_client.exceptions import (
    StarkBankAuthenticationError,
    StarkBankConfigurationError,
    StarkBankException,
    StarkBankNotFoundError,
    StarkBankRequestError,
    StarkBankTransportError,
    StarkBankValidationError,
    StarkBankValueError,
)
from starkbank_sdk import boleto, invoice, transfer, utility_payment
from starkbank_sdk.boleto import Boleto
from starkbank_sdk.invoice import Invoice
from starkbank_sdk.transfer import Transfer
from starkbank_sdk.utility_payment import UtilityPayment

__all__ = [
    "StarkBankApiClient",
    "StarkBankClientConfiguration",
    "set_default_client",
    "get_default_client",
    "boleto",
    "transfer",
    "utility_payment",
    "invoice",
    "Boleto",
    "Transfer",
    "UtilityPayment",
    "Invoice",
    "StarkBankException",
    "StarkBankConfigurationError",
    "StarkBankValueError",
    "StarkBankRequestError",
    "StarkBankValidationError",
    "StarkBankAuthenticationError",
    "StarkBankNotFoundError",
    "StarkBankTransportError",
]
