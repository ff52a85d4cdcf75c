from starkbank_sdk.utility_payment.utility_payment import (
    UtilityPayment,
    create,
    delete,
    get,
    page,
    pdf,
    query,
)
from starkbank_sdk.utility_payment import log

__all__ = ["UtilityPayment", "log", "create", "get", "pdf", "query", "page", "delete"]
