from starkbank_sdk.invoice.invoice import Invoice, create, get, page, pdf, qrcode, query, update
from starkbank_sdk.invoice import log

__all__ = ["Invoice", "log", "create", "get", "update", "pdf", "qrcode", "query", "page"]
