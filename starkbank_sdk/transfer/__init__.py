from starkbank_sdk.transfer.transfer import Transfer, create, delete, get, page, pdf, query
from starkbank_sdk.transfer import log

__all__ = ["Transfer", "log", "create", "get", "delete", "pdf", "query", "page"]
