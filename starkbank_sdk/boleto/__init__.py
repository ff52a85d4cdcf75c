from starkbank_sdk.boleto.boleto import Boleto, create, delete, get, page, pdf, query
from starkbank_sdk.boleto import log

__all__ = ["Boleto", "log", "create", "get", "pdf", "query", "page", "delete"]
