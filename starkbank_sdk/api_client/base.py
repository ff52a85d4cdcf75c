from urllib.parse import urljoin

import requests


class BaseURLSession(requests.Session):
    """requests.Session that resolves relative endpoints against a base URL."""

    def __init__(self, base_url: str):
        super().__init__()
        self.base_url = base_url.rstrip("/") + "/"

    def request(self, method, url, *args, **kwargs):
        return super().request(method, urljoin(self.base_url, url.lstrip("/")), *args, **kwargs)
