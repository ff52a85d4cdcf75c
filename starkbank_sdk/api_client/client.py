import logging
import platform

import requests

from starkbank_sdk.api_client.abstract_client import StarkBankAbstractApiClient
from starkbank_sdk.api_client.auth import StarkBankAuth
from starkbank_sdk.api_client.base import BaseURLSession
from starkbank_sdk.api_client.client_configuration import StarkBankClientConfiguration
from starkbank_sdk.api_client.exceptions import (
    StarkBankAuthenticationError,
    StarkBankConfigurationError,
    StarkBankNotFoundError,
    StarkBankRequestError,
    StarkBankTransportError,
    StarkBankValidationError,
)
from starkbank_sdk.api_client.helpers import (
    get_status_code_description,
    try_parse_response_to_json,
)

SDK_VERSION = "0.1.0"

ERRORS_BY_STATUS_CODE = {
    400: StarkBankValidationError,
    401: StarkBankAuthenticationError,
    403: StarkBankAuthenticationError,
    404: StarkBankNotFoundError,
}


class StarkBankApiClient(StarkBankAbstractApiClient):
    """
    Base client for requests to the Stark Bank API.

    #### Initialization:
    - Takes a StarkBankClientConfiguration with the project credentials and environment.

    #### Endpoints (get, get_content, post, patch, delete):
    - Relative to the environment base URL. ex: "boleto", "boleto/log/123"

    #### Exceptions:
    - StarkBankValidationError: HTTP 400, the API rejected the payload. Carries the API errors list.
    - StarkBankAuthenticationError: HTTP 401 or 403.
    - StarkBankNotFoundError: HTTP 404.
    - StarkBankRequestError: Any other non 2xx return code, or a 2xx answer whose body is not JSON.
    - StarkBankTransportError: No response at all (connection failure, timeout).
    """

    def __init__(self, config: StarkBankClientConfiguration):
        if not isinstance(config, StarkBankClientConfiguration):
            raise StarkBankConfigurationError("Invalid client configuration")

        self.config = config
        self.logger = logging.getLogger("starkbankLogger")
        self.session = BaseURLSession(base_url=config.base_url)
        self.session.auth = StarkBankAuth.from_config(config)
        self.session.headers.update(
            {
                "Accept-Language": config.language,
                "Content-Type": "application/json",
                "User-Agent": f"Python-{platform.python_version()}-SDK-{SDK_VERSION}",
            }
        )

    def get(self, endpoint: str, params: dict | None = None) -> dict:
        return self._json(self._request("GET", endpoint, params=params), "GET", endpoint)

    def get_content(self, endpoint: str, params: dict | None = None) -> bytes:
        return self._request("GET", endpoint, params=params).content

    def post(self, endpoint: str, data: dict) -> dict:
        return self._json(self._request("POST", endpoint, data=data), "POST", endpoint)

    def patch(self, endpoint: str, data: dict) -> dict:
        return self._json(self._request("PATCH", endpoint, data=data), "PATCH", endpoint)

    def delete(self, endpoint: str) -> dict:
        return self._json(self._request("DELETE", endpoint), "DELETE", endpoint)

    def _json(self, response: requests.Response, method: str, endpoint: str) -> dict:
        try:
            return response.json()
        except ValueError as e:
            self.logger.error(
                f"{method} {endpoint} returned a non JSON body: {response.status_code}"
            )
            raise StarkBankRequestError(
                "Invalid JSON response", response.status_code, None
            ) from e

    def _request(
        self,
        method: str,
        endpoint: str,
        data: dict | None = None,
        params: dict | None = None,
    ) -> requests.Response:
        try:
            response = self.session.request(
                method, endpoint, json=data, params=params, timeout=self.config.timeout
            )
            response.raise_for_status()
            return response
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code
            error_content = try_parse_response_to_json(e.response)
            error_class = ERRORS_BY_STATUS_CODE.get(status_code, StarkBankRequestError)
            self.logger.error(
                f"{method} {endpoint} failed: {status_code} {error_content}"
            )
            raise error_class(
                get_status_code_description(status_code), status_code, error_content
            ) from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{method} {endpoint} failed without response: {e}")
            raise StarkBankTransportError(f"Request error: {e}") from e
