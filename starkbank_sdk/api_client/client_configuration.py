import os
from typing import Literal

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from starkbank_sdk.api_client.exceptions import StarkBankConfigurationError

Environment = Literal["sandbox", "production"]

BASE_URLS = {
    "sandbox": "https://sandbox.api.starkbank.com/v2/",
    "production": "https://api.starkbank.com/v2/",
}
LANGUAGES = ("en-US", "pt-BR")


class StarkBankClientConfiguration:
    """
    Credentials and connection settings for a Stark Bank project.

    - project_id: id of the project registered on Stark Bank. ex: "5656565656565656"
    - private_key: PEM content of the secp256k1 key whose public part was
      registered with the project.
    - environment: "sandbox" or "production". Picks the base URL unless
      base_url is given.
    """

    def __init__(
        self,
        project_id: str,
        private_key: str,
        environment: Environment = "sandbox",
        base_url: str | None = None,
        language: str = "en-US",
        timeout: int = 15,
    ):
        if not project_id:
            raise StarkBankConfigurationError("project_id not provided")
        if environment not in BASE_URLS:
            raise StarkBankConfigurationError(
                f"environment must be one of {', '.join(BASE_URLS)}, got {environment!r}"
            )
        if language not in LANGUAGES:
            raise StarkBankConfigurationError(
                f"language must be one of {', '.join(LANGUAGES)}, got {language!r}"
            )

        self.project_id = str(project_id)
        self.private_key = private_key
        self.environment = environment
        self.base_url = base_url or BASE_URLS[environment]
        self.language = language
        self.timeout = timeout
        self.signing_key = load_private_key(private_key)

    @property
    def access_id(self) -> str:
        return f"project/{self.project_id}"

    @classmethod
    def from_env(cls) -> "StarkBankClientConfiguration":
        return cls(
            project_id=os.environ.get("STARKBANK_PROJECT_ID", ""),
            private_key=os.environ.get("STARKBANK_PRIVATE_KEY", ""),
            environment=os.environ.get("STARKBANK_ENVIRONMENT", "sandbox"),  # type: ignore[arg-type]
        )


def load_private_key(private_key_pem: str) -> ec.EllipticCurvePrivateKey:
    if not private_key_pem:
        raise StarkBankConfigurationError("private_key not provided")
    try:
        key = serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"), password=None
        )
    except (ValueError, TypeError) as e:
        raise StarkBankConfigurationError(f"Invalid private key: {e}") from e

    if not isinstance(key, ec.EllipticCurvePrivateKey) or not isinstance(
        key.curve, ec.SECP256K1
    ):
        raise StarkBankConfigurationError("private_key must be a secp256k1 EC key")
    return key
