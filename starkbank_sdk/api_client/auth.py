import base64
import time

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from requests.auth import AuthBase

from starkbank_sdk.api_client.client_configuration import StarkBankClientConfiguration


class StarkBankAuth(AuthBase):
    """Signs every outgoing request with the project's private key.

    The signed message is "<access id>:<access time>:<body>", hashed with
    SHA-256 and signed with ECDSA. The DER signature goes base64 encoded in
    the Access-Signature header.
    """

    def __init__(self, access_id: str, signing_key: ec.EllipticCurvePrivateKey):
        self.access_id = access_id
        self.signing_key = signing_key

    @classmethod
    def from_config(cls, config: StarkBankClientConfiguration):
        return cls(access_id=config.access_id, signing_key=config.signing_key)

    def __call__(self, r):
        access_time = str(time.time())
        body = r.body or ""
        if isinstance(body, bytes):
            body = body.decode("utf-8")

        r.headers["Access-Id"] = self.access_id
        r.headers["Access-Time"] = access_time
        r.headers["Access-Signature"] = self.sign(f"{self.access_id}:{access_time}:{body}")
        return r

    def sign(self, message: str) -> str:
        signature = self.signing_key.sign(message.encode("utf-8"), ec.ECDSA(hashes.SHA256()))
        return base64.b64encode(signature).decode("ascii")
