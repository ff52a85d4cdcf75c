import pytest
import requests_mock
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
)

import starkbank_sdk.api_client
from starkbank_sdk.api_client.client import StarkBankApiClient
from starkbank_sdk.api_client.client_configuration import StarkBankClientConfiguration
from tests.mock.starkbank_mocker import TEST_PROJECT_ID


@pytest.fixture(scope="session")
def private_key_pem():
    key = ec.generate_private_key(ec.SECP256K1())
    return key.private_bytes(Encoding.PEM, PrivateFormat.PKCS8, NoEncryption()).decode()


@pytest.fixture
def config(private_key_pem):
    return StarkBankClientConfiguration(
        project_id=TEST_PROJECT_ID,
        private_key=private_key_pem,
        environment="sandbox",
    )


@pytest.fixture
def client_instance(config):
    return StarkBankApiClient(config)


@pytest.fixture
def default_client(client_instance, monkeypatch):
    monkeypatch.setattr(starkbank_sdk.api_client, "default_client", client_instance)
    return client_instance


@pytest.fixture
def api_mock():
    with requests_mock.Mocker(case_sensitive=True) as m:
        yield m
