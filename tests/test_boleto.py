import json
from dataclasses import replace
from datetime import date, timedelta

import pytest
from freezegun import freeze_time

import starkbank_sdk
from starkbank_sdk import Boleto, boleto
from starkbank_sdk.api_client.exceptions import (
    StarkBankNotFoundError,
    StarkBankValidationError,
)
from tests.mock.starkbank_mocker import (
    BOLETO_ID,
    boleto_dict,
    endpoint_url,
    errors_dict,
    mock_list_endpoint,
    mock_not_found,
)


def boleto_example() -> Boleto:
    return Boleto(
        amount=100000,
        due=date.today() + timedelta(days=5),
        name="Random Company",
        street_line_1="Rua ABC",
        street_line_2="Ap 123",
        district="Jardim Paulista",
        city="São Paulo",
        state_code="SP",
        zip_code="01234-567",
        tax_id="012.345.678-90",
        overdue_limit=10,
        receiver_name="Random Receiver",
        receiver_tax_id="123.456.789-09",
        fine=0.00,
        interest=0.00,
        descriptions=[
            {"text": "product A", "amount": 123},
            {"text": "product B", "amount": 456},
        ],
        discounts=[{"percentage": 5, "date": date.today() + timedelta(days=1)}],
    )


def test_local_boleto_has_no_return_only_fields():
    local = boleto_example()

    assert local.id is None
    assert local.fee is None
    assert local.line is None
    assert local.bar_code is None
    assert local.status is None
    assert local.created is None


@freeze_time("2025-02-13 10:00:00")
@pytest.mark.usefixtures("default_client")
def test_create_get_delete_flow(api_mock):
    local = boleto_example()
    created_json = {**boleto_dict(), "due": "2025-02-18", "status": "created"}
    mock_create = api_mock.post(
        endpoint_url("boleto"), json={"message": "Boleto(s) successfully created", "boletos": [created_json]}
    )
    mock_get = api_mock.get(endpoint_url(f"boleto/{BOLETO_ID}"), json={"boleto": created_json})
    mock_delete = api_mock.delete(
        endpoint_url(f"boleto/{BOLETO_ID}"), json={"boleto": {**created_json, "status": "canceled"}}
    )

    [created] = boleto.create([local])

    assert created.id == BOLETO_ID
    assert created.status == "created"
    assert created.amount == local.amount
    assert created.due == date(2025, 2, 18)
    assert created.street_line_1 == local.street_line_1
    sent = mock_create.last_request.json()["boletos"][0]
    assert sent["amount"] == 100000
    assert sent["streetLine1"] == "Rua ABC"
    assert sent["due"] == "2025-02-18"
    assert sent["discounts"] == [{"percentage": 5, "date": "2025-02-14"}]
    assert "id" not in sent
    assert "status" not in sent

    fetched = boleto.get(created.id)
    assert fetched.id == created.id
    assert fetched.name == created.name

    deleted = boleto.delete(created.id)
    assert deleted.id == created.id
    assert deleted.status == "canceled"

    mock_not_found(api_mock, "GET", f"boleto/{BOLETO_ID}")
    with pytest.raises(StarkBankNotFoundError):
        boleto.get(created.id)

    assert mock_get.call_count == 1
    assert mock_delete.call_count == 1


@pytest.mark.usefixtures("default_client")
def test_create_rejected(api_mock):
    content = errors_dict(
        ("invalidBoleto", "Element 0: invalid tax ID"),
        ("invalidBoleto", "Element 1: amount must be at least 200"),
    )
    api_mock.post(endpoint_url("boleto"), status_code=400, json=content)

    with pytest.raises(StarkBankValidationError) as exc_info:
        boleto.create([boleto_example(), boleto_example()])

    assert [error.message for error in exc_info.value.errors] == [
        "Element 0: invalid tax ID",
        "Element 1: amount must be at least 200",
    ]


@pytest.mark.usefixtures("default_client")
def test_query_filters_by_status(api_mock):
    paid = [boleto_dict(id=str(index), status="paid") for index in range(10)]
    mock = mock_list_endpoint(api_mock, "boleto", "boletos", [paid])

    boletos = list(boleto.query(limit=10, status="paid", before=date(2025, 2, 13), tags=["a", "b"]))

    assert len(boletos) == 10
    assert all(item.id and item.status == "paid" for item in boletos)
    query_string = mock.last_request.qs
    assert query_string["status"] == ["paid"]
    assert query_string["before"] == ["2025-02-13"]
    assert query_string["tags"] == ["a,b"]
    assert query_string["limit"] == ["10"]


@pytest.mark.usefixtures("default_client")
def test_page(api_mock):
    mock_list_endpoint(api_mock, "boleto", "boletos", [[boleto_dict(id="1")], [boleto_dict(id="2")]])

    first, cursor = boleto.page(limit=1)
    second, last_cursor = boleto.page(cursor=cursor, limit=1)

    assert [item.id for item in first + second] == ["1", "2"]
    assert cursor == "cursor-1"
    assert last_cursor is None


def test_pdf_with_explicit_client(client_instance, api_mock, monkeypatch):
    monkeypatch.setattr(starkbank_sdk.api_client, "default_client", None)
    mock = api_mock.get(
        endpoint_url(f"boleto/{BOLETO_ID}/pdf"),
        content=b"%PDF-1.4 boleto",
        headers={"Content-Type": "application/pdf"},
    )

    content = boleto.pdf(BOLETO_ID, layout="booklet", client=client_instance)

    assert content == b"%PDF-1.4 boleto"
    assert mock.last_request.qs == {"layout": ["booklet"]}


def test_operations_without_client_fail(monkeypatch):
    monkeypatch.setattr(starkbank_sdk.api_client, "default_client", None)

    with pytest.raises(starkbank_sdk.StarkBankConfigurationError):
        boleto.get(BOLETO_ID)


def test_boleto_is_immutable():
    local = boleto_example()
    with pytest.raises(AttributeError):
        local.amount = 1


@pytest.mark.usefixtures("default_client")
def test_create_logs(api_mock, caplog):
    api_mock.post(endpoint_url("boleto"), json={"boletos": [boleto_dict()]})

    with caplog.at_level("INFO", logger="starkbankLogger"):
        boleto.create([boleto_example()])

    assert "Boleto: 1 created" in caplog.text
    assert json.loads(api_mock.last_request.body)["boletos"][0]["name"] == "Random Company"


def test_boleto_equality_without_hash():
    fetched = replace(boleto_example(), id=BOLETO_ID)

    assert fetched == replace(boleto_example(), id=BOLETO_ID)
    with pytest.raises(TypeError, match="unhashable type: 'Boleto'"):
        hash(fetched)


@pytest.mark.usefixtures("default_client")
def test_delete_with_non_json_body(api_mock):
    api_mock.delete(
        endpoint_url(f"boleto/{BOLETO_ID}"), text="<html>gateway</html>", status_code=200
    )

    with pytest.raises(starkbank_sdk.StarkBankException) as exc_info:
        boleto.delete(BOLETO_ID)

    assert exc_info.value.status_code == 200
