from datetime import datetime, timezone

import pytest

from starkbank_sdk import Boleto, Invoice, Transfer, UtilityPayment
from starkbank_sdk import boleto, invoice, transfer, utility_payment
from starkbank_sdk.api_client.helpers import from_api_json
from starkbank_sdk.api_client.resource import ResourceDescriptor, log_maker
from tests.mock.starkbank_mocker import (
    LOG_ID,
    boleto_dict,
    endpoint_url,
    invoice_dict,
    log_dict,
    mock_list_endpoint,
    transfer_dict,
    utility_payment_dict,
)

LOG_MODULES = [
    (boleto.log, "boleto/log", "boleto", Boleto, boleto_dict, "boleto_ids", "boletoIds"),
    (transfer.log, "transfer/log", "transfer", Transfer, transfer_dict, "transfer_ids", "transferIds"),
    (
        utility_payment.log,
        "utility-payment/log",
        "payment",
        UtilityPayment,
        utility_payment_dict,
        "payment_ids",
        "paymentIds",
    ),
    (invoice.log, "invoice/log", "invoice", Invoice, invoice_dict, "invoice_ids", "invoiceIds"),
]


def test_log_hydrates_parent():
    payload = log_dict("boleto", boleto_dict(status="paid"), "paid")

    log = boleto.log.resource.make(payload)

    assert isinstance(log, boleto.log.Log)
    assert isinstance(log.boleto, Boleto)
    assert log.boleto == from_api_json(Boleto, boleto_dict(status="paid"))
    assert log.boleto.street_line_1 == "Rua ABC"
    assert log.boleto.created == datetime(2025, 2, 13, 10, tzinfo=timezone.utc)
    assert log.created == datetime(2025, 2, 13, 10, 0, 10, tzinfo=timezone.utc)
    assert log.type == "paid"
    assert log.errors == []


def test_log_maker_follows_parent_maker():
    calls = []

    def parent_maker(id=None, amount=None):
        calls.append((id, amount))
        return {"id": id, "amount": amount}

    parent = ResourceDescriptor(name="Boleto", maker=parent_maker)
    maker = log_maker(boleto.log.Log, "boleto", parent)

    log = from_api_json(maker, log_dict("boleto", {"id": "1", "amount": 10, "extra": 1}, "created"))

    assert calls == [("1", 10)]
    assert log.boleto == {"id": "1", "amount": 10}


def test_log_without_errors_field():
    payload = log_dict("transfer", transfer_dict(), "created")
    del payload["errors"]

    log = transfer.log.resource.make(payload)

    assert log.errors == []
    assert log.transfer.id == transfer_dict()["id"]


@pytest.mark.usefixtures("default_client")
@pytest.mark.parametrize(
    "module,endpoint,parent_field,parent_class,parent_dict,ids_filter,ids_param",
    LOG_MODULES,
)
def test_log_get(api_mock, module, endpoint, parent_field, parent_class, parent_dict, ids_filter, ids_param):
    api_mock.get(
        endpoint_url(f"{endpoint}/{LOG_ID}"),
        json={"log": log_dict(parent_field, parent_dict(), "created")},
    )

    log = module.get(LOG_ID)

    assert log.id == LOG_ID
    assert isinstance(getattr(log, parent_field), parent_class)


@pytest.mark.usefixtures("default_client")
@pytest.mark.parametrize(
    "module,endpoint,parent_field,parent_class,parent_dict,ids_filter,ids_param",
    LOG_MODULES,
)
def test_log_query(api_mock, module, endpoint, parent_field, parent_class, parent_dict, ids_filter, ids_param):
    logs = [
        log_dict(parent_field, parent_dict(), "success", id=str(index))
        for index in range(10)
    ]
    mock = mock_list_endpoint(api_mock, endpoint, "logs", [logs[:6], logs[6:]])

    result = list(module.query(limit=10, types=["success"], **{ids_filter: ["1", "2"]}))

    assert [log.id for log in result] == [str(index) for index in range(10)]
    assert all(log.type == "success" for log in result)
    assert all(isinstance(getattr(log, parent_field), parent_class) for log in result)
    assert mock.request_history[0].qs == {
        "limit": ["10"],
        "types": ["success"],
        ids_param: ["1,2"],
    }
    assert mock.request_history[1].qs["limit"] == ["4"]


@pytest.mark.usefixtures("default_client")
@pytest.mark.parametrize(
    "module,endpoint,parent_field,parent_class,parent_dict,ids_filter,ids_param",
    LOG_MODULES,
)
def test_log_page(api_mock, module, endpoint, parent_field, parent_class, parent_dict, ids_filter, ids_param):
    mock_list_endpoint(
        api_mock,
        endpoint,
        "logs",
        [[log_dict(parent_field, parent_dict(), "created", id="1")]],
    )

    logs, cursor = module.page(after="2025-02-01", before="2025-02-13")

    assert [log.id for log in logs] == ["1"]
    assert cursor is None


def test_log_is_unhashable():
    log = boleto.log.resource.make(log_dict("boleto", boleto_dict(), "created"))

    with pytest.raises(TypeError, match="unhashable type: 'Log'"):
        hash(log)
