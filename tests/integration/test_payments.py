"""Integration tests: /payments endpoints."""

import pytest
from httpx import AsyncClient

from tests.conftest import count_payments, get_bill_status


@pytest.mark.asyncio
async def test_pay_bill(async_client: AsyncClient, database, make_bill):
    await make_bill(bill_id=7, amount="450.00")

    resp = await async_client.post(
        "/payments",
        json={"bill_id": 7, "payment_method": "card", "transaction_ref": "TXN-001"},
    )

    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["bill_id"] == 7
    assert data["bill_status"] == "paid"
    assert isinstance(data["payment_id"], int)
    assert await get_bill_status(database, 7) == "paid"


@pytest.mark.asyncio
async def test_pay_already_paid_bill(async_client: AsyncClient, make_bill):
    await make_bill(bill_id=7)
    first = await async_client.post("/payments", json={"bill_id": 7, "payment_method": "card", "transaction_ref": "TXN-001"})
    assert first.status_code == 200

    resp = await async_client.post("/payments", json={"bill_id": 7, "payment_method": "card", "transaction_ref": "TXN-001"})

    assert resp.status_code == 409
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "CONFLICT"
    assert body["error"]["message"] == "Bill is already paid"


@pytest.mark.asyncio
async def test_bill_id_as_string_is_accepted(async_client: AsyncClient, make_bill):
    bill_id = await make_bill()

    resp = await async_client.post("/payments", json={"bill_id": str(bill_id), "payment_method": "cash"})

    assert resp.status_code == 200, resp.text
    assert resp.json()["bill_id"] == bill_id


@pytest.mark.asyncio
@pytest.mark.parametrize("bill_id", ["abc", 0, -2, None])
async def test_invalid_bill_id(async_client: AsyncClient, database, bill_id):
    resp = await async_client.post("/payments", json={"bill_id": bill_id, "payment_method": "card"})

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Invalid bill_id"
    assert await count_payments(database) == 0


@pytest.mark.asyncio
async def test_missing_payment_method(async_client: AsyncClient, make_bill):
    bill_id = await make_bill()

    resp = await async_client.post("/payments", json={"bill_id": bill_id})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"


@pytest.mark.asyncio
async def test_unknown_bill(async_client: AsyncClient, database):
    resp = await async_client.post("/payments", json={"bill_id": 404, "payment_method": "card"})

    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Bill not found"


@pytest.mark.asyncio
async def test_duplicate_transaction_ref(async_client: AsyncClient, database, make_bill):
    first = await make_bill()
    second = await make_bill()

    ok = await async_client.post("/payments", json={"bill_id": first, "payment_method": "card", "transaction_ref": "REF-1"})
    dup = await async_client.post("/payments", json={"bill_id": second, "payment_method": "card", "transaction_ref": "REF-1"})

    assert ok.status_code == 200
    assert dup.status_code == 409
    assert await get_bill_status(database, second) == "unpaid"


@pytest.mark.asyncio
async def test_list_and_delete_payment_keeps_bill_paid(async_client: AsyncClient, database, make_bill):
    bill_id = await make_bill()
    settled = await async_client.post("/payments", json={"bill_id": bill_id, "payment_method": "cash"})
    payment_id = settled.json()["payment_id"]

    listed = await async_client.get("/payments")
    assert listed.status_code == 200
    payments = listed.json()
    assert [p["payment_id"] for p in payments] == [payment_id]
    assert payments[0]["payment_method"] == "cash"
    assert payments[0]["transaction_ref"] is None

    deleted = await async_client.delete(f"/payments/{payment_id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"deleted": 1}
    assert await count_payments(database) == 0
    assert await get_bill_status(database, bill_id) == "paid"


@pytest.mark.asyncio
async def test_delete_unknown_payment(async_client: AsyncClient):
    resp = await async_client.delete("/payments/999")
    assert resp.status_code == 200
    assert resp.json() == {"deleted": 0}


@pytest.mark.asyncio
@pytest.mark.parametrize("bill_id", ["9223372036854775808", 2**63, "9" * 5000, 2**31])
async def test_out_of_range_bill_id_is_invalid(async_client: AsyncClient, database, make_bill, bill_id):
    await make_bill()

    resp = await async_client.post("/payments", json={"bill_id": bill_id, "payment_method": "card"})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"
    assert await count_payments(database) == 0
