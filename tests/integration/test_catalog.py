"""Integration tests: /utilities, /meters and /bills endpoints."""

import pytest
from decimal import Decimal
from httpx import AsyncClient


@pytest.fixture
async def owner_ids(async_client: AsyncClient):
    user = await async_client.post(
        "/users", json={"name": "Sam", "email": "sam@example.com", "password": "pw"}
    )
    utility = await async_client.post("/utilities", json={"utility_name": "Water"})
    return user.json()["user_id"], utility.json()["utility_id"]


@pytest.mark.asyncio
async def test_utilities_crud(async_client: AsyncClient):
    created = await async_client.post("/utilities", json={"utility_name": " Gas "})
    assert created.status_code == 200
    utility_id = created.json()["utility_id"]

    listed = (await async_client.get("/utilities")).json()
    assert listed == [{"utility_id": utility_id, "utility_name": "Gas"}]

    dup = await async_client.post("/utilities", json={"utility_name": "Gas"})
    assert dup.status_code == 409

    deleted = await async_client.delete(f"/utilities/{utility_id}")
    assert deleted.json() == {"deleted": 1}


@pytest.mark.asyncio
async def test_utility_in_use_cannot_be_deleted(async_client: AsyncClient, owner_ids):
    user_id, utility_id = owner_ids
    await async_client.post("/meters", json={"meter_number": "W-1", "user_id": user_id, "utility_id": utility_id})

    resp = await async_client.delete(f"/utilities/{utility_id}")
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_create_meter(async_client: AsyncClient, owner_ids):
    user_id, utility_id = owner_ids
    resp = await async_client.post(
        "/meters", json={"meter_number": " W-100 ", "user_id": user_id, "utility_id": utility_id}
    )
    assert resp.status_code == 200, resp.text

    meters = (await async_client.get("/meters")).json()
    assert meters[0]["meter_id"] == resp.json()["meter_id"]
    assert meters[0]["meter_number"] == "W-100"


@pytest.mark.asyncio
async def test_duplicate_meter_number(async_client: AsyncClient, owner_ids):
    user_id, utility_id = owner_ids
    body = {"meter_number": "W-100", "user_id": user_id, "utility_id": utility_id}
    await async_client.post("/meters", json=body)

    resp = await async_client.post("/meters", json=body)
    assert resp.status_code == 409
    assert resp.json()["error"]["message"] == "Meter number already exists"


@pytest.mark.asyncio
async def test_meter_for_unknown_user(async_client: AsyncClient, owner_ids):
    _, utility_id = owner_ids
    resp = await async_client.post("/meters", json={"meter_number": "W-9", "user_id": 999, "utility_id": utility_id})
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Selected user or utility does not exist"


@pytest.mark.asyncio
async def test_meter_requires_positive_ids(async_client: AsyncClient):
    resp = await async_client.post("/meters", json={"meter_number": "W-9", "user_id": 0, "utility_id": 1})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_bills_crud(async_client: AsyncClient, meter_id: int):
    resp = await async_client.post(
        "/bills",
        json={"meter_id": meter_id, "bill_month": "2026-09-01", "amount": "450.00", "due_date": "2026-10-15"},
    )
    assert resp.status_code == 200, resp.text
    bill_id = resp.json()["bill_id"]

    bill = (await async_client.get(f"/bills/{bill_id}")).json()
    assert bill["status"] == "unpaid"
    assert Decimal(str(bill["amount"])) == Decimal("450.00")
    assert bill["bill_month"] == "2026-09-01"

    assert len((await async_client.get("/bills")).json()) == 1
    assert (await async_client.delete(f"/bills/{bill_id}")).json() == {"deleted": 1}
    assert (await async_client.get(f"/bills/{bill_id}")).status_code == 404


@pytest.mark.asyncio
async def test_bill_with_negative_amount(async_client: AsyncClient, meter_id: int):
    resp = await async_client.post(
        "/bills",
        json={"meter_id": meter_id, "bill_month": "2026-09-01", "amount": -5, "due_date": "2026-10-15"},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_bill_with_invalid_status(async_client: AsyncClient, meter_id: int):
    resp = await async_client.post(
        "/bills",
        json={"meter_id": meter_id, "bill_month": "2026-09-01", "amount": 5, "due_date": "2026-10-15", "status": "void"},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_bill_for_unknown_meter(async_client: AsyncClient, meter_id: int):
    resp = await async_client.post(
        "/bills",
        json={"meter_id": meter_id + 100, "bill_month": "2026-09-01", "amount": 5, "due_date": "2026-10-15"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Selected meter does not exist"


@pytest.mark.asyncio
async def test_deleting_bill_removes_its_payment(async_client: AsyncClient, make_bill):
    bill_id = await make_bill()
    await async_client.post("/payments", json={"bill_id": bill_id, "payment_method": "card"})

    await async_client.delete(f"/bills/{bill_id}")

    assert (await async_client.get("/payments")).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/bills/9223372036854775808"),
        ("DELETE", "/bills/2147483648"),
        ("GET", "/users/0"),
        ("DELETE", "/meters/99999999999999999999"),
        ("DELETE", "/utilities/-1"),
        ("DELETE", "/payments/9223372036854775808"),
    ],
)
async def test_out_of_range_path_ids_are_invalid(async_client: AsyncClient, method, path):
    resp = await async_client.request(method, path)
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_ARGUMENT"


@pytest.mark.asyncio
async def test_meter_with_out_of_range_owner_is_invalid(async_client: AsyncClient, owner_ids):
    _, utility_id = owner_ids
    resp = await async_client.post(
        "/meters", json={"meter_number": "W-10", "user_id": 2**63, "utility_id": utility_id}
    )
    assert resp.status_code == 400
