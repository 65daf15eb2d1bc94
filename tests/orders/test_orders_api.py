import pytest
from httpx import AsyncClient

from storefront.config import settings
from storefront.records.infrastructure.sql_store import SQLRecordStore

from conftest import ConcurrentWriterStore, FailingRecordStore

@pytest.mark.asyncio
async def test_place_order_and_list(test_client: AsyncClient, sample_order):
    payload = {**sample_order, "id": 500, "status": "vendue", "date": "1999-12-31T00:00:00Z"}
    response = await test_client.post("/orders", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["status"] == "en attente"
    assert data["date"] != "1999-12-31T00:00:00Z"
    assert data["customerInfo"]["address"] == "12 rue de Carthage, Tunis"
    assert data["items"][0]["quantity"] == 2

    response = await test_client.get("/orders")
    assert response.status_code == 200
    assert [o["id"] for o in response.json()] == [1]

@pytest.mark.asyncio
async def test_get_order(test_client: AsyncClient, sample_order):
    await test_client.post("/orders", json=sample_order)
    response = await test_client.get("/orders/1")
    assert response.status_code == 200
    assert response.json()["total"] == 51.0

    response = await test_client.get("/orders/2")
    assert response.status_code == 404
    assert response.json() == {"error": "Commande non trouvée"}

@pytest.mark.asyncio
async def test_update_order_status(test_client: AsyncClient, sample_order):
    await test_client.post("/orders", json=sample_order)

    response = await test_client.put("/orders/1", json={"status": "vendue"})
    assert response.status_code == 200
    assert response.json()["status"] == "vendue"

    response = await test_client.put("/orders/1", json={"status": "en attente"})
    assert response.status_code == 400
    assert "error" in response.json()

@pytest.mark.asyncio
async def test_update_status_of_unknown_order(test_client: AsyncClient):
    response = await test_client.put("/orders/9", json={"status": "vendue"})
    assert response.status_code == 404
    assert response.json() == {"error": "Commande non trouvée"}

@pytest.mark.asyncio
async def test_invalid_status_value_rejected(test_client: AsyncClient, sample_order):
    await test_client.post("/orders", json=sample_order)
    response = await test_client.put("/orders/1", json={"status": "expédiée"})
    assert response.status_code == 422
    assert "error" in response.json()

@pytest.mark.asyncio
async def test_order_requires_items_and_customer(test_client: AsyncClient, sample_order):
    response = await test_client.post("/orders", json={**sample_order, "items": []})
    assert response.status_code == 422

    response = await test_client.post("/orders", json={"items": sample_order["items"], "total": 51})
    assert response.status_code == 422
    assert response.json()["error"].startswith("Données invalides")

@pytest.mark.asyncio
async def test_sell_order_with_null_total(test_client: AsyncClient, db_session):
    await SQLRecordStore(db_session).set("orders", [
        {"id": 1, "status": "en attente", "total": None, "items": [{"name": "A", "quantity": 3}]},
    ])

    response = await test_client.put("/orders/1", json={"status": "vendue"})
    assert response.status_code == 200
    assert response.json()["total"] == 0

    response = await test_client.get("/stats")
    assert response.json()["topProducts"] == [{"name": "A", "quantity": 3}]
    assert response.json()["totalOrders"] == 1

@pytest.mark.asyncio
@pytest.mark.parametrize("method, url, body, message", [
    ("GET", "/orders", None, "Erreur lors de la lecture des commandes"),
    ("GET", "/orders/1", None, "Erreur lors de la lecture des commandes"),
    ("POST", "/orders", "order", "Erreur lors de la création de la commande"),
    ("PUT", "/orders/1", {"status": "vendue"}, "Erreur lors de la mise à jour de la commande"),
])
async def test_store_failure_returns_500_error(
    test_client: AsyncClient, use_record_store, sample_order, method, url, body, message
):
    use_record_store(FailingRecordStore())
    payload = sample_order if body == "order" else body

    response = await test_client.request(method, url, json=payload)

    assert response.status_code == 500
    assert response.json() == {"error": message}

@pytest.mark.asyncio
async def test_exhausted_write_retries_return_409(test_client: AsyncClient, use_record_store):
    use_record_store(ConcurrentWriterStore(
        {"orders": [{"id": 1, "status": "en attente", "items": []}]},
        "orders", {"id": 9, "status": "en attente"}, conflicts=100,
    ))

    response = await test_client.put("/orders/1", json={"status": "vendue"})

    assert response.status_code == 409
    assert response.json() == {"error": settings.CONFLICT_ERROR_MSG}
