import pytest
from pydantic import ValidationError

from storefront.products.application.schemas import ProductCreate, ProductUpdate
from storefront.products.application.services import ProductService
from storefront.products.constants import ProductCategory
from storefront.products.domain.exceptions import ProductNotFoundException
from storefront.products.infrastructure.persistence import RecordProductRepository
from storefront.records.domain.exceptions import RecordConflictException

from conftest import ConcurrentWriterStore, InMemoryRecordStore

CATALOG = [
    {"id": 1, "name": "A", "category": "telecommandes", "price": 10, "stock": 3, "featured": False},
    {"id": 2, "name": "B", "category": "abonnements", "price": 20, "stock": 0, "featured": True},
]

@pytest.mark.asyncio
async def test_create_assigns_max_id_plus_one():
    store = InMemoryRecordStore({"products": CATALOG})
    repo = RecordProductRepository(store)

    created = await repo.create({"name": "X", "price": 5})

    assert created.id == 3
    assert created.price == 5
    assert [p["id"] for p in store.value("products")] == [1, 2, 3]

@pytest.mark.asyncio
async def test_create_in_empty_catalog_assigns_id_one(memory_store):
    created = await RecordProductRepository(memory_store).create({"name": "Premier", "price": 1})
    assert created.id == 1

@pytest.mark.asyncio
async def test_create_ignores_client_id():
    store = InMemoryRecordStore({"products": CATALOG})
    created = await RecordProductRepository(store).create({"id": 1, "name": "Doublon", "price": 1})
    assert created.id == 3

@pytest.mark.asyncio
async def test_next_id_skips_gaps_and_non_integer_ids():
    store = InMemoryRecordStore({"products": [{"id": 7, "name": "A"}, {"id": "9", "name": "B"}, {"name": "C"}]})
    created = await RecordProductRepository(store).create({"name": "D"})
    assert created.id == 8

@pytest.mark.asyncio
async def test_update_merges_only_given_fields():
    store = InMemoryRecordStore({"products": CATALOG})
    updated = await RecordProductRepository(store).update(1, {"price": 12.5})

    assert updated.price == 12.5
    assert updated.name == "A"
    assert store.value("products")[0] == {**CATALOG[0], "price": 12.5}

@pytest.mark.asyncio
async def test_update_cannot_change_id():
    store = InMemoryRecordStore({"products": CATALOG})
    updated = await RecordProductRepository(store).update(2, {"id": 50, "name": "B2"})
    assert updated.id == 2

@pytest.mark.asyncio
async def test_update_missing_product_leaves_store_unchanged():
    store = InMemoryRecordStore({"products": CATALOG})
    with pytest.raises(ProductNotFoundException):
        await RecordProductRepository(store).update(42, {"price": 1})
    assert store.value("products") == CATALOG
    assert store.writes == 0

@pytest.mark.asyncio
async def test_delete_removes_exactly_one_then_not_found():
    store = InMemoryRecordStore({"products": CATALOG})
    repo = RecordProductRepository(store)

    await repo.delete(1)
    assert store.value("products") == [CATALOG[1]]

    with pytest.raises(ProductNotFoundException):
        await repo.delete(1)

@pytest.mark.asyncio
async def test_list_filters_and_skips_unreadable_entries():
    store = InMemoryRecordStore({"products": CATALOG + [{"name": "sans id"}]})
    repo = RecordProductRepository(store)

    assert [p.id for p in await repo.list()] == [1, 2]
    assert [p.id for p in await repo.list(category="abonnements")] == [2]
    assert [p.id for p in await repo.list(featured=False)] == [1]

@pytest.mark.asyncio
async def test_non_array_record_reads_as_empty():
    store = InMemoryRecordStore({"products": {"oops": True}})
    assert await RecordProductRepository(store).list() == []

@pytest.mark.asyncio
async def test_concurrent_write_is_retried_not_lost():
    """Un produit ajouté par un autre écrivain pendant notre mise à jour n'est pas écrasé."""
    concurrent = {"id": 3, "name": "Ajout concurrent", "price": 9}
    store = ConcurrentWriterStore({"products": CATALOG}, "products", concurrent, conflicts=1)

    await RecordProductRepository(store, max_attempts=3).update(1, {"stock": 0})

    stored = store.value("products")
    assert concurrent in stored
    assert stored[0]["stock"] == 0

@pytest.mark.asyncio
async def test_exhausted_retries_raise_conflict():
    store = ConcurrentWriterStore({"products": CATALOG}, "products", {"id": 99, "name": "Z"}, conflicts=5)
    with pytest.raises(RecordConflictException):
        await RecordProductRepository(store, max_attempts=2).create({"name": "X"})

@pytest.mark.asyncio
async def test_service_drops_unset_and_null_fields():
    store = InMemoryRecordStore({"products": CATALOG})
    service = ProductService(RecordProductRepository(store))

    updated = await service.update_product(2, ProductUpdate(stock=4, name=None))
    assert updated.stock == 4
    assert updated.name == "B"

    created = await service.create_product(
        ProductCreate(name="Câble HDMI", category=ProductCategory.ACCESSOIRES, price=8)
    )
    assert created.category == "accessoires"
    assert created.featured is False

@pytest.mark.asyncio
async def test_null_price_reads_as_zero_and_update_succeeds():
    store = InMemoryRecordStore({"products": CATALOG + [{"id": 3, "name": "C", "price": None, "stock": None}]})
    repo = RecordProductRepository(store)

    product = await repo.get(3)
    assert product.price == 0
    assert product.stock == 0
    assert [p.id for p in await repo.list()] == [1, 2, 3]

    updated = await repo.update(3, {"name": "C2"})
    assert updated.name == "C2"
    assert store.value("products")[2]["name"] == "C2"

@pytest.mark.asyncio
async def test_update_producing_invalid_entry_writes_nothing():
    store = InMemoryRecordStore({"products": CATALOG + [{"id": 3, "name": "C", "price": "abc"}]})
    repo = RecordProductRepository(store)

    with pytest.raises(ValidationError):
        await repo.update(3, {"name": "C2"})
    assert store.writes == 0
    assert store.value("products")[2]["name"] == "C"
