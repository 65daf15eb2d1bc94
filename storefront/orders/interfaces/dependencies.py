from typing import Annotated

from fastapi import Depends

from storefront.config import settings
from storefront.records.interfaces.dependencies import RecordStoreDep
from storefront.orders.domain.repositories import AbstractOrderRepository
from storefront.orders.infrastructure.persistence import RecordOrderRepository
from storefront.orders.application.services import OrderService

# --- Repository Dependencies ---

def get_order_repository(store: RecordStoreDep) -> AbstractOrderRepository:
    """Fournit une instance de RecordOrderRepository."""
    return RecordOrderRepository(store=store, max_attempts=settings.RECORD_WRITE_RETRIES)

OrderRepositoryDep = Annotated[AbstractOrderRepository, Depends(get_order_repository)]

# --- Service Dependencies ---

def get_order_service(order_repo: OrderRepositoryDep) -> OrderService:
    return OrderService(order_repo=order_repo)

OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
