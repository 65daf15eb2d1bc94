from typing import Annotated

from fastapi import Depends

from storefront.config import settings
from storefront.records.interfaces.dependencies import RecordStoreDep
from storefront.products.domain.repositories import AbstractProductRepository
from storefront.products.infrastructure.persistence import RecordProductRepository
from storefront.products.application.services import ProductService

# --- Repository Dependencies ---

def get_product_repository(store: RecordStoreDep) -> AbstractProductRepository:
    """Fournit une instance de RecordProductRepository."""
    return RecordProductRepository(store=store, max_attempts=settings.RECORD_WRITE_RETRIES)

ProductRepositoryDep = Annotated[AbstractProductRepository, Depends(get_product_repository)]

# --- Service Dependencies ---

def get_product_service(product_repo: ProductRepositoryDep) -> ProductService:
    return ProductService(product_repo=product_repo)

ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
