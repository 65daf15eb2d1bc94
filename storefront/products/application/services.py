import logging
from typing import Optional, List

from storefront.products.domain.entities import Product
from storefront.products.domain.repositories import AbstractProductRepository
from storefront.products.constants import ProductCategory

from .schemas import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

class ProductService:
    """Service applicatif pour la gestion du catalogue."""

    def __init__(self, product_repo: AbstractProductRepository):
        self.product_repo = product_repo

    async def list_products(
        self,
        category: Optional[ProductCategory] = None,
        featured: Optional[bool] = None,
    ) -> List[Product]:
        logger.debug(f"[ProductService] Listage produits (catégorie={category}, vedette={featured})")
        return await self.product_repo.list(
            category=category.value if category else None,
            featured=featured,
        )

    async def get_product(self, product_id: int) -> Product:
        logger.debug(f"[ProductService] Récupération produit ID: {product_id}")
        return await self.product_repo.get(product_id)

    async def create_product(self, product_data: ProductCreate) -> Product:
        logger.info(f"[ProductService] Création produit '{product_data.name}'")
        return await self.product_repo.create(product_data.model_dump(mode="json"))

    async def update_product(self, product_id: int, product_data: ProductUpdate) -> Product:
        changes = product_data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        logger.info(f"[ProductService] MAJ produit ID {product_id}: {sorted(changes)}")
        return await self.product_repo.update(product_id, changes)

    async def delete_product(self, product_id: int) -> None:
        logger.info(f"[ProductService] Suppression produit ID {product_id}")
        await self.product_repo.delete(product_id)
