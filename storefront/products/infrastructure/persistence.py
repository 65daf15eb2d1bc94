import logging
from typing import Optional, List, Dict, Any

from pydantic import ValidationError

from storefront.products.domain.entities import Product
from storefront.products.domain.exceptions import ProductNotFoundException
from storefront.products.domain.repositories import AbstractProductRepository
from storefront.records.constants import PRODUCTS_KEY
from storefront.records.infrastructure.array_repository import RecordArrayRepository

logger = logging.getLogger(__name__)

class RecordProductRepository(RecordArrayRepository, AbstractProductRepository):
    """Implémentation du repository de Produits sur l'enregistrement `products`."""

    record_key = PRODUCTS_KEY

    @staticmethod
    def _to_entities(items: List[Dict[str, Any]]) -> List[Product]:
        products = []
        for item in items:
            try:
                products.append(Product.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Produit illisible ignoré ({item!r}): {e.error_count()} erreur(s).")
        return products

    async def list(self, category: Optional[str] = None, featured: Optional[bool] = None) -> List[Product]:
        items, _ = await self._read_items()
        products = self._to_entities(items)
        if category is not None:
            products = [p for p in products if p.category == category]
        if featured is not None:
            products = [p for p in products if p.featured == featured]
        return products

    async def get(self, product_id: int) -> Product:
        items, _ = await self._read_items()
        index = self.find_index(items, product_id)
        if index is None:
            logger.debug(f"Produit ID {product_id} non trouvé dans get().")
            raise ProductNotFoundException(product_id)
        return Product.model_validate(items[index])

    async def create(self, fields: Dict[str, Any]) -> Product:
        def append(items: List[Dict[str, Any]]) -> Product:
            new_product = {**fields, "id": self.next_id(items)}
            # Validé avant écriture: un échec ne laisse rien en stockage
            created = Product.model_validate(new_product)
            items.append(new_product)
            return created

        created = await self._mutate(append)
        logger.info(f"Produit ID {created.id} ajouté ('{created.name}').")
        return created

    async def update(self, product_id: int, changes: Dict[str, Any]) -> Product:
        def merge(items: List[Dict[str, Any]]) -> Product:
            index = self.find_index(items, product_id)
            if index is None:
                raise ProductNotFoundException(product_id)
            # L'id n'est jamais modifiable
            merged = {**items[index], **changes, "id": product_id}
            updated = Product.model_validate(merged)
            items[index] = merged
            return updated

        try:
            updated = await self._mutate(merge)
        except ProductNotFoundException:
            logger.warning(f"Tentative MAJ produit ID {product_id} non trouvé.")
            raise
        logger.info(f"Produit ID {product_id} mis à jour (champs: {sorted(changes)}).")
        return updated

    async def delete(self, product_id: int) -> None:
        def remove(items: List[Dict[str, Any]]) -> None:
            index = self.find_index(items, product_id)
            if index is None:
                raise ProductNotFoundException(product_id)
            items.pop(index)

        try:
            await self._mutate(remove)
        except ProductNotFoundException:
            logger.warning(f"Tentative suppression produit ID {product_id} non trouvé.")
            raise
        logger.info(f"Produit ID {product_id} supprimé.")
