from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any

from .entities import Product

class AbstractProductRepository(ABC):
    """Interface abstraite pour le repository des Produits."""

    @abstractmethod
    async def list(self, category: Optional[str] = None, featured: Optional[bool] = None) -> List[Product]:
        """Liste le catalogue, éventuellement filtré par catégorie et/ou mise en avant."""
        raise NotImplementedError

    @abstractmethod
    async def list_records(self) -> List[Any]:
        """Entrées brutes de l'enregistrement, sans validation ni filtre."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, product_id: int) -> Product:
        """Récupère un produit. Lève ProductNotFoundException si absent."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> Product:
        """Ajoute un produit; l'ID est attribué par le repository (max + 1)."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, product_id: int, changes: Dict[str, Any]) -> Product:
        """Fusionne `changes` sur le produit existant. Lève ProductNotFoundException si absent."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        """Supprime le produit. Lève ProductNotFoundException si absent."""
        raise NotImplementedError
