from abc import ABC, abstractmethod
from typing import List, Dict, Any

from .entities import Order

class AbstractOrderRepository(ABC):
    """Interface abstraite pour le repository des Commandes."""

    @abstractmethod
    async def list(self) -> List[Order]:
        raise NotImplementedError

    @abstractmethod
    async def list_records(self) -> List[Any]:
        raise NotImplementedError

    @abstractmethod
    async def get(self, order_id: int) -> Order:
        """Récupère une commande. Lève OrderNotFoundException si absente."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, order_data: Dict[str, Any]) -> Order:
        """Ajoute une commande.
        L'ID, la date et le statut initial sont fixés par le repository,
        quelles que soient les valeurs présentes dans `order_data`.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_status(self, order_id: int, status: str) -> Order:
        """Met à jour le statut d'une commande.
        Lève OrderNotFoundException ou InvalidOrderStatusTransition.
        """
        raise NotImplementedError
