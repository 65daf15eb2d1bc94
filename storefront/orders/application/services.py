import logging
from typing import List

from storefront.orders.constants import OrderStatus
from storefront.orders.domain.entities import Order
from storefront.orders.domain.repositories import AbstractOrderRepository

from .schemas import OrderCreate

logger = logging.getLogger(__name__)

# Tolérance d'arrondi entre le total envoyé et la somme des lignes
TOTAL_TOLERANCE = 0.01

class OrderService:
    """Service applicatif pour la gestion des commandes."""

    def __init__(self, order_repo: AbstractOrderRepository):
        self.order_repo = order_repo

    async def list_orders(self) -> List[Order]:
        logger.debug("[OrderService] Listage des commandes")
        return await self.order_repo.list()

    async def get_order(self, order_id: int) -> Order:
        logger.debug(f"[OrderService] Récupération commande ID: {order_id}")
        return await self.order_repo.get(order_id)

    async def place_order(self, order_data: OrderCreate) -> Order:
        """Enregistre la commande du panier avec le statut 'en attente'."""
        logger.info(f"[OrderService] Nouvelle commande de '{order_data.customer_info.name}' ({len(order_data.items)} article(s))")

        computed_total = sum(item.price * item.quantity for item in order_data.items)
        if abs(computed_total - order_data.total) > TOTAL_TOLERANCE:
            # Le total du panier fait foi; on signale seulement l'écart
            logger.warning(f"[OrderService] Total envoyé {order_data.total} différent de la somme des lignes {computed_total:.2f}.")

        return await self.order_repo.create(order_data.model_dump(mode="json", by_alias=True, exclude_none=True))

    async def update_order_status(self, order_id: int, new_status: OrderStatus) -> Order:
        logger.info(f"[OrderService] MAJ statut commande ID {order_id} -> '{new_status.value}'")
        return await self.order_repo.update_status(order_id, new_status.value)
