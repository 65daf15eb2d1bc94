import logging
from datetime import datetime, timezone
from typing import List, Dict, Any

from pydantic import ValidationError

from storefront.orders.constants import OrderStatus
from storefront.orders.domain.entities import Order, ensure_status_transition
from storefront.orders.domain.exceptions import OrderNotFoundException
from storefront.orders.domain.repositories import AbstractOrderRepository
from storefront.records.constants import ORDERS_KEY
from storefront.records.infrastructure.array_repository import RecordArrayRepository

logger = logging.getLogger(__name__)

def utc_timestamp() -> str:
    """Horodatage ISO-8601 UTC à la milliseconde, suffixe Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

class RecordOrderRepository(RecordArrayRepository, AbstractOrderRepository):
    """Implémentation du repository de Commandes sur l'enregistrement `orders`."""

    record_key = ORDERS_KEY

    async def list(self) -> List[Order]:
        items, _ = await self._read_items()
        orders = []
        for item in items:
            try:
                orders.append(Order.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Commande illisible ignorée ({item!r}): {e.error_count()} erreur(s).")
        return orders

    async def get(self, order_id: int) -> Order:
        items, _ = await self._read_items()
        index = self.find_index(items, order_id)
        if index is None:
            logger.debug(f"Commande ID {order_id} non trouvée dans get().")
            raise OrderNotFoundException(order_id)
        return Order.model_validate(items[index])

    async def create(self, order_data: Dict[str, Any]) -> Order:
        def append(items: List[Dict[str, Any]]) -> Order:
            new_order = {
                **order_data,
                "id": self.next_id(items),
                "date": utc_timestamp(),
                "status": OrderStatus.EN_ATTENTE.value,
            }
            created = Order.model_validate(new_order)
            items.append(new_order)
            return created

        created = await self._mutate(append)
        logger.info(f"Commande ID {created.id} ajoutée ({len(created.items)} article(s)).")
        return created

    async def update_status(self, order_id: int, status: str) -> Order:
        def set_status(items: List[Dict[str, Any]]) -> Order:
            index = self.find_index(items, order_id)
            if index is None:
                raise OrderNotFoundException(order_id)
            current = items[index].get("status") or OrderStatus.EN_ATTENTE.value
            ensure_status_transition(current, status)
            changed = {**items[index], "status": status}
            updated = Order.model_validate(changed)
            items[index] = changed
            return updated

        try:
            updated = await self._mutate(set_status)
        except OrderNotFoundException:
            logger.warning(f"Tentative MAJ statut commande ID {order_id} non trouvée.")
            raise
        logger.info(f"Statut commande ID {order_id} mis à jour à '{status}'.")
        return updated
