from datetime import datetime
from typing import Optional, List

from pydantic import Field

from storefront.core.schemas import RecordEntity
from storefront.orders.constants import OrderStatus, ALLOWED_STATUS_TRANSITIONS
from storefront.orders.domain.exceptions import InvalidOrderStatusTransition

# Entités du Domaine "Orders"

class CustomerInfo(RecordEntity):
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""

class OrderItem(RecordEntity):
    # Copie des champs du produit au moment de la commande + quantité
    id: Optional[int] = None
    name: str = ""
    price: float = 0
    quantity: int = 0

class Order(RecordEntity):
    id: int
    customer_info: CustomerInfo = Field(default_factory=CustomerInfo)
    items: List[OrderItem] = []
    total: float = 0
    date: Optional[datetime] = None
    status: str = OrderStatus.EN_ATTENTE.value

def ensure_status_transition(current: str, requested: str) -> None:
    """Vérifie qu'une commande peut passer de `current` à `requested`.

    Redemander le statut courant est accepté (aucun changement).
    """
    if current == requested:
        return
    if requested not in ALLOWED_STATUS_TRANSITIONS.get(current, set()):
        raise InvalidOrderStatusTransition(current, requested)
