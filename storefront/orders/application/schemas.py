from typing import Optional, List

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.core.schemas import CamelModel
from storefront.orders.constants import OrderStatus

# --- Schémas pour les lignes de commande ---

class OrderItemCreate(CamelModel):
    # Le panier envoie le produit complet + la quantité: les champs en plus sont conservés
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    price: float = Field(0, ge=0)
    quantity: int = Field(..., ge=1)

# --- Schémas pour Order ---

class CustomerInfoCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = ""
    address: str = Field(..., min_length=1)

class OrderCreate(CamelModel):
    # id, date et status envoyés par le client sont ignorés (fixés par le serveur)
    customer_info: CustomerInfoCreate
    items: List[OrderItemCreate] = Field(..., min_length=1)
    total: float = Field(..., ge=0)

class OrderStatusUpdate(CamelModel):
    status: OrderStatus
