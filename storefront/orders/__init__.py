"""
Module Orders - Gestion des commandes
"""

# Exposer les entités et schémas pour faciliter les imports
from storefront.orders.constants import OrderStatus
from storefront.orders.domain.entities import Order, OrderItem, CustomerInfo
from storefront.orders.application.schemas import OrderCreate, OrderItemCreate, OrderStatusUpdate

__all__ = [
    "OrderStatus",
    "Order", "OrderItem", "CustomerInfo",
    "OrderCreate", "OrderItemCreate", "OrderStatusUpdate",
]
