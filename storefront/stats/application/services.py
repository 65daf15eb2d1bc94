import logging
from typing import Any, Dict, List

from storefront.orders.constants import OrderStatus
from storefront.orders.domain.repositories import AbstractOrderRepository
from storefront.products.domain.repositories import AbstractProductRepository

from .schemas import Statistics, TopProduct

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 5

def _amount(value: Any) -> float:
    # Absent, null ou non numérique: compte pour 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value

def _quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value

def compute_statistics(products: List[Any], orders: List[Any], limit: int = TOP_PRODUCTS_LIMIT) -> Statistics:
    """Agrège les indicateurs du tableau de bord à partir des enregistrements bruts.

    Toutes les entrées comptent, même celles qu'un modèle refuserait. Le
    chiffre d'affaires porte sur toutes les commandes, quel que soit leur
    statut. Le classement des meilleures ventes ne compte que les lignes des
    commandes 'vendue', regroupées par nom de produit; à quantité égale,
    l'ordre de première apparition est conservé.
    """
    total_revenue = 0
    sold_quantities: Dict[str, int] = {}
    for order in orders:
        if not isinstance(order, dict):
            continue
        total_revenue += _amount(order.get("total"))
        if order.get("status") != OrderStatus.VENDUE.value:
            continue
        for item in order.get("items") or []:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            name = "" if name is None else str(name)
            sold_quantities[name] = sold_quantities.get(name, 0) + _quantity(item.get("quantity"))

    ranking = sorted(sold_quantities.items(), key=lambda entry: entry[1], reverse=True)[:limit]

    return Statistics(
        total_products=len(products),
        total_orders=len(orders),
        total_revenue=total_revenue,
        top_products=[TopProduct(name=name, quantity=quantity) for name, quantity in ranking],
    )

class StatsService:
    """Service applicatif des statistiques du tableau de bord."""

    def __init__(self, product_repo: AbstractProductRepository, order_repo: AbstractOrderRepository):
        self.product_repo = product_repo
        self.order_repo = order_repo

    async def get_statistics(self) -> Statistics:
        products = await self.product_repo.list_records()
        orders = await self.order_repo.list_records()
        stats = compute_statistics(products, orders)
        logger.debug(f"[StatsService] {stats.total_products} produits, {stats.total_orders} commandes, CA {stats.total_revenue}")
        return stats
