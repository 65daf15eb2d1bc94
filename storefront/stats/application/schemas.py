from typing import List

from storefront.core.schemas import CamelModel

class TopProduct(CamelModel):
    name: str
    quantity: int

class Statistics(CamelModel):
    total_products: int
    total_orders: int
    total_revenue: float
    top_products: List[TopProduct]
