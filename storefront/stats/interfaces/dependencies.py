from typing import Annotated

from fastapi import Depends

from storefront.orders.interfaces.dependencies import OrderRepositoryDep
from storefront.products.interfaces.dependencies import ProductRepositoryDep
from storefront.stats.application.services import StatsService

def get_stats_service(
    product_repo: ProductRepositoryDep,
    order_repo: OrderRepositoryDep,
) -> StatsService:
    return StatsService(product_repo=product_repo, order_repo=order_repo)

StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
