import logging
from typing import List

from fastapi import APIRouter, HTTPException, Path, status

from storefront.config import settings
from storefront.orders.application.schemas import OrderCreate, OrderStatusUpdate
from storefront.orders.constants import (
    ERROR_ORDER_NOT_FOUND, ERROR_ORDER_LIST, ERROR_ORDER_CREATE, ERROR_ORDER_UPDATE,
)
from storefront.orders.domain.entities import Order
from storefront.orders.domain.exceptions import OrderNotFoundException, InvalidOrderStatusTransition
from storefront.records.domain.exceptions import RecordConflictException, RecordStoreException

from .dependencies import OrderServiceDep

logger = logging.getLogger(__name__)

order_router = APIRouter()

@order_router.get("", response_model=List[Order])
async def list_orders_endpoint(service: OrderServiceDep):
    try:
        return await service.list_orders()
    except RecordStoreException as e:
        logger.error(f"Erreur stockage listage commandes: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_LIST)
    except Exception as e:
        logger.exception(f"Erreur inattendue listage commandes: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_LIST)

@order_router.post("", response_model=Order)
async def create_order_endpoint(order_data: OrderCreate, service: OrderServiceDep):
    """Enregistre une commande depuis le panier. ID, date et statut sont fixés par le serveur."""
    try:
        created_order = await service.place_order(order_data)
        logger.info(f"Commande {created_order.id} créée avec succès.")
        return created_order
    except RecordConflictException:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=settings.CONFLICT_ERROR_MSG)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage création commande: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_CREATE)
    except Exception as e:
        logger.exception(f"Erreur inattendue création commande: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_CREATE)

@order_router.get("/{order_id}", response_model=Order)
async def get_order_endpoint(
    service: OrderServiceDep,
    order_id: int = Path(..., title="ID de la commande"),
):
    try:
        return await service.get_order(order_id)
    except OrderNotFoundException:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_ORDER_NOT_FOUND)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage lecture commande {order_id}: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_LIST)
    except Exception as e:
        logger.exception(f"Erreur inattendue lecture commande {order_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_LIST)

@order_router.put("/{order_id}", response_model=Order)
async def update_order_status_endpoint(
    status_update: OrderStatusUpdate,
    service: OrderServiceDep,
    order_id: int = Path(..., title="ID de la commande"),
):
    """Met à jour le statut d'une commande (en attente -> vendue)."""
    try:
        return await service.update_order_status(order_id, status_update.status)
    except OrderNotFoundException:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_ORDER_NOT_FOUND)
    except InvalidOrderStatusTransition as e:
        logger.warning(f"Transition refusée commande {order_id}: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except RecordConflictException:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=settings.CONFLICT_ERROR_MSG)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage MAJ commande {order_id}: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_UPDATE)
    except Exception as e:
        logger.exception(f"Erreur inattendue MAJ commande {order_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_ORDER_UPDATE)
