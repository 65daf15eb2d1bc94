import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status

from storefront.config import settings
from storefront.core.schemas import MessageResponse
from storefront.products.application.schemas import ProductCreate, ProductUpdate
from storefront.products.constants import (
    ProductCategory,
    ERROR_PRODUCT_NOT_FOUND, ERROR_PRODUCT_LIST, ERROR_PRODUCT_CREATE,
    ERROR_PRODUCT_UPDATE, ERROR_PRODUCT_DELETE, MESSAGE_PRODUCT_DELETED,
)
from storefront.products.domain.entities import Product
from storefront.products.domain.exceptions import ProductNotFoundException
from storefront.records.domain.exceptions import RecordConflictException, RecordStoreException

from .dependencies import ProductServiceDep

logger = logging.getLogger(__name__)

product_router = APIRouter()

@product_router.get("", response_model=List[Product])
async def list_products_endpoint(
    service: ProductServiceDep,
    category: Optional[ProductCategory] = Query(None),
    featured: Optional[bool] = Query(None),
):
    """Liste le catalogue (filtrage optionnel par catégorie et produits vedettes)."""
    try:
        return await service.list_products(category=category, featured=featured)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage listage produits: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_LIST)
    except Exception as e:
        logger.exception(f"Erreur inattendue listage produits: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_LIST)

@product_router.post("", response_model=Product)
async def create_product_endpoint(product_data: ProductCreate, service: ProductServiceDep):
    """Ajoute un produit au catalogue. L'ID est attribué par le serveur."""
    try:
        return await service.create_product(product_data)
    except RecordConflictException:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=settings.CONFLICT_ERROR_MSG)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage création produit: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_CREATE)
    except Exception as e:
        logger.exception(f"Erreur inattendue création produit: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_CREATE)

@product_router.get("/{product_id}", response_model=Product)
async def get_product_endpoint(
    service: ProductServiceDep,
    product_id: int = Path(..., title="ID du produit"),
):
    try:
        return await service.get_product(product_id)
    except ProductNotFoundException:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_PRODUCT_NOT_FOUND)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage lecture produit {product_id}: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_LIST)
    except Exception as e:
        logger.exception(f"Erreur inattendue lecture produit {product_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_LIST)

@product_router.put("/{product_id}", response_model=Product)
async def update_product_endpoint(
    product_data: ProductUpdate,
    service: ProductServiceDep,
    product_id: int = Path(..., title="ID du produit"),
):
    """Met à jour les champs envoyés d'un produit (fusion superficielle)."""
    try:
        return await service.update_product(product_id, product_data)
    except ProductNotFoundException:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_PRODUCT_NOT_FOUND)
    except RecordConflictException:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=settings.CONFLICT_ERROR_MSG)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage MAJ produit {product_id}: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_UPDATE)
    except Exception as e:
        logger.exception(f"Erreur inattendue MAJ produit {product_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_UPDATE)

@product_router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product_endpoint(
    service: ProductServiceDep,
    product_id: int = Path(..., title="ID du produit"),
):
    try:
        await service.delete_product(product_id)
        return MessageResponse(message=MESSAGE_PRODUCT_DELETED)
    except ProductNotFoundException:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_PRODUCT_NOT_FOUND)
    except RecordConflictException:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=settings.CONFLICT_ERROR_MSG)
    except RecordStoreException as e:
        logger.error(f"Erreur stockage suppression produit {product_id}: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_DELETE)
    except Exception as e:
        logger.exception(f"Erreur inattendue suppression produit {product_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_PRODUCT_DELETE)
