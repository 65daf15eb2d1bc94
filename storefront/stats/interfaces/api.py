import logging

from fastapi import APIRouter, HTTPException, status

from storefront.records.domain.exceptions import RecordStoreException
from storefront.stats.application.schemas import Statistics

from .dependencies import StatsServiceDep

logger = logging.getLogger(__name__)

ERROR_STATS = "Erreur lors du calcul des statistiques"

stats_router = APIRouter()

@stats_router.get("", response_model=Statistics)
async def get_statistics_endpoint(service: StatsServiceDep):
    """Indicateurs du tableau de bord admin."""
    try:
        return await service.get_statistics()
    except RecordStoreException as e:
        logger.error(f"Erreur stockage calcul statistiques: {e.message}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_STATS)
    except Exception as e:
        logger.exception(f"Erreur inattendue calcul statistiques: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=ERROR_STATS)
