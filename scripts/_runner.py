"""Lancement commun des scripts de maintenance des enregistrements."""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

from storefront.config import settings
from storefront.database import AsyncSessionLocal, create_tables, engine
from storefront.records.application.maintenance import RecordMaintenanceService
from storefront.records.domain.exceptions import RecordDomainException
from storefront.records.infrastructure.sql_store import SQLRecordStore

logger = logging.getLogger("scripts")

T = TypeVar("T")

async def _run(operation: Callable[[RecordMaintenanceService], Awaitable[T]]) -> T:
    await create_tables()
    try:
        async with AsyncSessionLocal() as session:
            service = RecordMaintenanceService(SQLRecordStore(session), Path(settings.BACKUP_DIR))
            return await operation(service)
    finally:
        await engine.dispose()

def run(operation: Callable[[RecordMaintenanceService], Awaitable[T]], label: str) -> int:
    """Exécute l'opération et retourne le code de sortie du script."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    logger.info(f"Début: {label}")
    try:
        asyncio.run(_run(operation))
    except (RecordDomainException, OSError, ValueError) as e:
        logger.error(f"Échec: {label}: {e}")
        return 1
    logger.info(f"Terminé: {label}")
    return 0

def main(operation: Callable[[RecordMaintenanceService], Awaitable[T]], label: str) -> None:
    sys.exit(run(operation, label))
