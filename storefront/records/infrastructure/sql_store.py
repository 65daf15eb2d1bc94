import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import select, insert, update, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.records.domain.exceptions import RecordConflictException, RecordStoreException
from storefront.records.domain.repositories import AbstractRecordStore, RecordSnapshot
from storefront.records.infrastructure.models import RecordDB

logger = logging.getLogger(__name__)

class SQLRecordStore(AbstractRecordStore):
    """Implémentation SQLAlchemy du stockage d'enregistrements (table `records`)."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str) -> RecordSnapshot:
        # Sélection par colonnes: pas de map d'identité, on relit toujours l'état commité
        stmt = select(RecordDB.value, RecordDB.revision).where(RecordDB.key == key)
        try:
            result = await self.session.execute(stmt)
            row = result.first()
        except SQLAlchemyError as e:
            logger.error(f"Erreur lecture enregistrement '{key}': {e}", exc_info=True)
            raise RecordStoreException(key, "lecture", str(e)) from e

        if row is None:
            logger.debug(f"Enregistrement '{key}' absent, lu comme vide.")
            return RecordSnapshot(key=key)
        return RecordSnapshot(key=key, value=row.value, revision=row.revision)

    async def set(self, key: str, value: Any, expected_revision: Optional[int] = None) -> int:
        now = datetime.now(timezone.utc)
        try:
            if expected_revision is None:
                new_revision = await self._overwrite(key, value, now)
            elif expected_revision == 0:
                new_revision = await self._insert(key, value, now)
            else:
                new_revision = await self._compare_and_swap(key, value, expected_revision, now)
            await self.session.commit()
        except RecordConflictException:
            await self.session.rollback()
            logger.warning(f"Conflit d'écriture sur '{key}' (révision attendue {expected_revision}).")
            raise
        except IntegrityError as e:
            # Un autre écrivain a créé la clé entre notre lecture et notre insertion
            await self.session.rollback()
            logger.warning(f"Clé '{key}' créée en parallèle: {e}")
            raise RecordConflictException(key, expected_revision or 0) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Erreur écriture enregistrement '{key}': {e}", exc_info=True)
            raise RecordStoreException(key, "écriture", str(e)) from e

        logger.debug(f"Enregistrement '{key}' écrit (révision {new_revision}).")
        return new_revision

    async def ping(self) -> bool:
        try:
            await self.session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Stockage injoignable: {e}")
            return False

    async def _insert(self, key: str, value: Any, now: datetime) -> int:
        await self.session.execute(
            insert(RecordDB).values(key=key, value=value, revision=1, updated_at=now)
        )
        return 1

    async def _compare_and_swap(self, key: str, value: Any, expected_revision: int, now: datetime) -> int:
        stmt = (
            update(RecordDB)
            .where(RecordDB.key == key, RecordDB.revision == expected_revision)
            .values(value=value, revision=expected_revision + 1, updated_at=now)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            raise RecordConflictException(key, expected_revision)
        return expected_revision + 1

    async def _overwrite(self, key: str, value: Any, now: datetime) -> int:
        result = await self.session.execute(
            select(RecordDB.revision).where(RecordDB.key == key)
        )
        current = result.scalar_one_or_none()
        if current is None:
            return await self._insert(key, value, now)
        await self.session.execute(
            update(RecordDB)
            .where(RecordDB.key == key)
            .values(value=value, revision=RecordDB.revision + 1, updated_at=now)
        )
        return current + 1
