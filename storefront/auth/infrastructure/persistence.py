import logging
from typing import Optional

from pydantic import ValidationError

from storefront.auth.domain.entities import AdminCredential
from storefront.auth.domain.repositories import AbstractAdminRepository
from storefront.records.constants import ADMIN_KEY
from storefront.records.domain.repositories import AbstractRecordStore

logger = logging.getLogger(__name__)

class RecordAdminRepository(AbstractAdminRepository):
    """Lit les identifiants admin depuis l'enregistrement `admin`."""

    def __init__(self, store: AbstractRecordStore):
        self.store = store

    async def get_credentials(self) -> Optional[AdminCredential]:
        snapshot = await self.store.get(ADMIN_KEY)
        if not isinstance(snapshot.value, dict):
            logger.warning("Enregistrement admin absent ou invalide.")
            return None
        try:
            return AdminCredential.model_validate(snapshot.value)
        except ValidationError:
            logger.warning("Enregistrement admin incomplet (username/password).")
            return None
