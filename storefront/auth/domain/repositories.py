from abc import ABC, abstractmethod
from typing import Optional

from .entities import AdminCredential

class AbstractAdminRepository(ABC):
    """Interface abstraite pour l'accès aux identifiants admin."""

    @abstractmethod
    async def get_credentials(self) -> Optional[AdminCredential]:
        """Retourne les identifiants stockés, ou None s'ils sont absents ou incomplets."""
        raise NotImplementedError
