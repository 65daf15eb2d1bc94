from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel

class RecordSnapshot(BaseModel):
    """Valeur d'un enregistrement et révision à laquelle elle a été lue.

    Une clé absente est lue comme `value=None` et `revision=0`.
    """
    key: str
    value: Any = None
    revision: int = 0

class AbstractRecordStore(ABC):
    """Interface abstraite du stockage clé-valeur (un document JSON par clé)."""

    @abstractmethod
    async def get(self, key: str) -> RecordSnapshot:
        """Lit l'enregistrement et sa révision courante."""
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: Any, expected_revision: Optional[int] = None) -> int:
        """Écrit l'enregistrement complet et retourne la nouvelle révision.

        Args:
            key: Clé de l'enregistrement.
            value: Document JSON à stocker (remplace entièrement l'ancien).
            expected_revision: Si fourni, l'écriture n'a lieu que si la révision
                stockée est toujours celle-ci (0 = la clé ne doit pas exister).
                Si None, l'écriture est inconditionnelle.

        Raises:
            RecordConflictException: La révision stockée ne correspond pas.
            RecordStoreException: Le stockage a échoué.
        """
        raise NotImplementedError

    @abstractmethod
    async def ping(self) -> bool:
        """Vérifie que le stockage répond."""
        raise NotImplementedError
