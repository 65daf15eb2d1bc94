import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from storefront.records.domain.exceptions import RecordConflictException
from storefront.records.domain.repositories import AbstractRecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Une mutation modifie la liste sur place et retourne son résultat.
# Elle peut lever une exception du domaine (ex: non trouvé): rien n'est alors écrit.
Mutation = Callable[[List[Dict[str, Any]]], T]

class RecordArrayRepository:
    """Base des repositories qui stockent un tableau JSON complet sous une seule clé.

    Chaque mutation relit le tableau entier, l'applique puis réécrit le tableau
    entier avec la révision lue. Si un autre écrivain est passé entre-temps,
    l'écriture est refusée par le stockage et la mutation est rejouée sur
    l'état frais, jusqu'à `max_attempts` fois.
    """

    record_key: str = ""

    def __init__(self, store: AbstractRecordStore, max_attempts: int = 3):
        self.store = store
        self.max_attempts = max(1, max_attempts)

    async def _read_items(self) -> Tuple[List[Dict[str, Any]], int]:
        snapshot = await self.store.get(self.record_key)
        if snapshot.value is None:
            return [], snapshot.revision
        if not isinstance(snapshot.value, list):
            logger.warning(f"Enregistrement '{self.record_key}' n'est pas un tableau, lu comme vide.")
            return [], snapshot.revision
        return snapshot.value, snapshot.revision

    async def list_records(self) -> List[Any]:
        """Tableau brut tel que stocké, entrées illisibles comprises."""
        items, _ = await self._read_items()
        return items

    async def _mutate(self, mutation: Mutation) -> T:
        for attempt in range(1, self.max_attempts + 1):
            items, revision = await self._read_items()
            result = mutation(items)
            try:
                await self.store.set(self.record_key, items, expected_revision=revision)
                return result
            except RecordConflictException as e:
                if attempt == self.max_attempts:
                    logger.error(f"Abandon écriture '{self.record_key}' après {attempt} conflits.")
                    raise
                logger.warning(f"Conflit sur '{self.record_key}' (tentative {attempt}/{self.max_attempts}): {e.message}. Nouvelle lecture.")
        # max_attempts >= 1 garantit qu'on ne passe jamais ici
        raise RuntimeError("unreachable")

    @staticmethod
    def next_id(items: List[Dict[str, Any]]) -> int:
        """max(ids existants ∪ {0}) + 1; les ids non entiers sont ignorés."""
        ids = [
            item.get("id") for item in items
            if isinstance(item, dict) and isinstance(item.get("id"), int) and not isinstance(item.get("id"), bool)
        ]
        return max(ids, default=0) + 1

    @staticmethod
    def find_index(items: List[Dict[str, Any]], item_id: int) -> Optional[int]:
        """Index du premier élément portant cet id, ou None."""
        for index, item in enumerate(items):
            if isinstance(item, dict) and item.get("id") == item_id:
                return index
        return None
