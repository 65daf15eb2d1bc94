"""
Sauvegarde, restauration et vérification des enregistrements.

Format des fichiers (un objet enveloppant par fichier):
- products*.json : {"products": [...]}
- orders*.json   : {"orders": [...]}
- admin*.json    : {"admin": {...}}
- full-backup.json : {"products": {"products": [...]}, "orders": {...}, "admin": {...}, "backupDate": "..."}
"""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel

from storefront.core.schemas import CamelModel
from storefront.records.constants import PRODUCTS_KEY, ORDERS_KEY, ADMIN_KEY
from storefront.records.domain.repositories import AbstractRecordStore

logger = logging.getLogger(__name__)

FULL_BACKUP_FILE = "full-backup.json"

class RecordCounts(CamelModel):
    products: int = 0
    orders: int = 0
    admin_present: bool = False

class BackupReport(CamelModel):
    directory: str
    files: List[str]
    counts: RecordCounts
    backup_date: str

class RestoreReport(CamelModel):
    restored: RecordCounts
    verified: RecordCounts

class StoreStatus(BaseModel):
    reachable: bool
    counts: RecordCounts

def _count(value: Any) -> int:
    return len(value) if isinstance(value, list) else 0

class RecordMaintenanceService:
    """Opérations d'exploitation sur les trois enregistrements du stockage."""

    def __init__(self, store: AbstractRecordStore, directory: Path):
        self.store = store
        self.directory = Path(directory)

    async def _read_all(self) -> Dict[str, Any]:
        return {key: (await self.store.get(key)).value for key in (PRODUCTS_KEY, ORDERS_KEY, ADMIN_KEY)}

    async def _counts(self) -> RecordCounts:
        records = await self._read_all()
        return RecordCounts(
            products=_count(records[PRODUCTS_KEY]),
            orders=_count(records[ORDERS_KEY]),
            admin_present=bool(records[ADMIN_KEY]),
        )

    def _write_json(self, filename: str, payload: Dict[str, Any]) -> str:
        path = self.directory / filename
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        return str(path)

    def _read_wrapped(self, filename: str, key: str) -> Any:
        path = self.directory / filename
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict) or key not in payload:
            raise ValueError(f"Fichier {path} invalide: clé '{key}' absente.")
        return payload[key]

    async def backup(self) -> BackupReport:
        """Écrit un fichier par enregistrement plus une sauvegarde complète."""
        logger.info(f"[Maintenance] Sauvegarde des enregistrements vers {self.directory}...")
        records = await self._read_all()
        products = records[PRODUCTS_KEY] or []
        orders = records[ORDERS_KEY] or []
        admin = records[ADMIN_KEY] or {}
        backup_date = datetime.now(timezone.utc).isoformat()

        self.directory.mkdir(parents=True, exist_ok=True)
        files = [
            self._write_json(f"{PRODUCTS_KEY}-backup.json", {PRODUCTS_KEY: products}),
            self._write_json(f"{ORDERS_KEY}-backup.json", {ORDERS_KEY: orders}),
            self._write_json(f"{ADMIN_KEY}-backup.json", {ADMIN_KEY: admin}),
            self._write_json(FULL_BACKUP_FILE, {
                PRODUCTS_KEY: {PRODUCTS_KEY: products},
                ORDERS_KEY: {ORDERS_KEY: orders},
                ADMIN_KEY: {ADMIN_KEY: admin},
                "backupDate": backup_date,
            }),
        ]
        counts = RecordCounts(products=_count(products), orders=_count(orders), admin_present=bool(admin))
        logger.info(f"[Maintenance] Produits sauvegardés: {counts.products}, commandes: {counts.orders}, admin: {'présent' if counts.admin_present else 'absent'}")
        return BackupReport(directory=str(self.directory), files=files, counts=counts, backup_date=backup_date)

    async def restore(self) -> RestoreReport:
        """Charge products.json, orders.json et admin.json puis écrase les enregistrements."""
        logger.info(f"[Maintenance] Restauration des enregistrements depuis {self.directory}...")
        products = self._read_wrapped(f"{PRODUCTS_KEY}.json", PRODUCTS_KEY)
        orders = self._read_wrapped(f"{ORDERS_KEY}.json", ORDERS_KEY)
        admin = self._read_wrapped(f"{ADMIN_KEY}.json", ADMIN_KEY)

        await self.store.set(PRODUCTS_KEY, products)
        await self.store.set(ORDERS_KEY, orders)
        await self.store.set(ADMIN_KEY, admin)
        restored = RecordCounts(products=_count(products), orders=_count(orders), admin_present=bool(admin))
        logger.info(f"[Maintenance] Produits migrés: {restored.products}, commandes migrées: {restored.orders}")

        verified = await self._counts()
        if verified != restored:
            logger.warning(f"[Maintenance] Vérification divergente: écrit {restored}, relu {verified}")
        else:
            logger.info("[Maintenance] Vérification OK.")
        return RestoreReport(restored=restored, verified=verified)

    async def check(self) -> StoreStatus:
        """Vérifie la connexion et compte les enregistrements."""
        reachable = await self.store.ping()
        if not reachable:
            logger.error("[Maintenance] Stockage injoignable.")
            return StoreStatus(reachable=False, counts=RecordCounts())
        counts = await self._counts()
        logger.info(f"[Maintenance] Stockage OK. Produits: {counts.products}, commandes: {counts.orders}, admin: {'présent' if counts.admin_present else 'absent'}")
        return StoreStatus(reachable=True, counts=counts)
