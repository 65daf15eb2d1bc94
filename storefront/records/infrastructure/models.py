from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

# --- Modèle Record SQLModel ---

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class RecordDB(SQLModel, table=True):
    """Un document JSON par clé, avec un compteur de révision pour les écritures conditionnelles."""
    key: str = Field(primary_key=True, max_length=64)
    value: Any = Field(default=None, sa_column=Column(JSON))
    revision: int = Field(default=1, ge=1)
    updated_at: datetime = Field(default_factory=_utcnow)

    __tablename__ = "records"
