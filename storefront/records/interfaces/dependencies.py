from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db_session
from storefront.records.domain.repositories import AbstractRecordStore
from storefront.records.infrastructure.sql_store import SQLRecordStore

def get_record_store(
    session: AsyncSession = Depends(get_db_session)
) -> AbstractRecordStore:
    """Fournit une instance de SQLRecordStore liée à la session de la requête."""
    return SQLRecordStore(session=session)

RecordStoreDep = Annotated[AbstractRecordStore, Depends(get_record_store)]
