from typing import Annotated

from fastapi import Depends

from storefront.records.interfaces.dependencies import RecordStoreDep
from storefront.auth.domain.repositories import AbstractAdminRepository
from storefront.auth.infrastructure.persistence import RecordAdminRepository
from storefront.auth.application.services import AuthService

def get_admin_repository(store: RecordStoreDep) -> AbstractAdminRepository:
    return RecordAdminRepository(store=store)

AdminRepositoryDep = Annotated[AbstractAdminRepository, Depends(get_admin_repository)]

def get_auth_service(admin_repo: AdminRepositoryDep) -> AuthService:
    return AuthService(admin_repo=admin_repo)

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
