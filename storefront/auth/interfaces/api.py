"""
Route API FastAPI pour l'authentification admin.

Réponses au format {success, message}, y compris en cas d'échec.
"""
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from storefront.auth.application.schemas import LoginRequest, AuthResponse
from storefront.auth.constants import MESSAGE_AUTH_SUCCESS, ERROR_CREDENTIALS_INVALID, ERROR_AUTH_FAILED
from storefront.records.domain.exceptions import RecordStoreException

from .dependencies import AuthServiceDep

logger = logging.getLogger(__name__)

auth_router = APIRouter()

def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=AuthResponse(success=False, message=message).model_dump(),
    )

@auth_router.post("", response_model=AuthResponse)
async def authenticate_endpoint(credentials: LoginRequest, auth_service: AuthServiceDep):
    """Vérifie les identifiants admin envoyés par le tableau de bord."""
    logger.info("[Router] Tentative de login pour: %s", credentials.username)
    try:
        authenticated = await auth_service.authenticate(credentials.username, credentials.password)
    except RecordStoreException as e:
        logger.error(f"[Router] Erreur stockage authentification: {e.message}")
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_AUTH_FAILED)
    except Exception as e:
        logger.exception(f"[Router] Erreur inattendue authentification: {e}")
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_AUTH_FAILED)

    if not authenticated:
        return _failure(status.HTTP_401_UNAUTHORIZED, ERROR_CREDENTIALS_INVALID)
    return AuthResponse(success=True, message=MESSAGE_AUTH_SUCCESS)
