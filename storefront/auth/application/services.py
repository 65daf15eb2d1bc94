"""
Service d'authentification admin.

Comparaison en clair avec l'unique enregistrement `admin`: pas de hachage,
pas de jeton, pas de session.
"""
import logging
import secrets

from storefront.auth.domain.repositories import AbstractAdminRepository

logger = logging.getLogger(__name__)

def _same(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))

class AuthService:
    """Service pour vérifier les identifiants de l'administrateur."""

    def __init__(self, admin_repo: AbstractAdminRepository):
        self.admin_repo = admin_repo

    async def authenticate(self, username: str, password: str) -> bool:
        logger.debug(f"[AuthService] Tentative d'authentification pour: {username}")
        credentials = await self.admin_repo.get_credentials()
        if credentials is None:
            logger.warning("[AuthService] Aucun identifiant admin configuré, accès refusé.")
            return False

        # Évaluer les deux comparaisons pour ne pas révéler lequel diffère
        username_ok = _same(username, credentials.username)
        password_ok = _same(password, credentials.password)
        if not (username_ok and password_ok):
            logger.warning(f"[AuthService] Identifiants incorrects pour: {username}")
            return False

        logger.info(f"[AuthService] Authentification réussie pour: {username}")
        return True
