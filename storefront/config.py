import logging
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Charger les variables d'environnement AVANT de définir la classe Settings
load_dotenv()

class Settings(BaseSettings):
    # --- Application ---
    APP_NAME: str = "Boutique API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # --- Stockage des enregistrements ---
    # sqlite+aiosqlite en local, postgresql+asyncpg en production
    DATABASE_URL: str = "sqlite+aiosqlite:///./storefront.db"
    DB_ECHO_LOG: bool = False
    # Nombre de tentatives lecture/modification/écriture avant d'abandonner sur conflit
    RECORD_WRITE_RETRIES: int = 3

    # --- Sauvegardes ---
    BACKUP_DIR: str = "data"

    # --- Messages Génériques ---
    STORE_ERROR_MSG: str = "Un problème technique est survenu avec le stockage des données."
    CONFLICT_ERROR_MSG: str = "Les données ont été modifiées en parallèle. Veuillez réessayer."
    INTERNAL_ERROR_MSG: str = "Erreur interne du serveur."

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'

settings = Settings()

if settings.RECORD_WRITE_RETRIES < 1:
    logger.warning(f"RECORD_WRITE_RETRIES={settings.RECORD_WRITE_RETRIES} invalide, utilisation de 1.")
    settings.RECORD_WRITE_RETRIES = 1

logger.info(f"Configuration chargée: DB={settings.DATABASE_URL.split('://', 1)[0]}, backups={settings.BACKUP_DIR}")
