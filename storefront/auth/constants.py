"""
Constantes pour le module d'authentification.
"""

# --- Messages ---
MESSAGE_AUTH_SUCCESS = "Authentification réussie"
ERROR_CREDENTIALS_INVALID = "Identifiants incorrects"
ERROR_AUTH_FAILED = "Erreur lors de l'authentification"
