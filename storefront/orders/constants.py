from enum import Enum

class OrderStatus(str, Enum):
    EN_ATTENTE = "en attente"
    VENDUE = "vendue"

# Seule transition autorisée: en attente -> vendue
ALLOWED_STATUS_TRANSITIONS = {
    OrderStatus.EN_ATTENTE.value: {OrderStatus.VENDUE.value},
    OrderStatus.VENDUE.value: set(),
}

# --- Messages d'erreur ---
ERROR_ORDER_NOT_FOUND = "Commande non trouvée"
ERROR_ORDER_LIST = "Erreur lors de la lecture des commandes"
ERROR_ORDER_CREATE = "Erreur lors de la création de la commande"
ERROR_ORDER_UPDATE = "Erreur lors de la mise à jour de la commande"
