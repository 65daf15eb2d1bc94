from enum import Enum

class ProductCategory(str, Enum):
    TELECOMMANDES = "telecommandes"
    ABONNEMENTS = "abonnements"
    RECEPTEURS = "recepteurs"
    ACCESSOIRES = "accessoires"

# --- Messages d'erreur ---
ERROR_PRODUCT_NOT_FOUND = "Produit non trouvé"
ERROR_PRODUCT_LIST = "Erreur lors de la lecture des produits"
ERROR_PRODUCT_CREATE = "Erreur lors de l'ajout du produit"
ERROR_PRODUCT_UPDATE = "Erreur lors de la mise à jour du produit"
ERROR_PRODUCT_DELETE = "Erreur lors de la suppression du produit"
MESSAGE_PRODUCT_DELETED = "Produit supprimé avec succès"
