from storefront.core.schemas import RecordEntity

# Entités du Domaine "Products"
# Lues depuis l'enregistrement `products`: valeurs par défaut permissives,
# champs supplémentaires conservés.

class Product(RecordEntity):
    id: int
    name: str = ""
    description: str = ""
    category: str = ""
    price: float = 0
    stock: int = 0
    image: str = ""
    featured: bool = False
