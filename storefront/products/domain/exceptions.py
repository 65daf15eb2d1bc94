"""Exceptions spécifiques au domaine Product."""

class ProductDomainException(Exception):
    """Classe de base pour les exceptions du domaine Product."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ProductNotFoundException(ProductDomainException):
    """Levée lorsqu'un produit spécifique n'est pas trouvé."""
    def __init__(self, product_id: int):
        super().__init__(f"Produit avec ID {product_id} non trouvé.")
        self.product_id = product_id
