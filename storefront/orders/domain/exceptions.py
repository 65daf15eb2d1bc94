"""Exceptions spécifiques au domaine Order."""

class OrderDomainException(Exception):
    """Classe de base pour les exceptions du domaine Order."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class OrderNotFoundException(OrderDomainException):
    """Levée lorsqu'une commande spécifique n'est pas trouvée."""
    def __init__(self, order_id: int):
        super().__init__(f"Commande avec ID {order_id} non trouvée.")
        self.order_id = order_id

class InvalidOrderStatusTransition(OrderDomainException):
    """Levée lorsque le passage d'un statut à un autre n'est pas permis."""
    def __init__(self, current: str, requested: str):
        super().__init__(f"Impossible de passer la commande du statut '{current}' au statut '{requested}'.")
        self.current = current
        self.requested = requested
