"""Exceptions spécifiques au stockage des enregistrements."""

class RecordDomainException(Exception):
    """Classe de base pour les exceptions du stockage."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class RecordStoreException(RecordDomainException):
    """Levée lorsque la lecture ou l'écriture d'un enregistrement échoue côté stockage."""
    def __init__(self, key: str, operation: str, reason: str = ""):
        detail = f": {reason}" if reason else ""
        super().__init__(f"Échec {operation} de l'enregistrement '{key}'{detail}")
        self.key = key
        self.operation = operation

class RecordConflictException(RecordDomainException):
    """Levée lorsque l'enregistrement a été modifié depuis sa lecture (révision différente)."""
    def __init__(self, key: str, expected_revision: int):
        super().__init__(f"Conflit d'écriture sur '{key}': révision {expected_revision} périmée.")
        self.key = key
        self.expected_revision = expected_revision
