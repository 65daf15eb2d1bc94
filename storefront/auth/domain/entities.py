from storefront.core.schemas import RecordEntity

class AdminCredential(RecordEntity):
    """Identifiants admin stockés en clair dans l'enregistrement `admin`."""
    username: str
    password: str
