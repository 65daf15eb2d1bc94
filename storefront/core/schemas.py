from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

# ======================================================
# Configuration Commune Pydantic
# ======================================================

# Les enregistrements et l'API utilisent des clés camelCase (customerInfo, totalRevenue...)
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

# Entités lues depuis le stockage: aucun schéma imposé, les champs inconnus sont conservés
class RecordEntity(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Un nombre invalide est enregistré comme null: on relit la valeur par défaut du champ
        if value is None:
            field = cls.model_fields.get(info.field_name)
            if field is not None and not field.is_required():
                return field.get_default(call_default_factory=True)
        return value

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
