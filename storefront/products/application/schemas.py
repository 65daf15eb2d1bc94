from typing import Optional

from pydantic import BaseModel, Field

from storefront.products.constants import ProductCategory

# Schémas Pydantic pour la couche Application / API du domaine Products.
# Les valeurs numériques invalides (prix ou stock négatifs...) sont rejetées, pas corrigées.

class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    category: ProductCategory
    price: float = Field(..., ge=0)
    stock: int = Field(0, ge=0)
    image: str = ""
    featured: bool = False

class ProductCreate(ProductBase):
    # Un éventuel "id" envoyé par le client est ignoré
    pass

class ProductUpdate(BaseModel):
    # Mise à jour partielle: seuls les champs envoyés sont fusionnés
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[ProductCategory] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    image: Optional[str] = None
    featured: Optional[bool] = None
