"""Pydantic models for the catalog wire format."""

from decimal import Decimal

from pydantic import BaseModel, Field

from appetizers.domain.catalog import Item


class ItemPayload(BaseModel):
    """Single appetizer as served by the backend."""

    id: int
    name: str
    description: str
    price: Decimal = Field(ge=0)
    image_url: str = Field(alias="imageURL")
    calories: int = Field(ge=0)
    protein: int = Field(ge=0)
    carbs: int = Field(ge=0)

    def to_item(self) -> Item:
        """Convert the payload into a domain item."""
        return Item(
            id=self.id,
            name=self.name,
            description=self.description,
            price=self.price,
            image_url=self.image_url,
            calories=self.calories,
            protein_g=self.protein,
            carbs_g=self.carbs,
        )


class CatalogEnvelope(BaseModel):
    """Response envelope wrapping the catalog list."""

    request: list[ItemPayload]
