from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.menu_item import MenuAvailability, MenuCategory


class CreateMenuItemInput(BaseModel):
    """createMenuItem body. `description` must be sent, even if null."""

    name: str
    description: Optional[str]
    price: float
    category: str = Field(description="Appetizer | Main Course | Dessert | Drink")
    availability: Optional[str] = Field(
        None, description="In Stock | Out of Stock; In Stock when omitted"
    )


class UpdateMenuItemInput(BaseModel):
    """
    updateMenuItem body. Keys left out of the JSON are not touched;
    `"description": null` clears the description.
    """

    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    availability: Optional[str] = None

    def changes(self) -> dict:
        """Only the fields the caller actually sent, nulls included."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class MenuItemIdInput(BaseModel):
    id: int


class MenuItemSchema(BaseModel):
    id: int
    name: str
    description: Optional[str]
    price: float
    category: MenuCategory
    availability: MenuAvailability
    created_at: datetime
    updated_at: datetime


class DeleteResult(BaseModel):
    success: bool
