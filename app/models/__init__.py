from app.models.menu_item import MenuAvailability, MenuCategory, MenuItem

__all__ = [
    "MenuAvailability",
    "MenuCategory",
    "MenuItem",
]
