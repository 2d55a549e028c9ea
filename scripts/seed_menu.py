#!/usr/bin/env python3
"""
Seed a sample menu through the catalog service (same validation and price encoding as the API).
Run after migrations: python -m scripts.seed_menu
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# name, description, price, category, availability
MENU = [
    ("Garlic Bread", "Toasted with herb butter", 5.50, "Appetizer", "In Stock"),
    ("Calamari", None, 9.25, "Appetizer", "In Stock"),
    ("Grilled Salmon", "With lemon and seasonal greens", 21.99, "Main Course", "In Stock"),
    ("Mushroom Risotto", "Arborio rice, parmesan", 15.99, "Main Course", "Out of Stock"),
    ("Tiramisu", None, 7.00, "Dessert", "In Stock"),
    ("Fresh Lemonade", "Made to order", 3.25, "Drink", "In Stock"),
]


async def seed() -> None:
    from app.db import AsyncSessionLocal, engine
    from app.services.menu_service import create_menu_item

    async with AsyncSessionLocal() as session:
        for name, description, price, category, availability in MENU:
            item = await create_menu_item(
                session,
                {
                    "name": name,
                    "description": description,
                    "price": price,
                    "category": category,
                    "availability": availability,
                },
            )
            print(f"  #{item.id} {item.name} ({item.category.value}) {item.price:.2f}")
        await session.commit()
    await engine.dispose()
    print("Menu seeded successfully.")


def main() -> None:
    asyncio.run(seed())


if __name__ == "__main__":
    main()
