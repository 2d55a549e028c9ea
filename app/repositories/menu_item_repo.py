from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import PersistenceError
from app.models.menu_item import MenuAvailability, MenuCategory, MenuItem


class MenuItemRepository:
    """
    Single-statement access to menu_items. Every SQLAlchemy failure surfaces as
    PersistenceError; transaction boundaries belong to the caller's session.
    Reads always overwrite identity-map state with the stored row.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(
        self,
        *,
        name: str,
        description: str | None,
        price: Decimal,
        category: MenuCategory,
        availability: MenuAvailability,
        created_at: datetime,
    ) -> MenuItem:
        stmt = (
            insert(MenuItem)
            .values(
                name=name,
                description=description,
                price=price,
                category=category,
                availability=availability,
                created_at=created_at,
                updated_at=created_at,
            )
            .returning(MenuItem)
        )
        try:
            r = await self.session.execute(stmt)
            return r.scalar_one()
        except SQLAlchemyError as exc:
            raise PersistenceError("menu item insert failed") from exc

    async def get_all(self) -> list[MenuItem]:
        try:
            r = await self.session.execute(
                select(MenuItem).execution_options(populate_existing=True)
            )
            return list(r.scalars().all())
        except SQLAlchemyError as exc:
            raise PersistenceError("menu item scan failed") from exc

    async def get_by_id(self, item_id: int) -> MenuItem | None:
        try:
            r = await self.session.execute(
                select(MenuItem)
                .where(MenuItem.id == item_id)
                .execution_options(populate_existing=True)
            )
            return r.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceError("menu item lookup failed") from exc

    async def get_updated_at(self, item_id: int) -> datetime | None:
        """Existence probe for updates; returns the row's updated_at or None."""
        try:
            r = await self.session.execute(
                select(MenuItem.updated_at).where(MenuItem.id == item_id)
            )
            return r.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceError("menu item lookup failed") from exc

    async def update_fields(self, item_id: int, values: dict[str, Any]) -> MenuItem | None:
        """
        Apply exactly `values` to one row in a single UPDATE, then read the row back.
        None if the row vanished before the write.
        """
        stmt = (
            update(MenuItem)
            .where(MenuItem.id == item_id)
            .values(**values)
            .returning(MenuItem.id)
            .execution_options(synchronize_session=False)
        )
        try:
            r = await self.session.execute(stmt)
            updated_id = r.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceError("menu item update failed") from exc
        if updated_id is None:
            return None
        return await self.get_by_id(updated_id)

    async def delete_by_id(self, item_id: int) -> bool:
        stmt = delete(MenuItem).where(MenuItem.id == item_id).returning(MenuItem.id)
        try:
            r = await self.session.execute(stmt)
            return r.scalar_one_or_none() is not None
        except SQLAlchemyError as exc:
            raise PersistenceError("menu item delete failed") from exc
