"""
Menu catalog verbs: create, list, get by id, partial update, delete.
Validation and price encoding happen here; rows are read and written through
MenuItemRepository. Missing ids are ordinary outcomes (None / False), not errors.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import EncodingError, PersistenceError, ValidationError
from app.core.logging import get_logger
from app.core.money import from_storage, to_storage
from app.models.menu_item import MenuItem
from app.repositories.menu_item_repo import MenuItemRepository
from app.schemas.menu import MenuItemSchema
from app.services.menu_validator import validate_create, validate_update

logger = get_logger(__name__)

TIMESTAMP_STEP = timedelta(microseconds=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _next_updated_at(previous: datetime) -> datetime:
    """Current time, bumped past `previous` so updated_at strictly increases."""
    return max(_utcnow(), previous + TIMESTAMP_STEP)


def _encode_price(price: float) -> Decimal:
    try:
        encoded = Decimal(to_storage(price))
    except EncodingError as e:
        raise ValidationError("price", "price exceeds the storable range") from e
    if encoded <= 0:
        # positive input that rounds to 0.00 at two digits
        raise ValidationError("price", "price must be positive")
    return encoded


def to_schema(row: MenuItem) -> MenuItemSchema:
    return MenuItemSchema(
        id=row.id,
        name=row.name,
        description=row.description,
        price=from_storage(row.price),
        category=row.category,
        availability=row.availability,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


async def create_menu_item(session: AsyncSession, payload: Mapping[str, Any]) -> MenuItemSchema:
    """Validate, encode and insert one menu item. Raises ValidationError / PersistenceError."""
    try:
        data = validate_create(payload)
        price = _encode_price(data["price"])
    except ValidationError as e:
        logger.warning("menu_item_rejected: %s", e.message, extra={"field": e.field})
        raise
    repo = MenuItemRepository(session)
    try:
        row = await repo.insert(
            name=data["name"],
            description=data["description"],
            price=price,
            category=data["category"],
            availability=data["availability"],
            created_at=_utcnow(),
        )
    except PersistenceError:
        logger.exception("menu_item_create_failed")
        raise
    logger.info("menu_item_created", extra={"menu_item_id": row.id})
    return to_schema(row)


async def get_menu_items(session: AsyncSession) -> list[MenuItemSchema]:
    """All menu items in storage order; no ordering is promised."""
    repo = MenuItemRepository(session)
    rows = await repo.get_all()
    return [to_schema(r) for r in rows]


async def get_menu_item_by_id(session: AsyncSession, item_id: int) -> Optional[MenuItemSchema]:
    repo = MenuItemRepository(session)
    row = await repo.get_by_id(item_id)
    if row is None:
        logger.info("menu_item_not_found", extra={"menu_item_id": item_id})
        return None
    return to_schema(row)


async def update_menu_item(
    session: AsyncSession,
    item_id: int,
    changes: Mapping[str, Any],
) -> Optional[MenuItemSchema]:
    """
    Apply a partial update. `changes` holds only the fields the caller sent:
    a missing key leaves the column alone, a None description clears it.
    updated_at is refreshed even when `changes` is empty.
    Returns None when no row has `item_id`.
    """
    repo = MenuItemRepository(session)
    previous = await repo.get_updated_at(item_id)
    if previous is None:
        logger.info("menu_item_not_found", extra={"menu_item_id": item_id})
        return None

    try:
        data = validate_update(changes)
        if "price" in data:
            data["price"] = _encode_price(data["price"])
    except ValidationError as e:
        logger.warning(
            "menu_item_rejected: %s", e.message, extra={"field": e.field, "menu_item_id": item_id}
        )
        raise

    values = dict(data)
    values["updated_at"] = _next_updated_at(previous)
    try:
        row = await repo.update_fields(item_id, values)
    except PersistenceError:
        logger.exception("menu_item_update_failed", extra={"menu_item_id": item_id})
        raise
    if row is None:
        # deleted between the probe and the write
        logger.info("menu_item_not_found", extra={"menu_item_id": item_id})
        return None
    logger.info(
        "menu_item_updated",
        extra={"menu_item_id": item_id, "changed_fields": sorted(data)},
    )
    return to_schema(row)


async def delete_menu_item(session: AsyncSession, item_id: int) -> bool:
    """Hard delete. False when nothing matched, including non-positive ids."""
    if item_id <= 0:
        return False
    repo = MenuItemRepository(session)
    try:
        deleted = await repo.delete_by_id(item_id)
    except PersistenceError:
        logger.exception("menu_item_delete_failed", extra={"menu_item_id": item_id})
        raise
    if deleted:
        logger.info("menu_item_deleted", extra={"menu_item_id": item_id})
    else:
        logger.info("menu_item_not_found", extra={"menu_item_id": item_id})
    return deleted
