"""
Menu RPC procedures: createMenuItem, getMenuItems, getMenuItemById, updateMenuItem, deleteMenuItem.
A missing item is a 200 with a JSON null body; errors are 400 (validation) or 500 (storage).
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import EncodingError, PersistenceError, ValidationError
from app.db import get_db
from app.schemas.menu import (
    CreateMenuItemInput,
    DeleteResult,
    MenuItemIdInput,
    MenuItemSchema,
    UpdateMenuItemInput,
)
from app.services import menu_service

router = APIRouter(tags=["menu"])

PERSISTENCE_FAILURE_DETAIL = "Menu item could not be saved, please retry"


def _validation_http_error(e: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"field": e.field, "message": e.message},
    )


def _persistence_http_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=PERSISTENCE_FAILURE_DETAIL,
    )


@router.post(
    "/createMenuItem",
    response_model=MenuItemSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create menu item",
    description="availability defaults to 'In Stock'. description is required but may be null.",
    responses={400: {"description": "Field validation failed"}},
)
async def create_menu_item(
    body: CreateMenuItemInput,
    session: AsyncSession = Depends(get_db),
) -> MenuItemSchema:
    try:
        return await menu_service.create_menu_item(session, body.model_dump(exclude_unset=True))
    except ValidationError as e:
        raise _validation_http_error(e)
    except (PersistenceError, EncodingError):
        raise _persistence_http_error()


@router.get(
    "/getMenuItems",
    response_model=list[MenuItemSchema],
    summary="List menu items",
)
async def get_menu_items(session: AsyncSession = Depends(get_db)) -> list[MenuItemSchema]:
    try:
        return await menu_service.get_menu_items(session)
    except (PersistenceError, EncodingError):
        raise _persistence_http_error()


@router.get(
    "/getMenuItemById",
    response_model=Optional[MenuItemSchema],
    summary="Get menu item by ID",
    description="Returns null when no item has this id.",
)
async def get_menu_item_by_id(
    id: int = Query(...),
    session: AsyncSession = Depends(get_db),
) -> Optional[MenuItemSchema]:
    try:
        return await menu_service.get_menu_item_by_id(session, id)
    except (PersistenceError, EncodingError):
        raise _persistence_http_error()


@router.post(
    "/updateMenuItem",
    response_model=Optional[MenuItemSchema],
    summary="Partially update a menu item",
    description="Only keys present in the body are changed; description: null clears it. Returns null when the id does not exist.",
    responses={400: {"description": "Field validation failed"}},
)
async def update_menu_item(
    body: UpdateMenuItemInput,
    session: AsyncSession = Depends(get_db),
) -> Optional[MenuItemSchema]:
    try:
        return await menu_service.update_menu_item(session, body.id, body.changes())
    except ValidationError as e:
        raise _validation_http_error(e)
    except (PersistenceError, EncodingError):
        raise _persistence_http_error()


@router.post(
    "/deleteMenuItem",
    response_model=DeleteResult,
    summary="Delete a menu item",
)
async def delete_menu_item(
    body: MenuItemIdInput,
    session: AsyncSession = Depends(get_db),
) -> DeleteResult:
    try:
        success = await menu_service.delete_menu_item(session, body.id)
    except PersistenceError:
        raise _persistence_http_error()
    return DeleteResult(success=success)
