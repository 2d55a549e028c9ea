"""
Field rules for menu item payloads, applied before anything touches storage.
Both entry points take a mapping of the fields the caller sent and return a
cleaned copy with enums resolved; keys that were not sent stay absent.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from app.core.exceptions import ValidationError
from app.models.menu_item import MenuAvailability, MenuCategory

CREATE_REQUIRED = ("name", "description", "price", "category")
MUTABLE_FIELDS = ("name", "description", "price", "category", "availability")


def _check_name(value: Any) -> str:
    # no trimming: " " is a valid name, "" is not
    if not isinstance(value, str) or value == "":
        raise ValidationError("name", "name required")
    return value


def _check_description(value: Any) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValidationError("description", "description must be text or null")
    return value


def _check_price(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("price", "price must be positive")
    try:
        number = float(value)
    except OverflowError:
        # ints too large for a float
        raise ValidationError("price", "price must be positive") from None
    if not math.isfinite(number) or number <= 0:
        raise ValidationError("price", "price must be positive")
    return number


def _check_category(value: Any) -> MenuCategory:
    try:
        return MenuCategory(value)
    except ValueError:
        raise ValidationError("category", "invalid category") from None


def _check_availability(value: Any) -> MenuAvailability:
    try:
        return MenuAvailability(value)
    except ValueError:
        raise ValidationError("availability", "invalid availability") from None


_CHECKS = {
    "name": _check_name,
    "description": _check_description,
    "price": _check_price,
    "category": _check_category,
    "availability": _check_availability,
}


def _apply_checks(payload: Mapping[str, Any]) -> dict[str, Any]:
    unknown = set(payload) - set(MUTABLE_FIELDS)
    if unknown:
        field = sorted(unknown)[0]
        raise ValidationError(field, f"unknown field: {field}")
    return {field: _CHECKS[field](payload[field]) for field in MUTABLE_FIELDS if field in payload}


def validate_create(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a creation payload; availability defaults to In Stock when omitted."""
    for field in CREATE_REQUIRED:
        if field not in payload:
            if field == "name":
                raise ValidationError("name", "name required")
            raise ValidationError(field, f"{field} is required")
    data = dict(payload)
    if "availability" not in data:
        data["availability"] = MenuAvailability.IN_STOCK
    return _apply_checks(data)


def validate_update(changes: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate only the fields present in `changes`. A present `description`
    of None is kept as None (clear); absent fields are never inspected.
    """
    return _apply_checks(changes)
