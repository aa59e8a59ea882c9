"""Locale categories and the masks that select them."""

from __future__ import annotations

from enum import IntEnum

ALL_MASK = 0x7FFFFFFF


class Category(IntEnum):
    """Locale categories."""

    CTYPE = 0
    NUMERIC = 1
    TIME = 2
    COLLATE = 3
    MONETARY = 4
    MESSAGES = 5
    ALL = 6


def category_mask(category: int) -> int:
    """Return the mask bit selecting ``category``; ALL selects everything."""
    try:
        category = Category(category)
    except ValueError:
        raise ValueError(f"unknown locale category {category}") from None
    return ALL_MASK if category is Category.ALL else 1 << category


def categories_in_mask(mask: int) -> list[Category]:
    """Return the individual categories selected by ``mask``."""
    return [
        category
        for category in Category
        if category is not Category.ALL and mask & (1 << category)
    ]