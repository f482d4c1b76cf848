"""
GraphQL types for the catalog.

Types are declared by hand and filled from ORM rows by the ``*_from_model``
helpers, so resolvers never touch lazy relationships on async sessions.
"""
import strawberry
from datetime import datetime

from ratguide import models
from ratguide.services.items import ItemGroup as ItemGroupData


@strawberry.type
class Category:
    id: int
    name: str
    display_name: str
    type: str
    created_at: datetime | None


@strawberry.type
class Item:
    id: int
    name: str
    type: str
    category_id: int | None
    description: str
    created_at: datetime | None
    category_name: str | None = None


@strawberry.type
class ItemGroup:
    """One category bucket of the grouped listing."""
    key: str
    category_name: str
    category_type: str
    items: list[Item]


def category_from_model(category: models.Category) -> Category:
    return Category(
        id=category.id,
        name=category.name,
        display_name=category.display_name,
        type=category.type,
        created_at=category.created_at,
    )


def item_from_model(item: models.Item, category_name: str | None = None) -> Item:
    return Item(
        id=item.id,
        name=item.name,
        type=item.type,
        category_id=item.category_id,
        description=item.description,
        created_at=item.created_at,
        category_name=category_name,
    )


def group_from_data(key: str, group: ItemGroupData) -> ItemGroup:
    return ItemGroup(
        key=key,
        category_name=group.category_name,
        category_type=group.category_type,
        items=[item_from_model(i, group.category_name) for i in group.items],
    )
