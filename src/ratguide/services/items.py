"""Item catalog: listing, grouping, creation and deletion of food items."""
import logging
from dataclasses import dataclass, field

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ratguide.core.errors import NotFound
from ratguide.models import Category, FoodType, Item
from ratguide.services.common import commit, parse_food_type, require

logger = logging.getLogger(__name__)

UNCATEGORIZED_KEY = "uncategorized"
UNCATEGORIZED_NAME = "Без категории"


@dataclass
class ItemGroup:
    category_name: str
    category_type: str
    items: list[Item] = field(default_factory=list)


def _newest_first():
    return (Item.created_at.desc(), Item.id.desc())


async def list_items(session: AsyncSession) -> list[tuple[Item, str | None]]:
    """All items, newest first, paired with their category's display name.

    The name is ``None`` when the item has no category or points at a
    missing one.
    """
    stmt = (
        select(Item, Category.display_name)
        .outerjoin(Category, Item.category_id == Category.id)
        .order_by(*_newest_first())
    )
    result = await session.execute(stmt)
    return [(item, category_name) for item, category_name in result.all()]


async def list_items_by_category(session: AsyncSession, category_id: int) -> list[Item]:
    stmt = select(Item).where(Item.category_id == category_id).order_by(*_newest_first())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_items_grouped(session: AsyncSession) -> dict[str, ItemGroup]:
    """Partition every item into a group keyed by category name.

    Groups appear in (category type, display name) order and items inside a
    group newest first. Items with no category or a dangling category id go
    to the ``"uncategorized"`` group.
    """
    stmt = (
        select(Item, Category.name, Category.display_name, Category.type)
        .outerjoin(Category, Item.category_id == Category.id)
        .order_by(Category.type, Category.display_name, *_newest_first())
    )
    result = await session.execute(stmt)

    groups: dict[str, ItemGroup] = {}
    for item, key, category_name, category_type in result.all():
        if key is None:
            key = UNCATEGORIZED_KEY
            category_name = UNCATEGORIZED_NAME
            category_type = FoodType.SAFE.value
        group = groups.get(key)
        if group is None:
            group = groups[key] = ItemGroup(category_name, category_type)
        group.items.append(item)
    return groups


async def create_item(
    session: AsyncSession,
    name: str,
    type: str,
    category_id: int | None = None,
    description: str | None = None,
) -> Item:
    """Insert an item. ``category_id`` is stored as given, without lookup."""
    require(name, "name")
    require(type, "type")
    food_type = parse_food_type(type)

    item = Item(
        name=name,
        type=food_type.value,
        category_id=category_id,
        description=description or "",
    )
    session.add(item)
    await commit(session)
    await session.refresh(item)

    logger.info("Created item %s (%s, id=%s, category_id=%s)", item.name, item.type, item.id, item.category_id)
    return item


async def delete_item(session: AsyncSession, item_id: int) -> None:
    result = await session.execute(delete(Item).where(Item.id == item_id))
    if result.rowcount == 0:
        await session.rollback()
        raise NotFound("Продукт не найден")
    await commit(session)
    logger.info("Deleted item id=%s", item_id)


async def delete_items_by_type(session: AsyncSession, type: str) -> int:
    """Delete every item of ``type``; returns the number of rows removed."""
    food_type = parse_food_type(type)
    result = await session.execute(delete(Item).where(Item.type == food_type.value))
    deleted = result.rowcount
    await commit(session)
    logger.info("Deleted %d %s items", deleted, food_type.value)
    return deleted
