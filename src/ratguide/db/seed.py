"""
Default categories and items for a fresh database.

Seeding is insert-if-absent and runs on every startup:

    # From the lifespan
    await seed_defaults(session_factory)

    # Manually
    python -m ratguide.db.seed

All category inserts are committed before any item is looked up, so item
rows always find their category ids.
"""
import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ratguide.models import Category, Item
from ratguide.services.categories import get_category_by_name

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    categories: int = 0
    items: int = 0


# =============================================================================
# Seed Data
# =============================================================================

DEFAULT_CATEGORIES = [
    {"name": "vegetables", "display_name": "Овощи", "type": "safe"},
    {"name": "fruits", "display_name": "Фрукты и ягоды", "type": "safe"},
    {"name": "grains", "display_name": "Злаки и крупы", "type": "safe"},
    {"name": "protein", "display_name": "Белковая пища", "type": "safe"},
    {"name": "toxic", "display_name": "Ядовитые продукты", "type": "dangerous"},
    {"name": "harmful", "display_name": "Вредные продукты", "type": "dangerous"},
    {"name": "restricted", "display_name": "С осторожностью", "type": "dangerous"},
]

# (name, type, category name, description)
DEFAULT_ITEMS = [
    ("Морковь", "safe", "vegetables", "Источник бета-каротина, давать сырой или варёной"),
    ("Брокколи", "safe", "vegetables", "Богата витамином C, небольшими порциями"),
    ("Огурец", "safe", "vegetables", "Хорошо утоляет жажду летом"),
    ("Тыква", "safe", "vegetables", "Вместе с семечками без соли"),
    ("Кабачок", "safe", "vegetables", ""),
    ("Яблоко", "safe", "fruits", "Без семечек: они содержат амигдалин"),
    ("Банан", "safe", "fruits", "Сладкий, давать понемногу"),
    ("Груша", "safe", "fruits", "Без семечек"),
    ("Черника", "safe", "fruits", "Антиоксиданты"),
    ("Овёс", "safe", "grains", "Основа зерновой смеси"),
    ("Гречка", "safe", "grains", "Варёная без соли"),
    ("Рис", "safe", "grains", "Варёный"),
    ("Варёное яйцо", "safe", "protein", "Источник белка, 1-2 раза в неделю"),
    ("Варёная курица", "safe", "protein", "Без специй и кожи"),
    ("Творог", "safe", "protein", "Нежирный, небольшими порциями"),
    ("Шоколад", "dangerous", "toxic", "Теобромин токсичен для крыс"),
    ("Сырой картофель", "dangerous", "toxic", "Содержит соланин"),
    ("Зелёные бананы", "dangerous", "toxic", "Мешают усвоению крахмала"),
    ("Сырая фасоль", "dangerous", "toxic", "Содержит фитогемагглютинин"),
    ("Лук", "dangerous", "harmful", "Может вызвать анемию"),
    ("Чеснок", "dangerous", "harmful", "Раздражает желудок"),
    ("Газированные напитки", "dangerous", "harmful", "Крысы не умеют отрыгивать газ"),
    ("Цитрусовые", "dangerous", "restricted", "Самцам противопоказаны: риск рака почек"),
    ("Сыр", "dangerous", "restricted", "Жирный и солёный, только в крошечных количествах"),
]


async def seed_categories(session: AsyncSession) -> int:
    """Insert missing default categories, one commit per row."""
    created = 0
    for data in DEFAULT_CATEGORIES:
        if await get_category_by_name(session, data["name"]) is not None:
            continue
        session.add(Category(**data))
        await session.commit()
        created += 1
    return created


async def _item_exists(session: AsyncSession, name: str, type: str, category_id: int | None) -> bool:
    stmt = select(Item.id).where(
        Item.name == name,
        Item.type == type,
        Item.category_id.is_(None) if category_id is None else Item.category_id == category_id,
    )
    result = await session.execute(stmt.limit(1))
    return result.first() is not None


async def seed_items(session: AsyncSession) -> int:
    """Insert missing default items, resolving each category by name."""
    created = 0
    for name, type, category_name, description in DEFAULT_ITEMS:
        category = await get_category_by_name(session, category_name)
        category_id = category.id if category else None
        if await _item_exists(session, name, type, category_id):
            continue
        session.add(Item(name=name, type=type, category_id=category_id, description=description))
        await session.commit()
        created += 1
    return created


async def seed_defaults(session_factory: async_sessionmaker[AsyncSession]) -> SeedResult:
    """Seed categories, then items. Errors propagate to the caller."""
    async with session_factory() as session:
        categories = await seed_categories(session)
    async with session_factory() as session:
        items = await seed_items(session)

    result = SeedResult(categories=categories, items=items)
    if categories or items:
        logger.info("Seeded %d categories and %d items", categories, items)
    else:
        logger.debug("Default data already present, nothing seeded")
    return result


# =============================================================================
# CLI for manual seeding
# =============================================================================

if __name__ == "__main__":
    import asyncio
    import argparse

    from ratguide.core.database import create_engine, create_session_factory
    from ratguide.core.init_settings import settings
    from ratguide.core.logger import configure_logging
    from ratguide.models import Base

    parser = argparse.ArgumentParser(description="Seed database with default categories and items")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate tables first")
    cli_args, _ = parser.parse_known_args()

    configure_logging(settings.LOG_LEVEL)

    async def main():
        engine = create_engine(settings)
        async with engine.begin() as conn:
            if cli_args.reset:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

        result = await seed_defaults(create_session_factory(engine))
        print(f"Seeded: {result.categories} categories, {result.items} items")

        await engine.dispose()

    asyncio.run(main())
