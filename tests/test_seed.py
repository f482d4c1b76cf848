import pytest
from sqlalchemy import select

from ratguide.db.seed import DEFAULT_CATEGORIES, DEFAULT_ITEMS, seed_defaults
from ratguide.models import Category, Item


@pytest.mark.anyio
async def test_seed_inserts_defaults(session_factory):
    result = await seed_defaults(session_factory)
    assert result.categories == len(DEFAULT_CATEGORIES)
    assert result.items == len(DEFAULT_ITEMS)

    async with session_factory() as session:
        categories = {c.id: c.name for c in (await session.execute(select(Category))).scalars()}
        items = (await session.execute(select(Item))).scalars().all()

    # Every seeded item found its category
    by_name = {name: category for name, _, category, _ in DEFAULT_ITEMS}
    for item in items:
        assert categories[item.category_id] == by_name[item.name]


@pytest.mark.anyio
async def test_seed_is_idempotent(session_factory):
    await seed_defaults(session_factory)
    again = await seed_defaults(session_factory)
    assert again.categories == 0
    assert again.items == 0

    async with session_factory() as session:
        assert len((await session.execute(select(Item))).scalars().all()) == len(DEFAULT_ITEMS)


@pytest.mark.anyio
async def test_seed_fills_gaps(session_factory):
    await seed_defaults(session_factory)
    async with session_factory() as session:
        item = (await session.execute(select(Item).limit(1))).scalar_one()
        await session.delete(item)
        await session.commit()

    result = await seed_defaults(session_factory)
    assert result == type(result)(categories=0, items=1)


@pytest.mark.anyio
async def test_seed_on_startup_can_be_disabled(empty_client):
    response = await empty_client.get("/api/categories")
    assert response.json() == []
