"""Category directory: listing and creation of food categories."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ratguide.models import Category
from ratguide.services.common import commit, parse_food_type, require

logger = logging.getLogger(__name__)


async def list_categories(session: AsyncSession) -> list[Category]:
    """All categories ordered by type, then display name."""
    stmt = select(Category).order_by(Category.type, Category.display_name)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_categories_by_type(session: AsyncSession, type: str) -> list[Category]:
    food_type = parse_food_type(type)
    stmt = (
        select(Category)
        .where(Category.type == food_type.value)
        .order_by(Category.display_name)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_category_by_name(session: AsyncSession, name: str) -> Category | None:
    result = await session.execute(select(Category).where(Category.name == name))
    return result.scalar_one_or_none()


async def create_category(
    session: AsyncSession,
    name: str,
    display_name: str,
    type: str,
) -> Category:
    """Insert a category.

    Raises:
        InvalidArgument: a field is missing or ``type`` is not safe/dangerous.
        DuplicateKey: a category with this ``name`` already exists.
    """
    require(name, "name")
    require(display_name, "display_name")
    require(type, "type")
    food_type = parse_food_type(type)

    category = Category(name=name, display_name=display_name, type=food_type.value)
    session.add(category)
    await commit(session, duplicate_message=f"Категория с именем '{name}' уже существует")
    await session.refresh(category)

    logger.info("Created category %s (%s, id=%s)", category.name, category.type, category.id)
    return category
