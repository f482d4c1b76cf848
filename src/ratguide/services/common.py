"""Helpers shared by the catalog services."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ratguide.core.errors import DuplicateKey, InvalidArgument, StoreError, store_message
from ratguide.models import FoodType

logger = logging.getLogger(__name__)


def parse_food_type(value) -> FoodType:
    """Whitelist check for the safe/dangerous enum."""
    if isinstance(value, FoodType):
        return value
    try:
        return FoodType(value)
    except ValueError:
        raise InvalidArgument(
            f"Неверный тип: {value!r}. Допустимые значения: {', '.join(FoodType.values())}"
        ) from None


def require(value, field: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgument(f"Поле '{field}' обязательно")


async def commit(session: AsyncSession, duplicate_message: str | None = None) -> None:
    """Commit, rolling back and translating store failures into domain errors."""
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        if duplicate_message is not None:
            raise DuplicateKey(duplicate_message) from exc
        logger.error("Integrity error on commit: %s", exc)
        raise StoreError(store_message(exc)) from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("Store error on commit: %s", exc)
        raise StoreError(store_message(exc)) from exc
