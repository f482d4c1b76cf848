"""
REST API Routes.

Categories are read-mostly; items support add and delete. Every mutation
answers with a human-readable ``message`` the page shows as a notification.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ratguide.core.database import get_session
from ratguide.core.errors import NotFound
from ratguide.services import categories as category_service
from ratguide.services import items as item_service
from ratguide.rest.schemas import (
    BulkDeleteResponse,
    CategoryCreate,
    CategoryCreatedResponse,
    CategoryResponse,
    ItemCreate,
    ItemCreatedResponse,
    ItemGroupResponse,
    ItemResponse,
    ItemWithCategoryResponse,
    MessageResponse,
)

router = APIRouter(prefix="/api", tags=["REST API"])


def _parse_id(value: str) -> int | None:
    """Path ids that are not integers match no row."""
    try:
        return int(value)
    except ValueError:
        return None


# =============================================================================
# Categories
# =============================================================================

@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(session: AsyncSession = Depends(get_session)):
    """List all categories ordered by type, then display name."""
    return await category_service.list_categories(session)


@router.get("/categories/{type}", response_model=list[CategoryResponse])
async def list_categories_by_type(type: str, session: AsyncSession = Depends(get_session)):
    return await category_service.list_categories_by_type(session, type)


@router.post("/categories", response_model=CategoryCreatedResponse)
async def create_category(payload: CategoryCreate, session: AsyncSession = Depends(get_session)):
    category = await category_service.create_category(
        session,
        name=payload.name,
        display_name=payload.display_name,
        type=payload.type,
    )
    return CategoryCreatedResponse(
        **CategoryResponse.model_validate(category).model_dump(),
        message="Категория успешно добавлена!",
    )


# =============================================================================
# Items
# =============================================================================

@router.get("/items", response_model=list[ItemWithCategoryResponse])
async def list_items(session: AsyncSession = Depends(get_session)):
    """List all items, newest first, with their category label."""
    rows = await item_service.list_items(session)
    return [
        ItemWithCategoryResponse(
            **ItemResponse.model_validate(item).model_dump(),
            category_name=category_name,
        )
        for item, category_name in rows
    ]


@router.get("/items/grouped", response_model=dict[str, ItemGroupResponse])
async def list_items_grouped(session: AsyncSession = Depends(get_session)):
    """Items grouped by category key; the JSON object keeps group order."""
    groups = await item_service.list_items_grouped(session)
    return {
        key: ItemGroupResponse(
            category_name=group.category_name,
            category_type=group.category_type,
            items=[ItemResponse.model_validate(item) for item in group.items],
        )
        for key, group in groups.items()
    }


@router.get("/items/category/{category_id}", response_model=list[ItemResponse])
async def list_items_by_category(category_id: str, session: AsyncSession = Depends(get_session)):
    """Items of one category. An id that matches nothing, numeric or not, gives []."""
    parsed = _parse_id(category_id)
    if parsed is None:
        return []
    return await item_service.list_items_by_category(session, parsed)


@router.post("/items", response_model=ItemCreatedResponse)
async def create_item(payload: ItemCreate, session: AsyncSession = Depends(get_session)):
    item = await item_service.create_item(
        session,
        name=payload.name,
        type=payload.type,
        category_id=payload.category_id,
        description=payload.description,
    )
    return ItemCreatedResponse(
        **ItemResponse.model_validate(item).model_dump(),
        message="Продукт успешно добавлен!",
    )


@router.delete("/items/type/{type}", response_model=BulkDeleteResponse)
async def delete_items_by_type(type: str, session: AsyncSession = Depends(get_session)):
    """Bulk delete all items of one type. Zero matches is not an error."""
    deleted = await item_service.delete_items_by_type(session, type)
    return BulkDeleteResponse(message=f"Удалено продуктов: {deleted}", deleted_count=deleted)


@router.delete("/items/{item_id}", response_model=MessageResponse)
async def delete_item(item_id: str, session: AsyncSession = Depends(get_session)):
    parsed = _parse_id(item_id)
    if parsed is None:
        raise NotFound("Продукт не найден")
    await item_service.delete_item(session, parsed)
    return MessageResponse(message="Продукт успешно удален!")
