import strawberry
from strawberry.types import Info

from ratguide.graphql.types import (
    Category,
    Item,
    ItemGroup,
    category_from_model,
    group_from_data,
    item_from_model,
)
from ratguide.services import categories as category_service
from ratguide.services import items as item_service


@strawberry.type
class Query:
    @strawberry.field
    async def categories(self, info: Info, type: str | None = None) -> list[Category]:
        async with info.context["session_factory"]() as session:
            if type is None:
                rows = await category_service.list_categories(session)
            else:
                rows = await category_service.list_categories_by_type(session, type)
            return [category_from_model(c) for c in rows]

    @strawberry.field
    async def items(self, info: Info, category_id: int | None = None) -> list[Item]:
        async with info.context["session_factory"]() as session:
            if category_id is None:
                rows = await item_service.list_items(session)
                return [item_from_model(item, name) for item, name in rows]
            rows = await item_service.list_items_by_category(session, category_id)
            return [item_from_model(item) for item in rows]

    @strawberry.field
    async def items_grouped(self, info: Info) -> list[ItemGroup]:
        """Grouped listing as an ordered list; GraphQL has no ordered map."""
        async with info.context["session_factory"]() as session:
            groups = await item_service.list_items_grouped(session)
            return [group_from_data(key, group) for key, group in groups.items()]
