import strawberry
from strawberry.types import Info

from ratguide.core.errors import NotFound
from ratguide.graphql.types import Category, Item, category_from_model, item_from_model
from ratguide.services import categories as category_service
from ratguide.services import items as item_service


@strawberry.input
class CreateCategoryInput:
    name: str
    display_name: str
    type: str


@strawberry.input
class CreateItemInput:
    name: str
    type: str
    category_id: int | None = None
    description: str | None = None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_category(self, info: Info, input: CreateCategoryInput) -> Category:
        async with info.context["session_factory"]() as session:
            category = await category_service.create_category(session, **strawberry.asdict(input))
            return category_from_model(category)

    @strawberry.mutation
    async def create_item(self, info: Info, input: CreateItemInput) -> Item:
        async with info.context["session_factory"]() as session:
            item = await item_service.create_item(session, **strawberry.asdict(input))
            return item_from_model(item)

    @strawberry.mutation
    async def delete_item(self, info: Info, id: int) -> bool:
        async with info.context["session_factory"]() as session:
            try:
                await item_service.delete_item(session, id)
            except NotFound:
                return False
            return True

    @strawberry.mutation
    async def delete_items_by_type(self, info: Info, type: str) -> int:
        async with info.context["session_factory"]() as session:
            return await item_service.delete_items_by_type(session, type)
