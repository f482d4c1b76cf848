import strawberry
from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from ratguide.graphql.queries import Query
from ratguide.graphql.mutations import Mutation


async def get_context(request: Request):
    """
    Provide the session factory to resolvers.

    GraphQL resolvers execute concurrently, but SQLAlchemy async sessions
    don't support concurrent operations. Each resolver opens its own session
    from the application's factory.
    """
    return {
        "session_factory": request.app.state.session_factory,
    }


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)

graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
)
