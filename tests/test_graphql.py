import pytest

from ratguide.db.seed import DEFAULT_CATEGORIES, DEFAULT_ITEMS


@pytest.mark.anyio
async def test_graphql_categories(client):
    query = """
        query {
            categories {
                id
                name
                displayName
                type
            }
        }
    """
    response = await client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    data = response.json()
    assert "data" in data
    categories = data["data"]["categories"]
    assert len(categories) == len(DEFAULT_CATEGORIES)
    for category in categories:
        assert "id" in category
        assert "displayName" in category


@pytest.mark.anyio
async def test_graphql_categories_by_type(client):
    query = """
        query {
            categories(type: "dangerous") { name type }
        }
    """
    response = await client.post("/graphql", json={"query": query})
    categories = response.json()["data"]["categories"]
    assert categories
    assert all(c["type"] == "dangerous" for c in categories)


@pytest.mark.anyio
async def test_graphql_categories_invalid_type(client):
    query = """
        query {
            categories(type: "crunchy") { name }
        }
    """
    response = await client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    data = response.json()
    assert data["errors"]
    assert "crunchy" in data["errors"][0]["message"]


@pytest.mark.anyio
async def test_graphql_items(client):
    query = """
        query {
            items {
                id
                name
                type
                categoryId
                categoryName
            }
        }
    """
    response = await client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    items = response.json()["data"]["items"]
    assert len(items) == len(DEFAULT_ITEMS)
    assert all(item["categoryName"] for item in items)


@pytest.mark.anyio
async def test_graphql_items_grouped(client):
    query = """
        query {
            itemsGrouped {
                key
                categoryName
                categoryType
                items { id name }
            }
        }
    """
    response = await client.post("/graphql", json={"query": query})
    assert response.status_code == 200
    groups = response.json()["data"]["itemsGrouped"]

    rest = (await client.get("/api/items/grouped")).json()
    assert [g["key"] for g in groups] == list(rest)
    assert sum(len(g["items"]) for g in groups) == len(DEFAULT_ITEMS)


@pytest.mark.anyio
async def test_graphql_create_and_delete_item(client):
    """Test GraphQL mutations for creating and deleting an item."""
    query = """
        query {
            categories(type: "safe") { id }
        }
    """
    response = await client.post("/graphql", json={"query": query})
    category_id = response.json()["data"]["categories"][0]["id"]

    create_mutation = """
        mutation CreateItem($input: CreateItemInput!) {
            createItem(input: $input) {
                id
                name
                categoryId
                description
            }
        }
    """
    variables = {
        "input": {
            "name": "Test Item",
            "type": "safe",
            "categoryId": category_id,
        }
    }
    response = await client.post("/graphql", json={"query": create_mutation, "variables": variables})
    assert response.status_code == 200
    created = response.json()["data"]["createItem"]
    assert created["name"] == "Test Item"
    assert created["categoryId"] == category_id
    assert created["description"] == ""
    item_id = created["id"]

    delete_mutation = """
        mutation DeleteItem($id: Int!) {
            deleteItem(id: $id)
        }
    """
    response = await client.post("/graphql", json={"query": delete_mutation, "variables": {"id": item_id}})
    assert response.status_code == 200
    assert response.json()["data"]["deleteItem"] is True

    # Verify deleted
    response = await client.post("/graphql", json={"query": delete_mutation, "variables": {"id": item_id}})
    assert response.json()["data"]["deleteItem"] is False


@pytest.mark.anyio
async def test_graphql_create_category_duplicate(client):
    mutation = """
        mutation {
            createCategory(input: {name: "fruits", displayName: "Фрукты", type: "safe"}) {
                id
            }
        }
    """
    response = await client.post("/graphql", json={"query": mutation})
    data = response.json()
    assert data["data"] is None
    assert "fruits" in data["errors"][0]["message"]


@pytest.mark.anyio
async def test_graphql_delete_items_by_type(client):
    mutation = """
        mutation {
            deleteItemsByType(type: "dangerous")
        }
    """
    response = await client.post("/graphql", json={"query": mutation})
    dangerous = [i for i in DEFAULT_ITEMS if i[1] == "dangerous"]
    assert response.json()["data"]["deleteItemsByType"] == len(dangerous)
