"""Integration tests for the Bookshelf API."""

import pytest
from httpx import AsyncClient

from tests.conftest import ISBNS


async def register(client: AsyncClient, *books: dict) -> list[dict]:
    resp = await client.post("/books", json=list(books))
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_user(client: AsyncClient, username: str = "reader") -> dict:
    resp = await client.post(
        "/users", json={"username": username, "password": "securepass123"}
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


# ── Health ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


# ── Books ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_register_and_list_books(client: AsyncClient):
    created = await register(
        client,
        {"isbn": ISBNS[0], "title": "First", "price": 20},
        {"isbn": "080442957X", "title": "Second", "price": 15},
    )
    assert [b["isbn"] for b in created] == [ISBNS[0], "080442957X"]
    assert created[0]["rating"] == 0.0

    resp = await client.get("/books")
    assert resp.status_code == 200
    assert len(resp.json()) == 2


@pytest.mark.asyncio
async def test_invalid_isbn_rejects_whole_batch(client: AsyncClient):
    resp = await client.post(
        "/books",
        json=[
            {"isbn": ISBNS[0], "title": "Fine"},
            {"isbn": "978030640615", "title": "Too short"},
        ],
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "InvalidLength"

    resp = await client.get("/books")
    assert resp.json() == []


@pytest.mark.asyncio
async def test_duplicate_isbn_conflict(client: AsyncClient):
    await register(client, {"isbn": ISBNS[0], "title": "First"})
    resp = await client.post("/books", json=[{"isbn": ISBNS[0], "title": "Again"}])
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_unknown_book(client: AsyncClient):
    resp = await client.get("/books/9999")
    assert resp.status_code == 404
    assert "does not exist" in resp.json()["detail"]

    resp = await client.get(f"/books/isbn/{ISBNS[0]}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_top_sellers(client: AsyncClient):
    await register(
        client,
        {"isbn": ISBNS[0], "title": "Few", "copies_sold": 3},
        {"isbn": ISBNS[1], "title": "Many", "copies_sold": 300},
        {"isbn": ISBNS[2], "title": "Some", "copies_sold": 30},
    )
    resp = await client.get("/books/top-sellers")
    assert resp.status_code == 200
    assert [b["title"] for b in resp.json()] == ["Many", "Some", "Few"]


@pytest.mark.asyncio
async def test_publisher_discount(client: AsyncClient):
    await register(
        client,
        {"isbn": ISBNS[0], "title": "A", "price": 100, "publisher": "Acme"},
        {"isbn": ISBNS[1], "title": "B", "price": 15, "publisher": "Acme"},
        {"isbn": ISBNS[2], "title": "C", "price": 100, "publisher": "Other"},
    )

    resp = await client.put("/books/discount", json={"publisher": "Acme", "percent": 10})
    assert resp.status_code == 200
    assert resp.json()["updated"] == 2

    prices = {b["isbn"]: b["price"] for b in (await client.get("/books")).json()}
    assert prices == {ISBNS[0]: 90, ISBNS[1]: 14, ISBNS[2]: 100}

    resp = await client.put("/books/discount", json={"publisher": "Nobody", "percent": 10})
    assert resp.status_code == 404

    resp = await client.put("/books/discount", json={"publisher": "Acme", "percent": 120})
    assert resp.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("percent", ["NaN", "Infinity", "-Infinity", -1e300])
async def test_discount_rejects_unusable_percent(client: AsyncClient, percent):
    await register(client, {"isbn": ISBNS[0], "title": "A", "price": 100, "publisher": "Acme"})

    resp = await client.put("/books/discount", json={"publisher": "Acme", "percent": percent})
    assert resp.status_code == 422

    [book] = (await client.get("/books")).json()
    assert book["price"] == 100


# ── Ratings ────────────────────────────────────────


@pytest.mark.asyncio
async def test_rating_updates_book(client: AsyncClient):
    [book] = await register(client, {"isbn": ISBNS[0], "title": "Rated"})
    user = await create_user(client)

    for score in (4, 3):
        await client.post(
            "/ratings", json={"user_id": user["id"], "book_id": book["id"], "score": score}
        )
    resp = await client.post(
        "/ratings", json={"user_id": user["id"], "book_id": book["id"], "score": 5}
    )
    assert resp.status_code == 201
    assert resp.json()["book_rating"] == pytest.approx(4.0)

    resp = await client.get(f"/books/{book['id']}")
    assert resp.json()["rating"] == pytest.approx(4.0)

    resp = await client.post(
        "/ratings", json={"user_id": user["id"], "book_id": book["id"], "score": 9}
    )
    assert resp.status_code == 422


# ── Authors ────────────────────────────────────────


@pytest.mark.asyncio
async def test_author_duplicates_removed(client: AsyncClient):
    lee = {"first_name": "Harper", "last_name": "Lee", "publisher": "Lippincott"}
    resp = await client.post("/authors/batch", json=[lee, lee])
    assert resp.status_code == 201
    first_id, second_id = [a["id"] for a in resp.json()]

    resp = await client.delete("/authors/duplicates")
    assert resp.status_code == 200
    assert resp.json() == {"kept": 1, "removed": [second_id]}

    resp = await client.get("/authors")
    assert [a["id"] for a in resp.json()] == [first_id]


# ── Users ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_user_and_credit_card(client: AsyncClient):
    await create_user(client, "reader")

    resp = await client.post(
        "/users", json={"username": "reader", "password": "securepass123"}
    )
    assert resp.status_code == 409

    resp = await client.post(
        "/users/reader/credit-cards",
        json={"card_number": "4111111111111111", "expiration_date": "12/30", "cvv": "123"},
    )
    assert resp.status_code == 201
    assert resp.json()["last_four"] == "1111"
    assert "cvv" not in resp.json()

    resp = await client.patch("/users/reader", json={"new_name": "Avid Reader"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Avid Reader"


# ── Wishlists & Cart ───────────────────────────────


@pytest.mark.asyncio
async def test_wishlist_move_to_cart(client: AsyncClient):
    [book, other] = await register(
        client,
        {"isbn": ISBNS[0], "title": "Wanted", "price": 20},
        {"isbn": ISBNS[1], "title": "Also wanted", "price": 15},
    )
    user = await create_user(client)

    resp = await client.post("/wishlists", json={"name": "Summer", "user_id": user["id"]})
    assert resp.status_code == 201
    wishlist_id = resp.json()["id"]

    resp = await client.post("/wishlists", json={"name": "Summer", "user_id": user["id"]})
    assert resp.status_code == 409

    assert (await client.post(f"/wishlists/{wishlist_id}/books/{book['id']}")).status_code == 204
    await client.post(f"/cart/{user['id']}/books/{other['id']}")

    resp = await client.post(f"/wishlists/{wishlist_id}/books/{book['id']}/move-to-cart")
    assert resp.status_code == 204

    assert (await client.get(f"/wishlists/{wishlist_id}/books")).json() == []
    cart = (await client.get(f"/cart/{user['id']}/books")).json()
    assert sorted(b["id"] for b in cart) == sorted([book["id"], other["id"]])

    resp = await client.get(f"/cart/{user['id']}/subtotal")
    assert resp.json()["subtotal"] == 35

    resp = await client.post(f"/wishlists/{wishlist_id}/books/{book['id']}/move-to-cart")
    assert resp.status_code == 404
