"""HTTP-level tests for the /books and /cars routers over in-memory stores."""

import pytest
from fastapi.testclient import TestClient

from catalog.api import create_app, provide_repositories
from catalog.infrastructure.persistence.repositories import InMemoryItemRepository, Repositories
from catalog.settings import CatalogSettings


@pytest.fixture
def client():
    repositories = Repositories(
        books=InMemoryItemRepository("book"),
        cars=InMemoryItemRepository("car"),
    )
    app = create_app(CatalogSettings())
    app.dependency_overrides[provide_repositories] = lambda: repositories
    with TestClient(app) as test_client:
        yield test_client


def _book(**overrides):
    defaults = {
        "name": "Alpha",
        "category": "KINDLE",
        "vendor": "FOO_PUBLISHER",
        "rating": 4,
        "price": 11.1,
        "available": True,
        "release_date": "2022-02-01",
        "serial": "0-0070-0644-6",
        "homepage": "https://acme.at",
        "tags": ["JAVASCRIPT"],
    }
    defaults.update(overrides)
    return defaults


def _create(client, **overrides):
    response = client.post("/books", json=_book(**overrides))
    assert response.status_code == 201
    return response.headers["Location"].rsplit("/", 1)[-1]


# --- POST ---

def test_post_returns_location(client):
    response = client.post("/books", json=_book())
    assert response.status_code == 201
    assert response.headers["Location"].startswith("http://testserver/books/")


def test_post_invalid_returns_field_messages(client):
    response = client.post("/books", json=_book(category="INVALID_ENUM_VALUE", rating=9))
    assert response.status_code == 400
    assert set(response.json()) == {"category", "rating"}


def test_post_duplicate_name_returns_400(client):
    _create(client)
    response = client.post("/books", json=_book(serial="0-0070-9732-8"))
    assert response.status_code == 400
    assert "Alpha" in response.text


def test_post_duplicate_serial_returns_400(client):
    _create(client)
    response = client.post("/books", json=_book(name="Beta"))
    assert response.status_code == 400
    assert "ISBN" in response.text


def test_car_uses_its_own_rules(client):
    response = client.post(
        "/cars",
        json={
            "name": "Roadster",
            "category": "SEDAN",
            "vendor": "FOO_MANUFACTURER",
            "serial": "1HGCM82633A004352",
        },
    )
    assert response.status_code == 201


# --- GET by id ---

def test_get_returns_item_with_etag(client):
    item_id = _create(client)
    response = client.get(f"/books/{item_id}")
    assert response.status_code == 200
    assert response.headers["ETag"] == '"0"'
    assert response.json()["name"] == "Alpha"
    assert response.json()["_links"]["self"]["href"].endswith(f"/books/{item_id}")


def test_get_body_has_no_version(client):
    item_id = _create(client)
    assert "version" not in client.get(f"/books/{item_id}").json()


def test_get_with_current_etag_returns_304(client):
    item_id = _create(client)
    response = client.get(f"/books/{item_id}", headers={"If-None-Match": '"0"'})
    assert response.status_code == 304


def test_get_with_old_etag_returns_item(client):
    item_id = _create(client)
    client.put(f"/books/{item_id}", json=_book(name="Beta"), headers={"If-Match": '"0"'})
    response = client.get(f"/books/{item_id}", headers={"If-None-Match": '"0"'})
    assert response.status_code == 200
    assert response.headers["ETag"] == '"1"'


def test_get_unknown_returns_404(client):
    assert client.get("/books/3b8a5f44-1c50-4c5b-9a5d-1a2b3c4d5e6f").status_code == 404


def test_book_is_not_visible_as_car(client):
    item_id = _create(client)
    assert client.get(f"/cars/{item_id}").status_code == 404


def test_fractional_rating_round_trips(client):
    item_id = _create(client, rating=2.5)
    assert client.get(f"/books/{item_id}").json()["rating"] == 2.5


# --- GET collection ---

def test_find_by_short_name_matches_substring(client):
    _create(client, name="Alpha Beta Gamma")
    _create(client, name="Gamma", serial="0-0070-9732-8")
    response = client.get("/books", params={"name": "gam"})
    assert [entry["name"] for entry in response.json()] == ["Alpha Beta Gamma", "Gamma"]


def test_find_by_long_name_is_exact(client):
    _create(client, name="Alpha Beta Gamma")
    assert client.get("/books", params={"name": "Alpha Beta"}).status_code == 404


def test_find_by_tags(client):
    _create(client, tags=["JAVASCRIPT", "TYPESCRIPT"])
    _create(client, name="Beta", serial="0-0070-9732-8", tags=["PYTHON"])
    response = client.get("/books", params={"tag": ["javascript", "typescript"]})
    assert [entry["name"] for entry in response.json()] == ["Alpha"]


def test_find_without_match_returns_404(client):
    assert client.get("/books", params={"category": "PRINT"}).status_code == 404


# --- PUT ---

def test_put_returns_new_etag(client):
    item_id = _create(client)
    response = client.put(f"/books/{item_id}", json=_book(name="Beta"), headers={"If-Match": '"0"'})
    assert response.status_code == 204
    assert response.headers["ETag"] == '"1"'


def test_put_accepts_unquoted_version(client):
    item_id = _create(client)
    response = client.put(f"/books/{item_id}", json=_book(), headers={"If-Match": "0"})
    assert response.status_code == 204


def test_put_without_if_match_returns_428(client):
    item_id = _create(client)
    assert client.put(f"/books/{item_id}", json=_book()).status_code == 428


def test_put_with_malformed_version_returns_412(client):
    item_id = _create(client)
    response = client.put(f"/books/{item_id}", json=_book(), headers={"If-Match": '"abc"'})
    assert response.status_code == 412


def test_put_with_outdated_version_returns_412(client):
    item_id = _create(client)
    client.put(f"/books/{item_id}", json=_book(), headers={"If-Match": '"0"'})
    response = client.put(f"/books/{item_id}", json=_book(), headers={"If-Match": '"0"'})
    assert response.status_code == 412
    assert "outdated" in response.text


def test_put_unknown_id_returns_412(client):
    response = client.put(
        "/books/3b8a5f44-1c50-4c5b-9a5d-1a2b3c4d5e6f",
        json=_book(),
        headers={"If-Match": '"0"'},
    )
    assert response.status_code == 412


def test_put_invalid_returns_400(client):
    item_id = _create(client)
    response = client.put(f"/books/{item_id}", json=_book(rating=-1), headers={"If-Match": '"0"'})
    assert response.status_code == 400
    assert set(response.json()) == {"rating"}


def test_put_to_foreign_name_returns_400(client):
    _create(client, name="Beta", serial="0-0070-9732-8")
    item_id = _create(client)
    response = client.put(f"/books/{item_id}", json=_book(name="Beta"), headers={"If-Match": '"0"'})
    assert response.status_code == 400


def test_put_path_id_wins_over_body_id(client):
    item_id = _create(client)
    body = _book(id="3b8a5f44-1c50-4c5b-9a5d-1a2b3c4d5e6f")
    response = client.put(f"/books/{item_id}", json=body, headers={"If-Match": '"0"'})
    assert response.status_code == 204


# --- DELETE ---

def test_delete_returns_204(client):
    item_id = _create(client)
    assert client.delete(f"/books/{item_id}").status_code == 204
    assert client.get(f"/books/{item_id}").status_code == 404


def test_delete_unknown_returns_204(client):
    assert client.delete("/books/3b8a5f44-1c50-4c5b-9a5d-1a2b3c4d5e6f").status_code == 204
