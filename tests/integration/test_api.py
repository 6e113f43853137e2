"""End-to-end tests of the HTTP API against an in-memory database."""

import pytest


def create_author(client, name="Natsume Soseki", birth_date="1867-02-09") -> dict:
    response = client.post("/api/authors", json={"name": name, "birth_date": birth_date})
    assert response.status_code == 201, response.text
    return response.json()


def create_book(client, author_ids, title="Kokoro", price=1200, publication_status=0) -> dict:
    response = client.post(
        "/api/books",
        json={
            "title": title,
            "price": price,
            "publication_status": publication_status,
            "author_ids": author_ids,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestAuthorEndpoints:
    def test_create_author(self, client):
        author = create_author(client)

        assert author["id"] is not None
        assert author["name"] == "Natsume Soseki"
        assert author["birth_date"] == "1867-02-09"

    def test_duplicate_author_conflicts(self, client):
        create_author(client)

        response = client.post(
            "/api/authors", json={"name": "Natsume Soseki", "birth_date": "1867-02-09"}
        )

        assert response.status_code == 409
        assert response.json()["detail"]["kind"] == "already_exists"

    def test_create_author_with_id_is_rejected(self, client):
        response = client.post(
            "/api/authors", json={"id": 5, "name": "Natsume Soseki", "birth_date": "1867-02-09"}
        )

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "body",
        [
            {"name": " ", "birth_date": "1867-02-09"},
            {"name": "Natsume Soseki", "birth_date": "2999-01-01"},
            {"name": "Natsume Soseki"},
        ],
    )
    def test_invalid_author_body(self, client, body):
        response = client.post("/api/authors", json=body)

        assert response.status_code == 422

    def test_patch_author(self, client):
        author = create_author(client)

        response = client.patch(f"/api/authors/{author['id']}", json={"name": "Soseki"})

        assert response.status_code == 200
        assert response.json() == {**author, "name": "Soseki"}

    def test_patch_author_blank_name_is_ignored(self, client):
        author = create_author(client)

        response = client.patch(
            f"/api/authors/{author['id']}", json={"name": "", "birth_date": None}
        )

        assert response.status_code == 200
        assert response.json() == author

    def test_patch_author_id_mismatch(self, client):
        author = create_author(client)

        response = client.patch(
            f"/api/authors/{author['id']}", json={"id": author["id"] + 1, "name": "Soseki"}
        )

        assert response.status_code == 400

    def test_patch_unknown_author(self, client):
        response = client.patch("/api/authors/9999", json={"name": "Nobody"})

        assert response.status_code == 404
        assert response.json()["detail"] == {
            "kind": "not_found",
            "entity_type": "author id",
            "field": "id",
            "message": "The requested author id was not found.",
        }

    def test_author_books(self, client):
        author = create_author(client)
        book = create_book(client, [author["id"]])

        response = client.get(f"/api/authors/{author['id']}/books")

        assert response.status_code == 200
        body = response.json()
        assert body["author"] == author
        assert [item["id"] for item in body["books"]] == [book["id"]]


class TestBookEndpoints:
    def test_create_and_get_book(self, client):
        author = create_author(client)
        book = create_book(client, [author["id"]])

        response = client.get(f"/api/books/{book['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "id": book["id"],
            "title": "Kokoro",
            "price": 1200,
            "publication_status": 0,
            "author_ids": [author["id"]],
        }

    def test_create_book_without_authors(self, client):
        response = client.post(
            "/api/books",
            json={"title": "Kokoro", "price": 1, "publication_status": 0, "author_ids": []},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["kind"] == "invalid_argument"

    def test_create_book_with_unknown_author(self, client):
        response = client.post(
            "/api/books",
            json={"title": "Kokoro", "price": 1, "publication_status": 0, "author_ids": [42]},
        )

        assert response.status_code == 404
        assert response.json()["detail"]["kind"] == "reference_not_found"

    @pytest.mark.parametrize(
        "overrides",
        [{"price": -1}, {"publication_status": 2}, {"title": ""}],
    )
    def test_invalid_book_body(self, client, overrides):
        author = create_author(client)
        body = {
            "title": "Kokoro",
            "price": 1,
            "publication_status": 0,
            "author_ids": [author["id"]],
            **overrides,
        }

        response = client.post("/api/books", json=body)

        assert response.status_code == 422

    def test_patch_publishes_and_replaces_authors(self, client):
        soseki = create_author(client)
        ogai = create_author(client, name="Mori Ogai", birth_date="1862-02-17")
        book = create_book(client, [soseki["id"]])

        response = client.patch(
            f"/api/books/{book['id']}",
            json={"publication_status": 1, "author_ids": [ogai["id"]]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["publication_status"] == 1
        assert body["author_ids"] == [ogai["id"]]
        assert body["title"] == "Kokoro"

    def test_patch_cannot_unpublish(self, client):
        author = create_author(client)
        book = create_book(client, [author["id"]], publication_status=1)

        response = client.patch(f"/api/books/{book['id']}", json={"publication_status": 0})

        assert response.status_code == 400
        assert response.json()["detail"]["kind"] == "invalid_state_transition"
        assert client.get(f"/api/books/{book['id']}").json() == book

    def test_patch_with_empty_author_list_keeps_authors(self, client):
        author = create_author(client)
        book = create_book(client, [author["id"]])

        response = client.patch(f"/api/books/{book['id']}", json={"author_ids": []})

        assert response.status_code == 200
        assert response.json() == book

    def test_patch_collision_conflicts(self, client):
        author = create_author(client)
        create_book(client, [author["id"]], title="Sanshiro")
        book = create_book(client, [author["id"]])

        response = client.patch(f"/api/books/{book['id']}", json={"title": "Sanshiro"})

        assert response.status_code == 409

    def test_get_unknown_book(self, client):
        response = client.get("/api/books/9999")

        assert response.status_code == 404
        assert response.json()["detail"]["entity_type"] == "book id"


class TestHealth:
    def test_health_ok(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
