from uuid import uuid4

import pytest


def register(client, name="Alice", email="alice@example.com", password="secret123"):
    response = client.post("/users", json={"name": name, "email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def alice(client):
    return register(client)


class TestRegistration:
    def test_register(self, client):
        response = client.post("/users", json={"name": "Alice", "email": "alice@example.com", "password": "secret123"})

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "alice@example.com"
        assert "password" not in body
        assert response.headers["location"] == f"/users/{body['id']}"

    def test_validation(self, client):
        response = client.post("/users", json={"name": "Al", "email": "not-an-email", "password": "short"})

        assert response.status_code == 400
        assert set(response.json()) == {"name", "email", "password"}

    def test_duplicate_email(self, client, alice):
        response = client.post("/users", json={"name": "Alice B", "email": "alice@example.com", "password": "secret123"})

        assert response.status_code == 400
        assert "email" in response.json()


class TestUserQueries:
    def test_list_sorted_by_name(self, client):
        for name in ("Charlie", "Alice", "Bobby"):
            register(client, name=name, email=f"{name.lower()}@example.com")

        response = client.get("/users", params={"sort": "ASC", "sortBy": "name"})
        assert [u["name"] for u in response.json()] == ["Alice", "Bobby", "Charlie"]

        response = client.get("/users", params={"sort": "DESC", "sortBy": "name", "limit": 1, "page": 2})
        assert [u["name"] for u in response.json()] == ["Bobby"]

    def test_get_missing(self, client):
        response = client.get(f"/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"] == "User not found"

    def test_update(self, client, alice):
        response = client.patch(f"/users/{alice['id']}", json={"name": "Alicia"})

        assert response.status_code == 200
        assert response.json()["name"] == "Alicia"
        assert response.json()["email"] == "alice@example.com"

    def test_update_rejects_blank_name(self, client, alice):
        response = client.patch(f"/users/{alice['id']}", json={"name": "   "})

        assert response.status_code == 400
        assert "name" in response.json()
        assert client.get(f"/users/{alice['id']}").json()["name"] == "Alice"

    def test_change_password(self, client, alice):
        url = f"/users/{alice['id']}/change-password"

        wrong = client.patch(url, json={"oldPassword": "nope", "newPassword": "another-secret"})
        assert wrong.status_code == 400

        ok = client.patch(url, json={"oldPassword": "secret123", "newPassword": "another-secret"})
        assert ok.status_code == 204

        again = client.patch(url, json={"oldPassword": "secret123", "newPassword": "third-secret"})
        assert again.status_code == 400

    def test_delete_cascades(self, client, alice):
        client.post(f"/users/{alice['id']}/addresses", json={"street": "1 Main", "city": "Springfield", "zip": "12345"})
        client.put(f"/users/{alice['id']}/profile", json={"bio": "hi"})

        assert client.delete(f"/users/{alice['id']}").status_code == 204
        assert client.get(f"/users/{alice['id']}").status_code == 404


class TestAddresses:
    def test_add_and_remove(self, client, alice):
        url = f"/users/{alice['id']}/addresses"
        first = client.post(url, json={"street": "1 Main", "city": "Springfield", "zip": "12345"}).json()
        second = client.post(url, json={"street": "2 Side", "city": "Shelbyville", "zip": "54321"})
        assert second.status_code == 201
        second = second.json()

        detail = client.get(f"/users/{alice['id']}").json()
        assert [a["street"] for a in detail["addresses"]] == ["1 Main", "2 Side"]

        assert client.delete(f"{url}/{second['id']}").status_code == 204
        detail = client.get(f"/users/{alice['id']}").json()
        assert [a["id"] for a in detail["addresses"]] == [first["id"]]

    def test_remove_unknown(self, client, alice):
        response = client.delete(f"/users/{alice['id']}/addresses/{uuid4()}")
        assert response.status_code == 404


class TestProfile:
    def test_set_update_remove(self, client, alice):
        url = f"/users/{alice['id']}/profile"

        created = client.put(url, json={"bio": "hello", "phoneNumber": "555", "dateOfBirth": "1990-01-01"})
        assert created.status_code == 200
        assert created.json()["loyaltyPoints"] == 0

        updated = client.put(url, json={"bio": "changed", "loyaltyPoints": 10}).json()
        assert updated["id"] == created.json()["id"]

        profile = client.get(f"/users/{alice['id']}").json()["profile"]
        assert profile["bio"] == "changed"
        assert profile["loyaltyPoints"] == 10

        assert client.delete(url).status_code == 204
        assert client.get(f"/users/{alice['id']}").json()["profile"] is None
        assert client.delete(url).status_code == 404


class TestTags:
    def create_tag(self, client, name, description=None):
        response = client.post("/tags", json={"name": name, "description": description})
        assert response.status_code == 201
        return response.json()

    def test_attach_and_remove(self, client, alice):
        vip = self.create_tag(client, "vip")
        beta = self.create_tag(client, "beta", "beta tester")

        response = client.post(f"/users/{alice['id']}/tags", json={"tagIds": [vip["id"], beta["id"]]})
        assert response.status_code == 200
        assert [t["name"] for t in response.json()["tags"]] == ["beta", "vip"]

        assert client.delete(f"/users/{alice['id']}/tags/vip").status_code == 204
        detail = client.get(f"/users/{alice['id']}").json()
        assert [t["name"] for t in detail["tags"]] == ["beta"]

        #tags live on after being detached
        assert {t["name"] for t in client.get("/tags").json()} == {"vip", "beta"}

    def test_tag_shared_by_users(self, client, alice):
        bob = register(client, name="Bobby", email="bob@example.com")
        vip = self.create_tag(client, "vip")

        client.post(f"/users/{alice['id']}/tags", json={"tagIds": [vip["id"]]})
        client.post(f"/users/{bob['id']}/tags", json={"tagIds": [vip["id"]]})
        client.delete(f"/users/{alice['id']}/tags/vip")

        assert client.get(f"/users/{alice['id']}").json()["tags"] == []
        assert [t["name"] for t in client.get(f"/users/{bob['id']}").json()["tags"]] == ["vip"]

    def test_unknown_tag(self, client, alice):
        response = client.post(f"/users/{alice['id']}/tags", json={"tagIds": [str(uuid4())]})
        assert response.status_code == 404


class TestWishlist:
    def test_flow(self, client, alice):
        keyboard = client.post("/products", json={"name": "Keyboard", "price": 10.5}).json()
        mouse = client.post("/products", json={"name": "Mouse", "price": 2.25}).json()
        url = f"/users/{alice['id']}/wishlist"

        assert client.get(url).json()["products"] == []

        body = client.put(url, json={"productIds": [keyboard["id"]]}).json()
        assert [p["id"] for p in body["products"]] == [keyboard["id"]]

        body = client.post(f"{url}/{mouse['id']}").json()
        assert [p["name"] for p in body["products"]] == ["Keyboard", "Mouse"]

        assert client.delete(f"{url}/{keyboard['id']}").status_code == 204
        assert [p["name"] for p in client.get(url).json()["products"]] == ["Mouse"]

    def test_unknown_product(self, client, alice):
        response = client.put(f"/users/{alice['id']}/wishlist", json={"productIds": [str(uuid4())]})
        assert response.status_code == 404

    def test_unknown_user(self, client):
        assert client.get(f"/users/{uuid4()}/wishlist").status_code == 404
