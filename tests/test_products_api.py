from uuid import uuid4

from tests.utils import money


def create_category(client, name="Peripherals"):
    response = client.post("/categories", json={"name": name})
    assert response.status_code == 201
    return response.json()


def create_product(client, name="Keyboard", price=10.5, **extra):
    response = client.post("/products", json={"name": name, "price": price, **extra})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProduct:
    def test_create_with_category(self, client):
        category = create_category(client)
        response = client.post(
            "/products",
            json={"name": "Keyboard", "description": "Mechanical", "price": 10.5, "categoryId": category["id"]},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Keyboard"
        assert body["categoryId"] == category["id"]
        assert money(body["price"]) == money("10.50")
        assert response.headers["location"] == f"/products/{body['id']}"

    def test_create_without_category(self, client):
        body = create_product(client)
        assert body["categoryId"] is None

    def test_unknown_category_is_404(self, client):
        response = client.post("/products", json={"name": "Keyboard", "price": 10.5, "categoryId": str(uuid4())})

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["error"] == "Category not found"
        assert body["path"] == "/products"

    def test_validation_errors_are_field_mapped(self, client):
        response = client.post("/products", json={"name": "  ", "price": 0})

        assert response.status_code == 400
        body = response.json()
        assert set(body) == {"name", "price"}

    def test_missing_name(self, client):
        response = client.post("/products", json={"price": 2.25})

        assert response.status_code == 400
        assert "name" in response.json()

    def test_bad_category_uuid(self, client):
        response = client.post("/products", json={"name": "x", "price": 2.25, "categoryId": "nope"})

        assert response.status_code == 400
        assert "categoryId" in response.json()


class TestProductQueries:
    def test_get_and_missing(self, client):
        product = create_product(client)

        assert client.get(f"/products/{product['id']}").json()["name"] == "Keyboard"
        assert client.get(f"/products/{uuid4()}").status_code == 404

    def test_list_paginates_and_sorts(self, client):
        for name, price in (("A", 4.75), ("B", 2.25), ("C", 10.5)):
            create_product(client, name=name, price=price)

        response = client.get("/products", params={"page": 1, "limit": 2, "sort": "ASC", "sortBy": "price"})
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["B", "A"]

        response = client.get("/products", params={"page": 2, "limit": 2, "sort": "ASC", "sortBy": "price"})
        assert [p["name"] for p in response.json()] == ["C"]

    def test_list_filters_by_category(self, client):
        category = create_category(client)
        create_product(client, name="In", categoryId=category["id"])
        create_product(client, name="Out")

        response = client.get("/products", params={"categoryId": category["id"]})
        assert [p["name"] for p in response.json()] == ["In"]

    def test_limit_above_cap_is_rejected(self, client):
        response = client.get("/products", params={"limit": 101})

        assert response.status_code == 400
        assert "limit" in response.json()

    def test_unknown_sort_column_is_rejected(self, client):
        response = client.get("/products", params={"sortBy": "password"})

        assert response.status_code == 400
        assert "sortBy" in response.json()

    def test_category_detail_lists_products(self, client):
        category = create_category(client)
        create_product(client, name="Mouse", categoryId=category["id"])

        body = client.get(f"/categories/{category['id']}").json()
        assert body["name"] == "Peripherals"
        assert [p["name"] for p in body["products"]] == ["Mouse"]


class TestProductCommands:
    def test_partial_update(self, client):
        product = create_product(client, description="old")

        response = client.patch(f"/products/{product['id']}", json={"price": 4.75})

        assert response.status_code == 200
        body = response.json()
        assert money(body["price"]) == money("4.75")
        assert body["name"] == "Keyboard"
        assert body["description"] == "old"

    def test_update_rejects_low_price(self, client):
        product = create_product(client)
        response = client.patch(f"/products/{product['id']}", json={"price": 0.001})

        assert response.status_code == 400
        assert "price" in response.json()

    def test_delete(self, client):
        product = create_product(client)

        assert client.delete(f"/products/{product['id']}").status_code == 204
        assert client.get(f"/products/{product['id']}").status_code == 404
        assert client.delete(f"/products/{product['id']}").status_code == 404

    def test_update_rejects_blank_name(self, client):
        product = create_product(client)
        response = client.patch(f"/products/{product['id']}", json={"name": "   "})

        assert response.status_code == 400
        assert "name" in response.json()
        assert client.get(f"/products/{product['id']}").json()["name"] == "Keyboard"

    def test_price_must_fit_the_column(self, client):
        response = client.post("/products", json={"name": "Server", "price": 100000000})
        assert response.status_code == 400
        assert "price" in response.json()

        product = create_product(client)
        response = client.patch(f"/products/{product['id']}", json={"price": 100000000})
        assert response.status_code == 400

        assert money(create_product(client, price="99999999.99")["price"]) == money("99999999.99")
