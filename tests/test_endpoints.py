"""
HTTP tests for the product and ingredient routes.

Each test starts from empty tables (database fixture) and drives the API
through the FastAPI TestClient.
"""

import copy

from test_fixtures import client, database, BURGER, PIZZA


def _create(payload: dict) -> str:
    r = client.post("/products/add", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def _product_by_reference(reference: str) -> dict:
    r = client.get("/products/search", params={"product_reference": reference})
    assert r.status_code == 200
    (product,) = r.json()
    return product


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "ProductCatalog"


def test_request_id_header(database):
    r = client.get("/products")
    assert r.status_code == 200
    assert r.headers.get("X-Request-ID")
    assert r.headers.get("X-Process-Time")


def test_list_empty(database):
    assert client.get("/products").json() == []
    assert client.get("/ingredients").json() == []


def test_create_burger_then_delete_removes_bun(database):
    """
    Scenario: create a burger with one bun, then delete the burger.

    Verifies:
    - POST /products/add answers 201 with the product reference
    - The bun carries that reference
    - DELETE /products/remove/{id} returns the product and removes the bun
    """
    reference = _create(BURGER)
    assert isinstance(reference, str) and reference.startswith("REF-")

    ingredients = client.get("/ingredients").json()
    assert len(ingredients) == 1
    assert ingredients[0]["name"] == "Bun"
    assert ingredients[0]["product_reference"] == reference

    product = _product_by_reference(reference)
    r = client.delete(f"/products/remove/{product['product_id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "Burger"
    assert r.json()["product_reference"] == reference

    assert client.get("/products").json() == []
    assert client.get("/ingredients").json() == []


def test_delete_keeps_other_products_ingredients(database):
    burger_ref = _create(BURGER)
    pizza_ref = _create(PIZZA)

    burger = _product_by_reference(burger_ref)
    client.delete(f"/products/remove/{burger['product_id']}")

    remaining = client.get("/ingredients").json()
    assert [i["name"] for i in remaining] == ["Dough", "Mozzarella"]
    assert {i["product_reference"] for i in remaining} == {pizza_ref}


def test_get_product_and_its_ingredients(database):
    reference = _create(PIZZA)
    product = _product_by_reference(reference)

    r = client.get(f"/products/{product['product_id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "Pizza"
    assert r.json()["category"] == "FOOD"

    r = client.get(f"/products/{product['product_id']}/ingredients")
    assert r.status_code == 200
    assert [i["name"] for i in r.json()] == ["Dough", "Mozzarella"]


def test_create_rejects_missing_fields(database):
    """Each malformed payload answers 400 naming the field and writes nothing"""
    cases = [
        ({"name": ""}, "name"),
        ({"name": None}, "name"),
        ({"quantity": None}, "quantity"),
        ({"price": None}, "price"),
        ({"category": None}, "category"),
    ]
    for overrides, field in cases:
        payload = {**BURGER, **overrides}
        r = client.post("/products/add", json=payload)
        assert r.status_code == 400, (overrides, r.text)
        body = r.json()
        assert body["success"] is False
        assert body["error"]["code"] == "SERVICE_VALIDATION_ERROR"
        assert body["error"]["details"]["field"] == field

    assert client.get("/products").json() == []


def test_create_rejects_bad_ingredient(database):
    payload = copy.deepcopy(PIZZA)
    payload["ingredients"][1]["quantity"] = None

    r = client.post("/products/add", json=payload)

    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Ingredient quantity cannot be null"
    assert r.json()["error"]["details"]["field"] == "ingredients[1].quantity"
    assert client.get("/products").json() == []
    assert client.get("/ingredients").json() == []


def test_create_rejects_nan_price(database):
    r = client.post(
        "/products/add",
        content='{"name": "Burger", "quantity": 1, "price": NaN, "category": "FOOD"}',
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json()["error"]["details"]["field"] == "price"


def test_create_without_body(database):
    r = client.post("/products/add")
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "Product cannot be null"


def test_create_unknown_category(database):
    """Type errors are schema errors, not service errors"""
    r = client.post("/products/add", json={**BURGER, "category": "FURNITURE"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_product_price(database):
    """Scenario: updating only the price keeps the name"""
    reference = _create({**PIZZA, "price": 5.0})
    product = _product_by_reference(reference)

    r = client.put(f"/products/update/{product['product_id']}", json={"price": 6.5})

    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Pizza"
    assert body["price"] == 6.5
    assert body["quantity"] == product["quantity"]
    assert body["category"] == product["category"]
    assert body["product_reference"] == reference


def test_update_product_null_fields_ignored(database):
    reference = _create(PIZZA)
    product = _product_by_reference(reference)

    r = client.put(
        f"/products/update/{product['product_id']}",
        json={"name": None, "quantity": 7, "product_reference": None},
    )

    assert r.status_code == 200
    assert r.json()["name"] == "Pizza"
    assert r.json()["quantity"] == 7
    assert r.json()["product_reference"] == reference


def test_update_product_reference_conflict(database):
    burger_ref = _create(BURGER)
    pizza_ref = _create(PIZZA)
    pizza = _product_by_reference(pizza_ref)

    r = client.put(
        f"/products/update/{pizza['product_id']}", json={"product_reference": burger_ref}
    )

    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"


def test_unknown_ids_answer_404(database):
    r = client.put("/products/update/7", json={"price": 6.5})
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"

    assert client.delete("/products/remove/7").status_code == 404
    assert client.get("/products/7").status_code == 404
    assert client.get("/products/7/ingredients").status_code == 404
    assert client.put("/ingredients/update/7", json={"name": "Salt"}).status_code == 404


def test_update_ingredient(database):
    reference = _create(PIZZA)
    dough = client.get("/ingredients/search", params={"name": "Dough"}).json()[0]

    r = client.put(f"/ingredients/update/{dough['ingredient_id']}", json={"price": 1.4})

    assert r.status_code == 200
    assert r.json()["price"] == 1.4
    assert r.json()["name"] == "Dough"
    assert r.json()["product_reference"] == reference


def test_update_ingredient_unknown_reference(database):
    _create(PIZZA)
    dough = client.get("/ingredients/search", params={"name": "Dough"}).json()[0]

    r = client.put(
        f"/ingredients/update/{dough['ingredient_id']}",
        json={"product_reference": "REF-NONE"},
    )

    assert r.status_code == 400


def test_search_products(database):
    _create(BURGER)
    _create(PIZZA)
    _create({**PIZZA, "quantity": 9})

    r = client.get("/products/search", params={"name": "Pizza"})
    assert len(r.json()) == 2

    r = client.put("/products/search", params={"name": "Pizza", "quantity": 9})
    assert [p["quantity"] for p in r.json()] == [9]

    r = client.get("/products/search", params={"category": "DRINK"})
    assert r.json() == []

    r = client.get("/products/search")
    assert len(r.json()) == 3


def test_search_ingredients(database):
    burger_ref = _create(BURGER)
    _create(PIZZA)

    r = client.put("/ingredients/search", params={"product_reference": burger_ref})
    assert [i["name"] for i in r.json()] == ["Bun"]

    r = client.get("/ingredients/search", params={"price": 1.5})
    assert [i["name"] for i in r.json()] == ["Mozzarella"]
