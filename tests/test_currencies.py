from __future__ import annotations


def test_create_currency_normalizes_code(auth_client):
    response = auth_client.post("/currency", json={"code": " usd ", "name": "US Dollar"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "code": "USD", "name": "US Dollar"}
    assert auth_client.get("/currency").json() == [{"id": 1, "code": "USD", "name": "US Dollar"}]


def test_create_currency_rejects_duplicate_code(auth_client, make_currency):
    make_currency(code="USD")
    response = auth_client.post("/currency", json={"code": "usd", "name": "Dollar again"})
    assert response.status_code == 400
    assert response.json() == {"message": "Currency with this code already exists"}
    assert len(auth_client.get("/currency").json()) == 1


def test_create_currency_requires_code_and_name(auth_client):
    response = auth_client.post("/currency", json={"name": "Euro"})
    assert response.status_code == 400
    assert response.json() == {"message": "Field 'code' is required"}

    response = auth_client.post("/currency", json={"code": "EUR"})
    assert response.status_code == 400
    assert response.json() == {"message": "Field 'name' is required"}


def test_delete_unused_currency(auth_client, make_currency):
    usd = make_currency()
    response = auth_client.delete(f"/currency/{usd['id']}")
    assert response.status_code == 204
    assert auth_client.get("/currency").json() == []


def test_delete_currency_in_use_is_refused(auth_client, make_currency, make_category, make_record):
    usd = make_currency()
    food = make_category()
    record = make_record(userId=1, categoryId=food["id"], currencyId=usd["id"], amount=50)

    response = auth_client.delete(f"/currency/{usd['id']}")
    assert response.status_code == 400
    assert response.json() == {"message": "Cannot delete currency: there are records using this currency"}

    assert auth_client.get("/currency").json() == [usd]
    assert auth_client.get(f"/record/{record['id']}").status_code == 200


def test_delete_default_currency_clears_it_on_users(auth_client, make_currency):
    usd = make_currency()
    auth_client.patch("/user/1/currency", json={"currencyId": usd["id"]})

    assert auth_client.delete(f"/currency/{usd['id']}").status_code == 204
    user = auth_client.get("/user/1").json()
    assert user["defaultCurrencyId"] is None
    assert user["defaultCurrency"] is None


def test_delete_currency_not_found_and_invalid(auth_client):
    missing = auth_client.delete("/currency/3")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Currency not found"}

    invalid = auth_client.delete("/currency/usd")
    assert invalid.status_code == 400
    assert invalid.json() == {"message": "Invalid currency id"}
