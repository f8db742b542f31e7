from __future__ import annotations


def test_read_user(auth_client):
    response = auth_client.get("/user/1")
    assert response.status_code == 200
    assert response.json()["email"] == "alice@example.com"


def test_read_user_not_found(auth_client):
    response = auth_client.get("/user/999")
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_read_user_invalid_id(auth_client):
    response = auth_client.get("/user/abc")
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid user id"}


def test_list_users(auth_client, make_user):
    make_user()
    response = auth_client.get("/users")
    assert response.status_code == 200
    assert [user["name"] for user in response.json()] == ["Alice", "Bob"]


def test_ids_are_unique(auth_client, make_user):
    bob = make_user()
    carol = make_user(name="Carol", email="carol@example.com")
    assert len({1, bob["id"], carol["id"]}) == 3


def test_set_default_currency(auth_client, make_currency):
    eur = make_currency(code="eur", name="Euro")
    response = auth_client.patch("/user/1/currency", json={"currencyId": eur["id"]})
    assert response.status_code == 200
    payload = response.json()
    assert payload["defaultCurrencyId"] == eur["id"]
    assert payload["defaultCurrency"] == {"id": eur["id"], "code": "EUR", "name": "Euro"}

    assert auth_client.get("/user/1").json()["defaultCurrency"]["code"] == "EUR"


def test_set_default_currency_unknown_currency(auth_client):
    response = auth_client.patch("/user/1/currency", json={"currencyId": 42})
    assert response.status_code == 400
    assert response.json() == {"message": "Currency does not exist"}


def test_set_default_currency_unknown_user(auth_client, make_currency):
    usd = make_currency()
    response = auth_client.patch("/user/77/currency", json={"currencyId": usd["id"]})
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_set_default_currency_validates_body(auth_client):
    missing = auth_client.patch("/user/1/currency", json={})
    assert missing.status_code == 400
    assert missing.json() == {"message": "Field 'currencyId' is required"}

    wrong_type = auth_client.patch("/user/1/currency", json={"currencyId": "usd"})
    assert wrong_type.status_code == 400
    assert wrong_type.json() == {"message": "Field 'currencyId' must be an integer"}


def test_delete_user_removes_their_records(auth_client, make_user, make_category, make_currency, make_record):
    bob = make_user()
    food = make_category()
    usd = make_currency()
    make_record(userId=bob["id"], categoryId=food["id"], currencyId=usd["id"], amount=10)
    make_record(userId=bob["id"], categoryId=food["id"], currencyId=usd["id"], amount=20)
    kept = make_record(userId=1, categoryId=food["id"], currencyId=usd["id"], amount=30)

    response = auth_client.delete(f"/user/{bob['id']}")
    assert response.status_code == 204
    assert response.content == b""

    assert auth_client.get(f"/user/{bob['id']}").status_code == 404
    assert auth_client.get("/record", params={"user_id": bob["id"]}).json() == []
    remaining = auth_client.get("/record", params={"category_id": food["id"]}).json()
    assert [record["id"] for record in remaining] == [kept["id"]]


def test_delete_user_not_found(auth_client):
    response = auth_client.delete("/user/999")
    assert response.status_code == 404
