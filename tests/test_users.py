# File: tests/test_users.py

"""
CRUD endpoints: GET/PUT/DELETE /user/{id} and GET /users.
"""


def test_get_user(client, registered):
    resp = client.get(f"/user/{registered['id']}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "User data retrieved successfully"
    user = data["user"]
    assert user["id"] == registered["id"]
    assert user["email"] == "ada@bar.com"
    assert user["phoneNumber"] == "+44 20 7946 0000"
    assert user["userSkills"] == ["mathematics", "programming"]
    assert user["pricePerHour"] == 120.5


def test_user_json_hides_credentials(client, registered):
    user = client.get(f"/user/{registered['id']}").json()["user"]
    assert "password" not in user
    assert "passwordHash" not in user
    assert "authToken" not in user


def test_get_unknown_user(client):
    resp = client.get("/user/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_list_users(client, registered, user_payload):
    client.post("/register", json={**user_payload, "email": "grace@bar.com", "name": "Grace"})
    resp = client.get("/users")
    assert resp.status_code == 200
    users = resp.json()["users"]
    assert {u["email"] for u in users} == {"ada@bar.com", "grace@bar.com"}


def test_list_users_empty(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == {"users": []}


def test_update_only_touches_given_fields(client, registered):
    resp = client.put(f"/user/{registered['id']}", json={"name": "X"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "User updated successfully"
    updated = data["updatedUser"]
    assert updated["name"] == "X"
    assert updated["email"] == "ada@bar.com"
    assert updated["address"] == "12 St James's Square, London"
    assert updated["userSkills"] == ["mathematics", "programming"]
    assert updated["pricePerHour"] == 120.5

    fetched = client.get(f"/user/{registered['id']}").json()["user"]
    assert fetched == updated


def test_update_unknown_user(client):
    resp = client.put("/user/does-not-exist", json={"name": "X"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_update_cannot_change_id(client, registered):
    resp = client.put(f"/user/{registered['id']}", json={"id": "something-else"})
    assert resp.status_code == 422
    assert client.get(f"/user/{registered['id']}").status_code == 200


def test_update_rejects_null_email(client, registered):
    resp = client.put(f"/user/{registered['id']}", json={"email": None})
    assert resp.status_code == 422


def test_update_password_is_hashed(client, registered, user_payload):
    resp = client.put(f"/user/{registered['id']}", json={"password": "new-password"})
    assert resp.status_code == 200

    old = client.post("/login", json={"email": user_payload["email"], "password": user_payload["password"]})
    assert old.status_code == 401
    new = client.post("/login", json={"email": user_payload["email"], "password": "new-password"})
    assert new.status_code == 200


def test_delete_user(client, registered):
    resp = client.delete(f"/user/{registered['id']}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "User deleted successfully"
    assert data["deletedUser"]["id"] == registered["id"]

    assert client.get(f"/user/{registered['id']}").status_code == 404


def test_delete_unknown_user(client):
    resp = client.delete("/user/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_update_to_another_users_email_conflicts(client, registered, user_payload):
    client.post("/register", json={**user_payload, "email": "grace@bar.com", "name": "Grace"})
    users = client.get("/users").json()["users"]
    grace_id = next(u["id"] for u in users if u["email"] == "grace@bar.com")

    resp = client.put(f"/user/{grace_id}", json={"email": "ADA@bar.com"})
    assert resp.status_code == 409
    assert resp.json() == {"message": "Email already registered"}

    assert client.get(f"/user/{grace_id}").json()["user"]["email"] == "grace@bar.com"
    login = client.post("/login", json={"email": "ada@bar.com", "password": user_payload["password"]})
    assert login.status_code == 200


def test_update_to_own_email_is_allowed(client, registered):
    resp = client.put(f"/user/{registered['id']}", json={"email": "ada@bar.com", "name": "Ada"})
    assert resp.status_code == 200
    assert resp.json()["updatedUser"]["name"] == "Ada"
