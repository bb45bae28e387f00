from fastapi.testclient import TestClient

from conftest import PASSWORD


def test_get_users(client: TestClient, login):
    login("staff")
    response = client.get("/v1/users")
    assert response.status_code == 200
    assert [user["username"] for user in response.json()] == ["Test1", "staff", "admin", "owner"]


def test_get_user_by_slug(client: TestClient, login):
    login("staff")
    slug = client.get("/v1/users/1").json()["slug"]

    response = client.get(f"/v1/users/{slug}")
    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert [department["name"] for department in response.json()["departments"]] == ["Терапия"]


def test_get_user_bad_param(client: TestClient, login):
    login("staff")
    response = client.get("/v1/users/Bad Slug")
    assert response.status_code == 400
    assert response.json() == {"message": "failed to fetch data"}

    response = client.get("/v1/users/999")
    assert response.status_code == 400
    assert response.json() == {"message": "record not found"}


def test_create_user_requires_owner(client: TestClient, login):
    login("admin")
    response = client.post("/v1/users", json={"username": "newbie", "password": PASSWORD, "roleId": 1})
    assert response.status_code == 403


def test_create_and_update_user(client: TestClient, login):
    login("owner")
    response = client.post("/v1/users", json={"username": "newbie", "password": PASSWORD, "roleId": 1})
    assert response.status_code == 200
    user = response.json()
    assert user["active"] is True
    assert user["slug"] == str(user["id"])

    response = client.put(f"/v1/users/{user['id']}", json={
        "email": "newbie@example.com",
        "phone": "+79995554433",
        "name": "Анна",
        "roleId": 2,
        "active": True,
        "departments": [1, 2, 42],
        "services": [5],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["roleId"] == 2
    assert sorted(department["id"] for department in data["departments"]) == [1, 2]
    assert [service["id"] for service in data["services"]] == [5]


def test_create_duplicate_user(client: TestClient, login):
    login("owner")
    response = client.post("/v1/users", json={"username": "staff", "password": PASSWORD, "roleId": 1})
    assert response.status_code == 400
    assert response.json() == {"message": "failed to save data"}


def test_create_user_weak_password(client: TestClient, login):
    login("owner")
    response = client.post("/v1/users", json={"username": "newbie", "password": "password", "roleId": 1})
    assert response.status_code == 400
    assert "password" in response.json()["message"]


def test_delete_user_requires_superuser(client: TestClient, login):
    login("owner")
    assert client.delete("/v1/users/2").status_code == 403


def test_delete_user(client: TestClient, login):
    login("Test1")
    response = client.delete("/v1/users/2")
    assert response.status_code == 200
    assert response.json()["username"] == "staff"
    assert client.get("/v1/users/2").json() == {"message": "record not found"}
