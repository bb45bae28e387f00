from fastapi.testclient import TestClient

from conftest import PASSWORD, SUPERUSER


def test_login_valid_credentials(client: TestClient):
    """Тест входа с валидными данными"""
    response = client.post("/v1/login", json={"login": SUPERUSER, "password": PASSWORD})
    assert response.status_code == 200

    data = response.json()
    assert data["username"] == SUPERUSER
    assert data["role"]["name"] == "Superuser"
    assert "password" not in data
    assert "Authorization" in response.cookies


def test_login_by_email_and_phone(client: TestClient, login):
    assert login("test1@example.com")["id"] == 1
    client.post("/v1/logout")
    assert login("+71111111111")["id"] == 1


def test_login_invalid_credentials(client: TestClient):
    """Тест входа с невалидными данными"""
    response = client.post("/v1/login", json={"login": SUPERUSER, "password": "Wrong1pass!"})
    assert response.status_code == 401
    assert response.json() == {"message": "hashedPassword is not the hash of the given password"}

    response = client.post("/v1/login", json={"login": "nobody", "password": PASSWORD})
    assert response.status_code == 401
    assert response.json() == {"message": "record not found"}


def test_login_invalid_body(client: TestClient):
    response = client.post("/v1/login", json={"login": "bad login", "password": PASSWORD})
    assert response.status_code == 400
    assert "login" in response.json()["message"]


def test_login_when_already_logged_in(client: TestClient, login):
    """Повторный вход возвращает текущего сотрудника без проверки пароля"""
    login("staff")
    response = client.post("/v1/login", json={"login": SUPERUSER, "password": "Wrong1pass!"})
    assert response.status_code == 200
    assert response.json()["username"] == "staff"


def test_logout(client: TestClient, login):
    login("staff")
    assert client.get("/v1/profile").status_code == 200

    response = client.post("/v1/logout")
    assert response.status_code == 200
    assert client.get("/v1/profile").status_code == 401


def test_logout_requires_session(client: TestClient):
    assert client.post("/v1/logout").status_code == 401


def test_profile(client: TestClient, login):
    login("staff")
    response = client.get("/v1/profile")
    assert response.status_code == 200
    assert response.json()["username"] == "staff"


def test_update_profile_ignores_owner_fields(client: TestClient, login):
    login("staff")
    response = client.put("/v1/profile", json={
        "email": "staff@example.com",
        "phone": "+79990001122",
        "surname": "Петров",
        "name": "Иван",
        "patronymic": "Сергеевич",
        "profession": "Главврач",
        "roleId": 4,
        "active": False,
        "departments": [1],
    })
    assert response.status_code == 200

    data = response.json()
    assert data["surname"] == "Петров"
    assert data["slug"] == "petrov-ivan-sergeevich"
    assert data["profession"] == ""
    assert data["roleId"] == 1
    assert data["active"] is True
    assert data["departments"] == []


def test_update_password(client: TestClient, login):
    login("staff")
    response = client.put("/v1/profile/password", json={
        "oldPassword": PASSWORD,
        "newPassword": "Password2!",
        "confirmPassword": "Password2!",
    })
    assert response.status_code == 200
    assert response.json()["username"] == "staff"

    client.post("/v1/logout")
    response = client.post("/v1/login", json={"login": "staff", "password": PASSWORD})
    assert response.status_code == 401
    login("staff", "Password2!")


def test_update_password_wrong_old(client: TestClient, login):
    login("staff")
    response = client.put("/v1/profile/password", json={
        "oldPassword": "Wrong1pass!",
        "newPassword": "Password2!",
        "confirmPassword": "Password2!",
    })
    assert response.status_code == 400
    assert response.json() == {"message": "hashedPassword is not the hash of the given password"}


def test_update_password_mismatch(client: TestClient, login):
    login("staff")
    response = client.put("/v1/profile/password", json={
        "oldPassword": PASSWORD,
        "newPassword": "Password2!",
        "confirmPassword": "Password3!",
    })
    assert response.status_code == 400
    assert "confirmPassword" in response.json()["message"]


def test_deleted_user_session_is_anonymous(client: TestClient, login, session):
    from repositories import UserRepository

    login("staff")
    UserRepository(session).delete(2)
    assert client.get("/v1/profile").status_code == 401
