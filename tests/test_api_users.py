"""Tests for the users endpoints, using FastAPI's in-process test client."""

USERS = "/api/v1/users"
PENDING = "/api/v1/verifications/pending"


def register(api, name="user1", password="password1"):
    return api.post(f"{USERS}/", json={"name": name, "password": password})


def test_register_user(api):
    resp = register(api)
    assert resp.status_code == 201
    assert resp.json() == {"name": "user1", "verified": False}
    assert api.get(PENDING).json() == ["user1"]


def test_register_duplicate_conflicts(api):
    register(api)
    resp = register(api, password="other")
    assert resp.status_code == 409
    assert resp.json()["detail"] == "User user1 already in the database"


def test_register_validates_payload(api):
    assert api.post(f"{USERS}/", json={"name": "user1"}).status_code == 422
    assert register(api, name="").status_code == 422


def test_get_user_hides_password(api):
    register(api)
    resp = api.get(f"{USERS}/user1")
    assert resp.status_code == 200
    assert "password" not in resp.json()
    assert api.get(f"{USERS}/user3").status_code == 404


def test_verify_user_once(api):
    register(api)
    resp = api.post(f"{USERS}/user1/verify")
    assert resp.status_code == 200
    assert resp.json()["verified"] is True
    assert api.post(f"{USERS}/user1/verify").status_code == 409
    assert api.post(f"{USERS}/user3/verify").status_code == 404


def test_change_password(api):
    register(api)
    api.post(f"{USERS}/user1/verify")
    body = {"old_password": "password1", "new_password": "password1b"}
    assert api.put(f"{USERS}/user1/password", json=body).status_code == 200

    # the old password no longer matches
    resp = api.put(f"{USERS}/user1/password", json=body)
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Wrong password for user user1"


def test_change_password_requires_verified_user(api):
    register(api)
    body = {"old_password": "password1", "new_password": "x"}
    assert api.put(f"{USERS}/user1/password", json=body).status_code == 403
    assert api.put(f"{USERS}/user3/password", json=body).status_code == 404


def test_delete_user(api):
    register(api)
    assert api.delete(f"{USERS}/user1").status_code == 403
    api.post(f"{USERS}/user1/verify")
    assert api.delete(f"{USERS}/user1").status_code == 204
    assert api.get(f"{USERS}/user1").status_code == 404
    assert api.delete(f"{USERS}/user1").status_code == 404


def test_apps_do_not_share_state(api):
    from fastapi.testclient import TestClient
    from user_verification_api.app.main import create_app

    register(api)
    with TestClient(create_app()) as other:
        assert other.get(f"{USERS}/user1").status_code == 404
        assert other.get(PENDING).json() == []


def test_user_named_pending_can_be_looked_up(api):
    assert register(api, name="pending").status_code == 201
    resp = api.get(f"{USERS}/pending")
    assert resp.status_code == 200
    assert resp.json() == {"name": "pending", "verified": False}
    assert api.get(PENDING).json() == ["pending"]


def test_pending_lists_users_in_registration_order(api):
    register(api, name="user2")
    register(api, name="user1")
    assert api.get(PENDING).json() == ["user2", "user1"]
