"""HTTP tests for accounts, login and messaging."""

import pytest

from marketplace.core.security import create_access_token
from marketplace.interfaces.http.deps import get_account_service, get_message_service
from marketplace.modules.accounts import AccountService
from marketplace.modules.messages import MessageService

from tests.unit.test_accounts import InMemoryAccountRepository
from tests.unit.test_messages import InMemoryMessageRepository


@pytest.fixture
def client(make_api_client):
    client = make_api_client()
    service = AccountService(InMemoryAccountRepository())
    client.app.dependency_overrides[get_account_service] = lambda: service
    return client


SIGNUP = {
    "email": "buyer@example.com",
    "full_names": "Buyer One",
    "phone_no": "+250788000000",
    "location": "Kigali",
    "password": "secret123",
}


def test_signup_then_login_then_me(client):
    created = client.post("/AguraMarket/users/signup", json=SIGNUP)
    assert created.status_code == 201
    assert "password_hash" not in created.json()

    login = client.post("/AguraMarket/users/login", json={"email": SIGNUP["email"], "password": "secret123"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    me = client.get("/AguraMarket/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "buyer@example.com"


def test_duplicate_signup_is_400(client):
    client.post("/AguraMarket/users/signup", json=SIGNUP)

    response = client.post("/AguraMarket/users/signup", json=SIGNUP)

    assert response.status_code == 400


def test_wrong_password_is_403(client):
    client.post("/AguraMarket/users/signup", json=SIGNUP)

    response = client.post("/AguraMarket/users/login", json={"email": SIGNUP["email"], "password": "nope"})

    assert response.status_code == 403
    assert response.json() == {"status": "Wrong email or password"}


def test_listing_users_requires_admin(client, user_headers, admin_headers):
    assert client.get("/AguraMarket/users", headers=user_headers).status_code == 403
    assert client.get("/AguraMarket/users", headers=admin_headers).status_code == 200


# =============================================================================
# LOOKUP AND DELETION
# =============================================================================


def _signup_and_headers(client, email="buyer@example.com"):
    created = client.post("/AguraMarket/users/signup", json={**SIGNUP, "email": email}).json()
    token = create_access_token(created["id"], "user")
    return created["id"], {"Authorization": f"Bearer {token}"}


def test_get_user_by_id_requires_token(client, user_headers):
    account_id, _ = _signup_and_headers(client)

    assert client.get(f"/AguraMarket/users/getuser/{account_id}").status_code == 401

    response = client.get(f"/AguraMarket/users/getuser/{account_id}", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "buyer@example.com"


def test_get_missing_user_is_404(client, user_headers):
    response = client.get("/AguraMarket/users/getuser/missing", headers=user_headers)

    assert response.status_code == 404
    assert response.json() == {"status": "User not found"}


def test_user_can_delete_own_account_only(client):
    own_id, own_headers = _signup_and_headers(client)
    other_id, _ = _signup_and_headers(client, "seller@example.com")

    forbidden = client.delete(f"/AguraMarket/users/userdelete/{other_id}", headers=own_headers)
    assert forbidden.status_code == 403

    deleted = client.delete(f"/AguraMarket/users/userdelete/{own_id}", headers=own_headers)
    assert deleted.status_code == 200
    assert deleted.json()["id"] == own_id


def test_admin_can_delete_any_account(client, admin_headers):
    account_id, _ = _signup_and_headers(client)

    assert client.delete(f"/AguraMarket/users/userdelete/{account_id}", headers=admin_headers).status_code == 200
    assert client.delete(f"/AguraMarket/users/userdelete/{account_id}", headers=admin_headers).status_code == 404


# =============================================================================
# MESSAGES
# =============================================================================


@pytest.fixture
def message_client(client):
    service = MessageService(InMemoryMessageRepository())
    client.app.dependency_overrides[get_message_service] = lambda: service
    return client


def test_get_messages_when_empty_is_404(message_client):
    response = message_client.get("/AguraMarket/users/getMessages")

    assert response.status_code == 404
    assert response.json() == {"status": "There's no any message registered"}


def test_send_message_then_list(message_client):
    sent = message_client.post(
        "/AguraMarket/users/sendMessage",
        json={"message": "Is it still available?", "product_id": "P1"},
    )

    assert sent.status_code == 201
    body = sent.json()
    assert body["status"] == "A new message sent successfully"
    assert body["message"]["status"] == "not replied"
    assert body["message"]["product_id"] == "P1"

    listed = message_client.get("/AguraMarket/users/getMessages")
    assert listed.status_code == 200
    assert [m["message"] for m in listed.json()] == ["Is it still available?"]


def test_empty_message_is_422(message_client):
    response = message_client.post("/AguraMarket/users/sendMessage", json={"message": "", "product_id": "P1"})

    assert response.status_code == 422
    assert response.json()["status"].startswith("message")
