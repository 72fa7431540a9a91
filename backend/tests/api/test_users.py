"""
Tests for account endpoints.

Exercises register, login and the password-reset flow through the
HTTP layer with the real auth service on an in-memory repository.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service

REGISTER = {"phone": "9876543210", "email": "a@x.com", "password": "pw", "repassword": "pw"}


@pytest.fixture
def client(auth_service):
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered(client):
    assert client.post("/api/users/register", json=REGISTER).status_code == 200


class TestRegister:
    def test_success(self, client):
        response = client.post("/api/users/register", json=REGISTER)
        assert response.status_code == 200
        assert response.json() == {"success": True}

    @pytest.mark.parametrize(
        "changes,detail",
        [
            ({"repassword": "other"}, "Passwords do not match"),
            ({"phone": "12345"}, "Invalid phone number"),
            ({"phone": "98765abcde"}, "Invalid phone number"),
        ],
    )
    def test_rejected(self, client, changes, detail):
        response = client.post("/api/users/register", json={**REGISTER, **changes})
        assert response.status_code == 400
        assert response.json()["detail"] == detail

    def test_duplicate_phone(self, client, registered):
        response = client.post("/api/users/register", json={**REGISTER, "email": "b@x.com"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Phone already registered"
        assert response.json()["code"] == "DUPLICATE_IDENTITY"

    def test_password_over_72_bytes(self, client):
        long_password = "p" * 80
        response = client.post(
            "/api/users/register",
            json={**REGISTER, "password": long_password, "repassword": long_password},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "PASSWORD_TOO_LONG"

    def test_password_of_72_bytes(self, client):
        password = "p" * 72
        response = client.post(
            "/api/users/register",
            json={**REGISTER, "password": password, "repassword": password},
        )
        assert response.status_code == 200
        login = client.post("/api/users/login", json={"identifier": "9876543210", "password": password})
        assert login.status_code == 200

    def test_duplicate_email(self, client, registered):
        response = client.post("/api/users/register", json={**REGISTER, "phone": "9123456780"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    def test_missing_field(self, client):
        body = {k: v for k, v in REGISTER.items() if k != "repassword"}
        response = client.post("/api/users/register", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Validation Error"


class TestLogin:
    @pytest.mark.parametrize("identifier", ["9876543210", "a@x.com", "A@X.com"])
    def test_by_phone_or_email(self, client, registered, identifier):
        response = client.post("/api/users/login", json={"identifier": identifier, "password": "pw"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["token"]
        assert body["token_type"] == "bearer"

    @pytest.mark.parametrize(
        "identifier,password",
        [("9876543210", "wrong"), ("9000000000", "pw")],
    )
    def test_bad_credentials_are_indistinguishable(self, client, registered, identifier, password):
        response = client.post("/api/users/login", json={"identifier": identifier, "password": password})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid credentials"


class TestPasswordReset:
    def test_full_flow(self, client, registered, otp_sender):
        response = client.post("/api/users/request-otp", json={"phone": "9876543210"})
        assert response.status_code == 200
        assert response.json() == {"success": True}
        code = otp_sender.last_code
        assert code not in response.text

        verify = client.post("/api/users/verify-otp", json={"phone": "9876543210", "otp": code})
        assert verify.status_code == 200

        reset = client.post(
            "/api/users/reset-password",
            json={"phone": "9876543210", "otp": code, "newpassword": "new-pw"},
        )
        assert reset.status_code == 200

        again = client.post(
            "/api/users/reset-password",
            json={"phone": "9876543210", "otp": code, "newpassword": "other"},
        )
        assert again.status_code == 400

        old = client.post("/api/users/login", json={"identifier": "9876543210", "password": "pw"})
        new = client.post("/api/users/login", json={"identifier": "9876543210", "password": "new-pw"})
        assert old.status_code == 400
        assert new.status_code == 200

    def test_request_otp_unknown_phone(self, client):
        response = client.post("/api/users/request-otp", json={"phone": "9000000000"})
        assert response.status_code == 400
        assert response.json()["detail"] == "User not found"

    def test_verify_without_request(self, client, registered):
        response = client.post("/api/users/verify-otp", json={"phone": "9876543210", "otp": "123456"})
        assert response.status_code == 400

    def test_wrong_code(self, client, registered, otp_sender):
        client.post("/api/users/request-otp", json={"phone": "9876543210"})
        wrong = "100000" if otp_sender.last_code != "100000" else "100001"

        response = client.post("/api/users/verify-otp", json={"phone": "9876543210", "otp": wrong})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid OTP"

    def test_expired_code(self, client, registered, otp_sender, clock):
        client.post("/api/users/request-otp", json={"phone": "9876543210"})
        clock.advance(minutes=10)

        response = client.post(
            "/api/users/reset-password",
            json={"phone": "9876543210", "otp": otp_sender.last_code, "newpassword": "x"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "OTP expired"

    def test_missing_otp_field(self, client, registered):
        response = client.post("/api/users/verify-otp", json={"phone": "9876543210"})
        assert response.status_code == 400

    def test_failed_reset_keeps_code_usable(self, client, registered, otp_sender):
        client.post("/api/users/request-otp", json={"phone": "9876543210"})
        code = otp_sender.last_code

        rejected = client.post(
            "/api/users/reset-password",
            json={"phone": "9876543210", "otp": code, "newpassword": "p" * 80},
        )
        assert rejected.status_code == 400
        assert rejected.json()["code"] == "PASSWORD_TOO_LONG"

        retried = client.post(
            "/api/users/reset-password",
            json={"phone": "9876543210", "otp": code, "newpassword": "new-pw"},
        )
        assert retried.status_code == 200
