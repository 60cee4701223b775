"""
Tests for registration, email verification, login and /auth/me.
"""

from datetime import timedelta
from urllib.parse import parse_qs, urlparse

import pytest

from brickly.database import utcnow
from brickly.extensions import db
from brickly.Models.UserModel import User
from brickly.Models.VerificationTokenModel import VerificationToken
from conftest import PASSWORD, error_code


def _register(client, email="new.investor@brickly.io", password="s3cure-password", role="INVESTOR"):
    return client.post("/auth/register", json={"email": email, "password": password, "role": role})


def _token_from(resp):
    verify_url = resp.get_json()["verifyUrl"]
    return parse_qs(urlparse(verify_url).query)["token"][0]


class TestRegister:

    def test_register_without_smtp_returns_verify_link(self, app, client):
        """SMTP is not configured under test, so the bypass hands back the link."""
        resp = _register(client)

        assert resp.status_code == 201
        body = resp.get_json()
        assert body["verifyUrl"].startswith(app.config["WEB_BASE_URL"] + "/verify?token=")

        with app.app_context():
            user = db.session.query(User).filter_by(email="new.investor@brickly.io").one()
            assert user.email_verified is False
            assert user.kyc_profile.status.value == "PENDING"
            assert user.password_hash != "s3cure-password"
            assert len(user.verification_tokens) == 1

    def test_smtp_failure_without_bypass(self, app, client):
        app.config["ALLOW_EMAIL_BYPASS"] = False

        resp = _register(client)

        assert resp.status_code == 500
        assert error_code(resp) == "EMAIL_SEND_FAILED"

    def test_mixed_case_email_is_kept_as_typed(self, app, client):
        """The address is stored as sent, so logging in with the same string works."""
        token = _token_from(_register(client, email="Alice@Brickly.IO"))
        client.get(f"/auth/verify?token={token}")

        with app.app_context():
            assert db.session.query(User).filter_by(email="Alice@Brickly.IO").count() == 1

        resp = client.post("/auth/login", json={"emailOrPhone": "Alice@Brickly.IO", "password": "s3cure-password"})

        assert resp.status_code == 200
        assert resp.get_json()["token"]

    def test_duplicate_email(self, client):
        _register(client)
        resp = _register(client)

        assert resp.status_code == 400
        assert error_code(resp) == "CONFLICT"

    @pytest.mark.parametrize("payload", [
        {"email": "not-an-email", "password": "s3cure-password", "role": "INVESTOR"},
        {"email": "a@brickly.io", "password": "short", "role": "INVESTOR"},
        {"email": "a@brickly.io", "password": "s3cure-password", "role": "ADMIN"},
        {"email": "a@brickly.io", "password": "s3cure-password", "role": "LANDLORD"},
    ])
    def test_invalid_payloads(self, client, payload):
        resp = client.post("/auth/register", json=payload)

        assert resp.status_code == 400
        assert error_code(resp) == "VALIDATION_ERROR"


class TestVerifyAndLogin:

    def test_login_blocked_until_verified(self, client):
        token = _token_from(_register(client))

        resp = client.post("/auth/login", json={"emailOrPhone": "new.investor@brickly.io", "password": "s3cure-password"})
        assert resp.status_code == 403
        assert error_code(resp) == "EMAIL_NOT_VERIFIED"

        resp = client.get(f"/auth/verify?token={token}")
        assert resp.status_code == 200
        assert resp.get_json() == {"ok": True}

        resp = client.post("/auth/login", json={"emailOrPhone": "new.investor@brickly.io", "password": "s3cure-password"})
        assert resp.status_code == 200
        assert resp.get_json()["token"]

    def test_verify_token_is_single_use(self, client):
        token = _token_from(_register(client))

        assert client.get(f"/auth/verify?token={token}").status_code == 200
        resp = client.get(f"/auth/verify?token={token}")

        assert resp.status_code == 400
        assert error_code(resp) == "INVALID_TOKEN"

    def test_expired_verify_token(self, app, client):
        token = _token_from(_register(client))
        with app.app_context():
            record = db.session.query(VerificationToken).filter_by(token=token).one()
            record.expires_at = utcnow() - timedelta(minutes=1)
            db.session.commit()

        resp = client.get(f"/auth/verify?token={token}")

        assert resp.status_code == 400
        assert error_code(resp) == "INVALID_TOKEN"

    def test_verify_requires_token(self, client):
        resp = client.get("/auth/verify")

        assert resp.status_code == 400
        assert error_code(resp) == "VALIDATION_ERROR"

    def test_wrong_password(self, client, investor):
        resp = client.post("/auth/login", json={"emailOrPhone": investor.email, "password": "wrong-password"})

        assert resp.status_code == 401
        assert error_code(resp) == "INVALID_CREDENTIALS"

    def test_unknown_user(self, client):
        resp = client.post("/auth/login", json={"emailOrPhone": "ghost@brickly.io", "password": PASSWORD})

        assert resp.status_code == 401
        assert error_code(resp) == "INVALID_CREDENTIALS"


class TestMe:

    def test_me_returns_profile_and_kyc(self, client, investor):
        resp = client.get("/auth/me", headers=investor.headers)

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["id"] == investor.id
        assert body["email"] == investor.email
        assert body["role"] == "INVESTOR"
        assert body["emailVerified"] is True
        assert body["kycStatus"] == "APPROVED"
        assert "passwordHash" not in body

    def test_login_token_works_for_me(self, client, investor):
        token = client.post("/auth/login", json={"emailOrPhone": investor.email, "password": PASSWORD}).get_json()["token"]

        resp = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert resp.status_code == 200
        assert resp.get_json()["id"] == investor.id

    def test_me_requires_token(self, client):
        resp = client.get("/auth/me")

        assert resp.status_code == 401
        assert error_code(resp) == "UNAUTHORIZED"
