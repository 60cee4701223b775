from types import SimpleNamespace
from uuid import uuid4

import pytest

from brickly.extensions import db
from brickly.Init.main import create_app
from brickly.Models.KycModel import KycProfile, KycStatus
from brickly.Models.UserModel import User, UserRole
from brickly.Utils.auth import issue_token

PASSWORD = "correct-horse-battery"


# =============================================================================
# Application
# =============================================================================


@pytest.fixture
def app():
    """Fresh app on an in-memory SQLite database per test."""
    app = create_app("TestingConfig")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


# =============================================================================
# Users
# =============================================================================


@pytest.fixture
def make_user(app):
    """
    Create a verified user directly in the database.
    kyc=None leaves the user without a KYC profile.
    """

    def _make(role=UserRole.INVESTOR, kyc=KycStatus.APPROVED, email=None, verified=True):
        with app.app_context():
            user = User(
                email=email or f"{role.value.lower()}-{uuid4().hex[:8]}@brickly.io",
                role=role,
                email_verified=verified,
            )
            user.set_password(PASSWORD)
            if kyc is not None:
                user.kyc_profile = KycProfile(status=kyc, data={"source": "test"})
            db.session.add(user)
            db.session.commit()
            token = issue_token(user)
            return SimpleNamespace(
                id=user.id,
                email=user.email,
                token=token,
                headers={"Authorization": f"Bearer {token}"},
            )

    return _make


@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN)


@pytest.fixture
def lister(make_user):
    return make_user(UserRole.LISTER)


@pytest.fixture
def investor(make_user):
    return make_user(UserRole.INVESTOR)


@pytest.fixture
def tenant(make_user):
    return make_user(UserRole.TENANT, kyc=None)


# =============================================================================
# Listings and trading helpers
# =============================================================================


def listing_payload(total_shares=10000, reference_price=185, **property_overrides):
    prop = {
        "type": "HOUSE",
        "address1": "100 Harbor Way",
        "city": "San Diego",
        "state": "CA",
        "zip": "92101",
        "squareFeet": 1800,
        "bedrooms": 3,
        "bathrooms": 2,
        "targetRaise": 1500000,
        "estMonthlyRent": 6500,
    }
    prop.update(property_overrides)
    return {
        "property": prop,
        "listing": {"askingPrice": 1850000, "bonusPercent": 2.5},
        "shareClass": {"totalShares": total_shares, "referencePricePerShare": reference_price},
        "images": [
            "https://images.unsplash.com/photo-1568605114967-8130f3a36994",
            "https://images.unsplash.com/photo-1507089947368-19c1da9775ae",
        ],
    }


@pytest.fixture
def create_listing(client, lister):
    """POST /listings as the lister fixture; returns the created bundle."""

    def _create(total_shares=10000, reference_price=185, **property_overrides):
        resp = client.post(
            "/listings",
            json=listing_payload(total_shares, reference_price, **property_overrides),
            headers=lister.headers,
        )
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()

    return _create


@pytest.fixture
def buy_primary(client):
    def _buy(user, property_id, shares):
        return client.post(
            "/invest/buy",
            json={"propertyId": property_id, "sharesToBuy": shares},
            headers=user.headers,
        )

    return _buy


@pytest.fixture
def place_sell_order(client):
    def _place(user, property_id, shares, price=185):
        return client.post(
            "/market/sell-orders",
            json={"propertyId": property_id, "sharesForSale": shares, "askPricePerShare": price},
            headers=user.headers,
        )

    return _place


@pytest.fixture
def market_buy(client):
    def _buy(user, sell_order_id, shares):
        return client.post(
            "/market/buy",
            json={"sellOrderId": sell_order_id, "sharesToBuy": shares},
            headers=user.headers,
        )

    return _buy


def error_code(resp):
    return resp.get_json()["error"]["code"]
