"""
Tests for primary share purchases (POST /invest/buy).
"""

import pytest
from sqlalchemy import func

from brickly.extensions import db
from brickly.Models.Holdings import Holding
from brickly.Models.KycModel import KycStatus
from brickly.Models.ShareClassModel import ShareClass
from brickly.Models.UserModel import UserRole
from conftest import error_code


def _ledger(app, share_class_id):
    with app.app_context():
        share_class = db.session.get(ShareClass, share_class_id)
        held = (
            db.session.query(func.coalesce(func.sum(Holding.shares_owned), 0))
            .filter(Holding.share_class_id == share_class_id)
            .scalar()
        )
        return share_class.total_shares, share_class.shares_available, held


class TestPrimaryPurchase:

    def test_buy_moves_shares_from_pool_to_holding(self, app, client, investor, create_listing, buy_primary):
        """Buying 500 of 10000 leaves 9500 in the pool and a 500 share holding."""
        created = create_listing(total_shares=10000)
        property_id = created["property"]["id"]

        resp = buy_primary(investor, property_id, 500)

        assert resp.status_code == 201
        body = resp.get_json()
        assert body["userId"] == investor.id
        assert body["shareClassId"] == created["shareClass"]["id"]
        assert body["sharesOwned"] == 500

        detail = client.get(f"/properties/{property_id}").get_json()
        assert detail["shareClass"]["sharesAvailable"] == 9500

    def test_repeat_purchases_accumulate_in_one_holding(self, app, investor, create_listing, buy_primary):
        created = create_listing(total_shares=1000)
        property_id = created["property"]["id"]

        buy_primary(investor, property_id, 100)
        resp = buy_primary(investor, property_id, 250)

        assert resp.get_json()["sharesOwned"] == 350
        with app.app_context():
            assert db.session.query(Holding).filter_by(user_id=investor.id).count() == 1

    def test_cannot_buy_more_than_available(self, app, investor, create_listing, buy_primary):
        created = create_listing(total_shares=100)
        property_id = created["property"]["id"]

        resp = buy_primary(investor, property_id, 101)

        assert resp.status_code == 400
        assert error_code(resp) == "INSUFFICIENT_SHARES"
        assert _ledger(app, created["shareClass"]["id"]) == (100, 100, 0)

    def test_pool_never_goes_negative_across_buyers(self, app, make_user, create_listing, buy_primary):
        """Sequential buyers racing for the last shares: only what fits is sold."""
        created = create_listing(total_shares=1000)
        property_id = created["property"]["id"]
        buyers = [make_user(UserRole.INVESTOR) for _ in range(4)]

        statuses = [buy_primary(buyer, property_id, 300).status_code for buyer in buyers]

        assert statuses.count(201) == 3
        assert statuses.count(400) == 1
        total, available, held = _ledger(app, created["shareClass"]["id"])
        assert available == 100
        assert total == available + held

    def test_buying_the_whole_pool(self, app, investor, create_listing, buy_primary):
        created = create_listing(total_shares=250)

        resp = buy_primary(investor, created["property"]["id"], 250)

        assert resp.status_code == 201
        assert _ledger(app, created["shareClass"]["id"]) == (250, 0, 250)

    def test_unknown_property(self, investor, buy_primary):
        resp = buy_primary(investor, "6f1c1a52-3d4e-4c43-9b7e-0d2a9e0c1f11", 10)

        assert resp.status_code == 404
        assert error_code(resp) == "NOT_FOUND"


class TestPrimaryPurchaseValidation:

    def test_zero_shares_rejected(self, investor, create_listing, buy_primary):
        created = create_listing()
        resp = buy_primary(investor, created["property"]["id"], 0)
        assert resp.status_code == 400
        assert error_code(resp) == "VALIDATION_ERROR"

    @pytest.mark.parametrize("shares", [True, "7", 2.5, -3])
    def test_share_count_must_be_a_positive_integer(self, app, client, investor, create_listing, shares):
        created = create_listing()

        resp = client.post(
            "/invest/buy",
            json={"propertyId": created["property"]["id"], "sharesToBuy": shares},
            headers=investor.headers,
        )

        assert resp.status_code == 400
        assert error_code(resp) == "VALIDATION_ERROR"
        assert _ledger(app, created["shareClass"]["id"]) == (10000, 10000, 0)

    def test_property_id_must_be_uuid(self, investor, buy_primary):
        resp = buy_primary(investor, "not-a-uuid", 10)
        assert resp.status_code == 400
        assert error_code(resp) == "VALIDATION_ERROR"

    def test_requires_token(self, client):
        resp = client.post("/invest/buy", json={"propertyId": "x", "sharesToBuy": 1})
        assert resp.status_code == 401
        assert error_code(resp) == "UNAUTHORIZED"

    def test_garbage_token(self, client):
        resp = client.post(
            "/invest/buy",
            json={"propertyId": "x", "sharesToBuy": 1},
            headers={"Authorization": "Bearer not.a.jwt"},
        )
        assert resp.status_code == 401
        assert error_code(resp) == "INVALID_TOKEN"

    def test_tenant_role_forbidden(self, make_user, create_listing, buy_primary):
        tenant = make_user(UserRole.TENANT)
        created = create_listing()
        resp = buy_primary(tenant, created["property"]["id"], 10)
        assert resp.status_code == 403
        assert error_code(resp) == "FORBIDDEN"

    def test_pending_kyc_blocked(self, make_user, create_listing, buy_primary):
        pending = make_user(UserRole.INVESTOR, kyc=KycStatus.PENDING)
        created = create_listing()
        resp = buy_primary(pending, created["property"]["id"], 10)
        assert resp.status_code == 403
        assert error_code(resp) == "KYC_NOT_APPROVED"
