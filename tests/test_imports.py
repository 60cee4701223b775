"""
Tests for MLS-style listing import, against both lookup backends.
"""

import pytest

from brickly.extensions import db
from brickly.Models.KycModel import KycStatus
from brickly.Models.MLSListingModel import MLSListing
from brickly.Models.UserModel import UserRole
from brickly.Services.ListingSources import (
    DatabaseListingSource,
    MockListingSource,
    get_listing_source,
    seed_mls_listings,
)
from conftest import error_code, listing_payload


@pytest.fixture
def database_source(app):
    """Switch the import endpoints to the mls_listings table and seed it."""
    app.config["MLS_SOURCE"] = "database"
    with app.app_context():
        seed_mls_listings(db.session)
        db.session.commit()


# =============================================================================
# Listing sources
# =============================================================================


class TestMockListingSource:

    def test_search_filters_by_source(self):
        source = MockListingSource()

        public = source.search("PUBLIC")
        partner = source.search("PARTNER")

        assert {l.external_id for l in public} == {"pub-1001", "pub-1002", "pub-1003", "pub-1004"}
        assert {l.external_id for l in partner} == {"partner-2001", "partner-2002", "partner-2003"}

    def test_search_term_is_case_insensitive(self):
        results = MockListingSource().search("PUBLIC", "aUsTiN")

        assert [l.external_id for l in results] == ["pub-1001"]

    def test_search_by_zip(self):
        assert [l.external_id for l in MockListingSource().search("PARTNER", "97205")] == ["partner-2001"]

    def test_limit(self):
        assert len(MockListingSource().search("PUBLIC", limit=2)) == 2

    def test_get_respects_source(self):
        source = MockListingSource()

        assert source.get("pub-1001", "PUBLIC").city == "Austin"
        assert source.get("pub-1001", "PARTNER") is None

    def test_backend_selection(self, app):
        with app.app_context():
            assert isinstance(get_listing_source({"MLS_SOURCE": "mock"}, db.session), MockListingSource)
            assert isinstance(get_listing_source({"MLS_SOURCE": "database"}, db.session), DatabaseListingSource)


class TestDatabaseListingSource:

    def test_seed_is_an_upsert(self, app):
        with app.app_context():
            first = seed_mls_listings(db.session)
            second = seed_mls_listings(db.session)
            db.session.commit()

            assert first == second == 7
            assert db.session.query(MLSListing).count() == 7

    def test_search_matches_mock(self, app, database_source):
        with app.app_context():
            rows = DatabaseListingSource(db.session).search("PUBLIC", "denver")

            assert [l.external_id for l in rows] == ["pub-1002"]
            assert rows[0].list_price == 742500.0


# =============================================================================
# HTTP endpoints
# =============================================================================


class TestImportEndpoints:

    def test_search(self, client):
        resp = client.get("/import/listings?source=PUBLIC&q=austin")

        assert resp.status_code == 200
        summaries = resp.get_json()
        assert len(summaries) == 1
        assert summaries[0]["externalId"] == "pub-1001"
        assert summaries[0]["addressLine"] == "2140 Sunset Ridge Dr"
        assert summaries[0]["listPrice"] == 685000.0

    def test_search_requires_valid_source(self, client):
        resp = client.get("/import/listings?source=MLS")

        assert resp.status_code == 400
        assert error_code(resp) == "VALIDATION_ERROR"

    def test_detail(self, client):
        resp = client.get("/import/listings/pub-1001?source=PUBLIC")

        assert resp.status_code == 200
        detail = resp.get_json()
        assert detail["address"]["line1"] == "2140 Sunset Ridge Dr"
        assert detail["facts"]["yearBuilt"] == 2006
        assert detail["pricing"]["rentEstimate"] == 3400.0
        assert len(detail["images"]) == 2

    def test_detail_bad_source(self, client):
        resp = client.get("/import/listings/pub-1001?source=nope")

        assert resp.status_code == 400
        assert resp.get_json()["error"] == {"code": "VALIDATION_ERROR", "message": "Invalid source"}

    def test_detail_unknown(self, client):
        resp = client.get("/import/listings/pub-9999?source=PUBLIC")

        assert resp.status_code == 404
        assert resp.get_json()["error"]["message"] == "Listing not found"

    def test_endpoints_read_database_backend(self, client, database_source):
        resp = client.get("/import/listings/partner-2002?source=PARTNER")

        assert resp.status_code == 200
        assert resp.get_json()["address"]["line1"]


class TestConfirmImport:

    def _payload(self, **extra):
        payload = listing_payload(address1="2140 Sunset Ridge Dr", city="Austin", state="TX", zip="78701")
        payload.update({"source": "PUBLIC", "externalId": "pub-1001", "attribution": "Public Records"})
        payload.update(extra)
        return payload

    def test_confirm_records_provenance(self, client, lister):
        resp = client.post("/import/confirm", json=self._payload(), headers=lister.headers)

        assert resp.status_code == 201
        prop = resp.get_json()["property"]
        assert prop["sourceType"] == "PUBLIC"
        assert prop["sourceRefId"] == "pub-1001"
        assert prop["sourceAttribution"] == "Public Records"
        assert prop["importedAt"]
        assert resp.get_json()["shareClass"]["sharesAvailable"] == 10000

    def test_confirm_requires_kyc(self, client, make_user):
        user = make_user(UserRole.LISTER, kyc=KycStatus.PENDING)

        resp = client.post("/import/confirm", json=self._payload(), headers=user.headers)

        assert error_code(resp) == "KYC_NOT_APPROVED"

    def test_confirm_rejects_manual_source(self, client, lister):
        resp = client.post("/import/confirm", json=self._payload(source="MANUAL"), headers=lister.headers)

        assert resp.status_code == 400
