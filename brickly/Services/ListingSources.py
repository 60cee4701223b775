from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy import or_

from brickly.database import to_cents
from brickly.Models.MLSListingModel import MLSListing
from brickly.Models.PropertyModel import SourceType
from brickly.Utils.MockListings import MOCK_LISTINGS


@dataclass
class ExternalListing:
    external_id: str
    source_type: str
    address: str
    city: str
    state: str
    zip: str
    list_price: float
    rent_estimate: Optional[float] = None
    beds: Optional[int] = None
    baths: Optional[float] = None
    sqft: Optional[int] = None
    year_built: Optional[int] = None
    images: List[str] = field(default_factory=list)
    thumb_url: Optional[str] = None
    status: str = "ACTIVE"
    attribution: Optional[str] = None

    @property
    def address_line(self) -> str:
        return self.address

    def detail(self) -> dict:
        return {
            "external_id": self.external_id,
            "address": {"line1": self.address, "city": self.city, "state": self.state, "zip": self.zip},
            "facts": {"beds": self.beds, "baths": self.baths, "sqft": self.sqft, "year_built": self.year_built},
            "pricing": {"list_price": self.list_price, "rent_estimate": self.rent_estimate},
            "images": self.images,
            "thumb_url": self.thumb_url,
            "status": self.status,
            "attribution": self.attribution,
        }


def source_from_external_id(external_id: str) -> SourceType:
    if external_id.startswith("partner-"):
        return SourceType.PARTNER
    return SourceType.PUBLIC


def _from_mock(raw: dict) -> ExternalListing:
    return ExternalListing(
        external_id=raw["id"],
        source_type=source_from_external_id(raw["id"]).value,
        address=raw["address"],
        city=raw["city"],
        state=raw["state"],
        zip=raw["zip"],
        list_price=float(raw["list_price"]),
        rent_estimate=float(raw["rent_estimate"]) if raw.get("rent_estimate") is not None else None,
        beds=raw.get("beds"),
        baths=raw.get("baths"),
        sqft=raw.get("sqft"),
        year_built=raw.get("year_built"),
        images=list(raw.get("images", [])),
        thumb_url=raw.get("thumb_url"),
        status=raw.get("status", "ACTIVE"),
        attribution=raw.get("attribution"),
    )


def _from_row(row: MLSListing) -> ExternalListing:
    return ExternalListing(
        external_id=row.external_id,
        source_type=row.source_type.value,
        address=row.address,
        city=row.city,
        state=row.state,
        zip=row.zip,
        list_price=row.list_price,
        rent_estimate=row.rent_estimate,
        beds=row.beds,
        baths=row.baths,
        sqft=row.sqft,
        year_built=row.year_built,
        images=list(row.images or []),
        thumb_url=row.thumb_url,
        status=row.status,
        attribution=row.attribution,
    )


class MockListingSource:
    """Serves the static in-memory dataset."""

    def __init__(self, listings=None):
        self._listings = [_from_mock(raw) for raw in (listings if listings is not None else MOCK_LISTINGS)]

    def search(self, source: str, term: str = "", limit: int = 10) -> List[ExternalListing]:
        term = (term or "").strip().lower()
        results = []
        for listing in self._listings:
            if listing.source_type != source:
                continue
            haystack = f"{listing.address} {listing.city} {listing.zip}".lower()
            if term and term not in haystack:
                continue
            results.append(listing)
        return results[:limit]

    def get(self, external_id: str, source: str) -> Optional[ExternalListing]:
        for listing in self._listings:
            if listing.external_id == external_id and listing.source_type == source:
                return listing
        return None


class DatabaseListingSource:
    """Reads the persisted mls_listings table."""

    def __init__(self, session):
        self.session = session

    def search(self, source: str, term: str = "", limit: int = 10) -> List[ExternalListing]:
        query = self.session.query(MLSListing).filter(MLSListing.source_type == SourceType(source))
        term = (term or "").strip()
        if term:
            pattern = f"%{term}%"
            query = query.filter(
                or_(MLSListing.address.ilike(pattern), MLSListing.city.ilike(pattern), MLSListing.zip.ilike(pattern))
            )
        rows = query.order_by(MLSListing.created_at.desc()).limit(limit).all()
        return [_from_row(row) for row in rows]

    def get(self, external_id: str, source: str) -> Optional[ExternalListing]:
        row = (
            self.session.query(MLSListing)
            .filter_by(external_id=external_id, source_type=SourceType(source))
            .first()
        )
        return _from_row(row) if row else None


def get_listing_source(config, session):
    mode = (config.get("MLS_SOURCE") or "mock").lower()
    if mode == "database":
        return DatabaseListingSource(session)
    return MockListingSource()


def seed_mls_listings(session, listings=None) -> int:
    """Upsert the mock dataset into mls_listings. Caller commits."""
    count = 0
    for raw in (listings if listings is not None else MOCK_LISTINGS):
        row = session.query(MLSListing).filter_by(external_id=raw["id"]).first()
        if row is None:
            row = MLSListing(external_id=raw["id"])
            session.add(row)
        row.source_type = source_from_external_id(raw["id"])
        row.address = raw["address"]
        row.city = raw["city"]
        row.state = raw["state"]
        row.zip = raw["zip"]
        row.list_price_cents = to_cents(raw["list_price"])
        row.rent_estimate_cents = to_cents(raw["rent_estimate"]) if raw.get("rent_estimate") is not None else None
        row.beds = raw.get("beds")
        row.baths = raw.get("baths")
        row.sqft = raw.get("sqft")
        row.year_built = raw.get("year_built")
        row.images = list(raw.get("images", []))
        row.thumb_url = raw.get("thumb_url")
        row.status = raw.get("status", "ACTIVE")
        row.attribution = raw.get("attribution")
        count += 1
    session.flush()
    return count

