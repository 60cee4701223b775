from brickly.database import from_cents, new_id, utcnow
from brickly.extensions import db
from brickly.Models.PropertyModel import SourceType


class MLSListing(db.Model):
    __tablename__ = "mls_listings"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    external_id = db.Column(db.String(64), unique=True, nullable=False)
    source_type = db.Column(db.Enum(SourceType), nullable=False, index=True)

    address = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(120), nullable=False)
    state = db.Column(db.String(64), nullable=False)
    zip = db.Column(db.String(16), nullable=False)

    list_price_cents = db.Column(db.BigInteger, nullable=False)
    rent_estimate_cents = db.Column(db.BigInteger, nullable=True)
    beds = db.Column(db.Integer, nullable=True)
    baths = db.Column(db.Float, nullable=True)
    sqft = db.Column(db.Integer, nullable=True)
    year_built = db.Column(db.Integer, nullable=True)

    images = db.Column(db.JSON, nullable=False, default=list)
    thumb_url = db.Column(db.String(1024), nullable=True)
    status = db.Column(db.String(32), nullable=False, default="ACTIVE")
    attribution = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    @property
    def list_price(self) -> float:
        return from_cents(self.list_price_cents)

    @property
    def rent_estimate(self):
        return from_cents(self.rent_estimate_cents)
