import enum

from brickly.database import from_cents, new_id, utcnow
from brickly.extensions import db


class ListingStatus(enum.Enum):
    LISTED = "LISTED"
    CLOSED = "CLOSED"


class Listing(db.Model):
    __tablename__ = "listings"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    property_id = db.Column(
        db.String(36), db.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    lister_user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    asking_price_cents = db.Column(db.BigInteger, nullable=False)
    bonus_percent = db.Column(db.Float, nullable=False, default=0.0)
    status = db.Column(db.Enum(ListingStatus), nullable=False, default=ListingStatus.LISTED)
    posted_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    @property
    def asking_price(self) -> float:
        return from_cents(self.asking_price_cents)

    # after the accessors: this name shadows the builtin decorator
    property = db.relationship("Property", back_populates="listings")
    lister = db.relationship("User")
