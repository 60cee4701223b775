import enum

from brickly.database import from_cents, new_id, utcnow
from brickly.extensions import db


class PropertyType(enum.Enum):
    HOUSE = "HOUSE"
    CONDO = "CONDO"
    TOWNHOME = "TOWNHOME"
    APARTMENT = "APARTMENT"
    MULTI_FAMILY = "MULTI_FAMILY"


class PropertyStatus(enum.Enum):
    LISTED = "LISTED"
    FUNDED = "FUNDED"
    RENT_LISTED = "RENT_LISTED"
    RENTED = "RENTED"


class SourceType(enum.Enum):
    MANUAL = "MANUAL"
    PUBLIC = "PUBLIC"
    PARTNER = "PARTNER"


class Property(db.Model):
    __tablename__ = "properties"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    type = db.Column(db.Enum(PropertyType), nullable=False, default=PropertyType.HOUSE)
    address1 = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(120), nullable=False)
    state = db.Column(db.String(64), nullable=False)
    zip = db.Column(db.String(16), nullable=False)
    status = db.Column(db.Enum(PropertyStatus), nullable=False, default=PropertyStatus.LISTED, index=True)

    square_feet = db.Column(db.Integer, nullable=True)
    bedrooms = db.Column(db.Integer, nullable=True)
    bathrooms = db.Column(db.Integer, nullable=True)
    target_raise_cents = db.Column(db.BigInteger, nullable=True)
    est_monthly_rent_cents = db.Column(db.BigInteger, nullable=True)

    # provenance of imported properties
    source_type = db.Column(db.Enum(SourceType), nullable=False, default=SourceType.MANUAL)
    source_ref_id = db.Column(db.String(64), nullable=True)
    imported_at = db.Column(db.DateTime, nullable=True)
    source_attribution = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    listings = db.relationship(
        "Listing", back_populates="property", cascade="all, delete-orphan", order_by="Listing.posted_at.desc()"
    )
    images = db.relationship(
        "PropertyImage", back_populates="property", cascade="all, delete-orphan", order_by="PropertyImage.sort_order"
    )
    share_class = db.relationship(
        "ShareClass", back_populates="property", uselist=False, cascade="all, delete-orphan"
    )
    sell_orders = db.relationship("SellOrder", back_populates="property", cascade="all, delete-orphan")
    rental_applications = db.relationship(
        "RentalApplication", back_populates="property", cascade="all, delete-orphan"
    )

    @property
    def target_raise(self):
        return from_cents(self.target_raise_cents)

    @property
    def est_monthly_rent(self):
        return from_cents(self.est_monthly_rent_cents)

    def __repr__(self):
        return f"<Property id={self.id} address='{self.address1}, {self.city}' status={self.status.value}>"


class PropertyImage(db.Model):
    __tablename__ = "property_images"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    property_id = db.Column(
        db.String(36), db.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    url = db.Column(db.String(1024), nullable=False)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    property = db.relationship("Property", back_populates="images")
