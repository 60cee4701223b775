import enum

from brickly.database import from_cents, new_id, utcnow
from brickly.extensions import db


class RentalApplicationStatus(enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class RentalApplication(db.Model):
    __tablename__ = "rental_applications"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    property_id = db.Column(
        db.String(36), db.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tenant_user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    status = db.Column(
        db.Enum(RentalApplicationStatus), nullable=False, default=RentalApplicationStatus.PENDING
    )
    rent_amount_cents = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    @property
    def rent_amount(self):
        return from_cents(self.rent_amount_cents)

    property = db.relationship("Property", back_populates="rental_applications")
    tenant = db.relationship("User")
