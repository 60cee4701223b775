from brickly.database import from_cents, new_id, utcnow
from brickly.extensions import db


class ShareClass(db.Model):
    __tablename__ = "share_classes"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    property_id = db.Column(
        db.String(36), db.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    total_shares = db.Column(db.Integer, nullable=False)
    # unissued pool; only ever moved by conditional UPDATEs
    shares_available = db.Column(db.Integer, nullable=False)
    reference_price_per_share_cents = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.CheckConstraint("shares_available >= 0", name="ck_share_class_available_nonneg"),
        db.CheckConstraint("shares_available <= total_shares", name="ck_share_class_available_le_total"),
    )

    holdings = db.relationship("Holding", back_populates="share_class", cascade="all, delete-orphan")

    @property
    def reference_price_per_share(self) -> float:
        return from_cents(self.reference_price_per_share_cents)

    @property
    def shares_issued(self) -> int:
        return self.total_shares - self.shares_available

    property = db.relationship("Property", back_populates="share_class")

    def __repr__(self):
        return f"<ShareClass property_id={self.property_id} available={self.shares_available}/{self.total_shares}>"
