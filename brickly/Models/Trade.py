from brickly.database import from_cents, new_id, utcnow
from brickly.extensions import db


class Trade(db.Model):
    __tablename__ = "trades"

    id = db.Column(db.String(36), primary_key=True, default=new_id)

    sell_order_id = db.Column(
        db.String(36), db.ForeignKey("sell_orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    property_id = db.Column(db.String(36), db.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    buyer_user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    seller_user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)

    shares_traded = db.Column(db.Integer, nullable=False)
    price_per_share_cents = db.Column(db.Integer, nullable=False)  # per share, in cents

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    sell_order = db.relationship("SellOrder", back_populates="trades")

    @property
    def price_per_share(self) -> float:
        return from_cents(self.price_per_share_cents)
