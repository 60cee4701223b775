import enum

from brickly.database import from_cents, new_id, utcnow
from brickly.extensions import db


class SellOrderStatus(enum.Enum):
    OPEN = "OPEN"
    FILLED = "FILLED"


class SellOrder(db.Model):
    __tablename__ = "sell_orders"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    property_id = db.Column(
        db.String(36), db.ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # remaining quantity; reaches 0 exactly when the order is FILLED
    shares_for_sale = db.Column(db.Integer, nullable=False)
    ask_price_per_share_cents = db.Column(db.Integer, nullable=False)
    status = db.Column(db.Enum(SellOrderStatus), nullable=False, default=SellOrderStatus.OPEN, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.CheckConstraint("shares_for_sale >= 0", name="ck_sell_order_shares_nonneg"),
    )

    @property
    def ask_price_per_share(self) -> float:
        return from_cents(self.ask_price_per_share_cents)

    property = db.relationship("Property", back_populates="sell_orders")
    user = db.relationship("User")
    trades = db.relationship("Trade", back_populates="sell_order", order_by="Trade.created_at")
