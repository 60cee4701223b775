from brickly.database import new_id, utcnow
from brickly.extensions import db


class Holding(db.Model):
    __tablename__ = "holdings"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    share_class_id = db.Column(
        db.String(36), db.ForeignKey("share_classes.id", ondelete="CASCADE"), nullable=False
    )
    shares_owned = db.Column(db.Integer, nullable=False, default=0)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_id", "share_class_id", name="uix_user_share_class"),
        db.CheckConstraint("shares_owned >= 0", name="ck_holding_shares_nonneg"),
    )

    share_class = db.relationship("ShareClass", back_populates="holdings")
    user = db.relationship("User")

    @property
    def percent(self) -> float:
        """
        Fraction of the share class owned by this holding.
        Returns 0 for an empty share class to avoid division by zero.
        """
        total = self.share_class.total_shares if self.share_class else 0
        if total <= 0:
            return 0.0
        return self.shares_owned / total

    def __repr__(self):
        return f"<Holding user_id={self.user_id} share_class_id={self.share_class_id} shares={self.shares_owned}>"
