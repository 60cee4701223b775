import enum

from brickly.database import new_id, utcnow
from brickly.extensions import db


class KycStatus(enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class KycProfile(db.Model):
    __tablename__ = "kyc_profiles"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    status = db.Column(db.Enum(KycStatus), nullable=False, default=KycStatus.PENDING)
    data = db.Column(db.JSON, nullable=False, default=dict)
    submitted_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user = db.relationship("User", back_populates="kyc_profile")

    @property
    def is_approved(self) -> bool:
        return self.status == KycStatus.APPROVED
