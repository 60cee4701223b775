import secrets
from datetime import timedelta

from brickly.database import new_id, utcnow
from brickly.extensions import db

TOKEN_TTL = timedelta(hours=24)


class VerificationToken(db.Model):
    __tablename__ = "verification_tokens"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token = db.Column(db.String(64), unique=True, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    user = db.relationship("User", back_populates="verification_tokens")

    @classmethod
    def issue(cls, user) -> "VerificationToken":
        return cls(user=user, token=secrets.token_hex(32), expires_at=utcnow() + TOKEN_TTL)

    @property
    def is_expired(self) -> bool:
        return self.expires_at < utcnow()
