import enum

from brickly.database import new_id, utcnow
from brickly.extensions import bcrypt, db


class UserRole(enum.Enum):
    INVESTOR = "INVESTOR"
    LISTER = "LISTER"
    TENANT = "TENANT"
    ADMIN = "ADMIN"


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(255), unique=True, nullable=True, index=True)
    phone = db.Column(db.String(32), unique=True, nullable=True)
    password_hash = db.Column(db.String(128), nullable=False)
    role = db.Column(db.Enum(UserRole), nullable=False, default=UserRole.INVESTOR)
    email_verified = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    # one-to-one relationship with KycProfile
    kyc_profile = db.relationship(
        "KycProfile", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    verification_tokens = db.relationship(
        "VerificationToken", back_populates="user", cascade="all, delete-orphan"
    )

    def set_password(self, plaintext_password: str):
        self.password_hash = bcrypt.generate_password_hash(plaintext_password).decode("utf-8")

    def check_password(self, plaintext_password: str) -> bool:
        return bcrypt.check_password_hash(self.password_hash, plaintext_password)

    @property
    def kyc_status(self):
        return self.kyc_profile.status if self.kyc_profile else None

    def __repr__(self):
        return f"User {self.email} (id={self.id}, role={self.role.value})"
