import os
from datetime import timedelta

basedir = os.path.abspath(os.path.dirname(__file__))


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


class BaseConfig:
    # Use a secure, random key in production
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", f"sqlite:///{os.path.join(basedir, 'brickly.db')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    BCRYPT_LOG_ROUNDS = int(os.environ.get("BCRYPT_LOG_ROUNDS", "12"))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            "CORS_ORIGINS", "https://app.bricklyusa.com,http://localhost:3000"
        ).split(",")
        if origin.strip()
    ]

    # Where the email verification link points
    WEB_BASE_URL = os.environ.get("WEB_BASE_URL", "http://localhost:3000")
    SMTP_HOST = os.environ.get("SMTP_HOST", "smtp.office365.com")
    SMTP_PORT = int(os.environ.get("SMTP_PORT", "587"))
    SMTP_USER = os.environ.get("SMTP_USER", "")
    SMTP_PASS = os.environ.get("SMTP_PASS", "")
    SMTP_FROM = os.environ.get("SMTP_FROM", SMTP_USER)
    ALLOW_EMAIL_BYPASS = _env_flag("ALLOW_EMAIL_BYPASS")

    # "mock" serves the static dataset, "database" reads the mls_listings table
    MLS_SOURCE = os.environ.get("MLS_SOURCE", "mock")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PORT = int(os.environ.get("PORT", "4000"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    ALLOW_EMAIL_BYPASS = _env_flag("ALLOW_EMAIL_BYPASS", "true")


class ProductionConfig(BaseConfig):
    DEBUG = False
    # You can override DATABASE_URL or JWT_SECRET_KEY via environment vars


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    BCRYPT_LOG_ROUNDS = 4
    SMTP_USER = ""
    SMTP_PASS = ""
    SMTP_FROM = ""
    ALLOW_EMAIL_BYPASS = True
    MLS_SOURCE = "mock"
    LOG_LEVEL = "WARNING"
