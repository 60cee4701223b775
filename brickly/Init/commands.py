import random

import click
from flask import current_app

from brickly.database import atomic, utcnow
from brickly.extensions import db
from brickly.Models.KycModel import KycProfile, KycStatus
from brickly.Models.PropertyModel import PropertyType
from brickly.Models.UserModel import User, UserRole
from brickly.Schemas.Listing import CreateListingIn
from brickly.Services.ListingFactory import create_listing_bundle
from brickly.Services.ListingSources import seed_mls_listings
from brickly.Services.Trading import buy_primary_shares

DEMO_USERS = [
    ("admin@brickly.io", "admin-password", UserRole.ADMIN, True),
    ("investor@brickly.io", "investor-password", UserRole.INVESTOR, True),
    ("portland@brickly.io", "portland-password", UserRole.LISTER, False),
    ("tampa@brickly.io", "tampa-password", UserRole.LISTER, False),
]

DEMO_LISTINGS = [
    {
        "property": {
            "type": "HOUSE", "address1": "100 Harbor Way", "city": "San Diego", "state": "CA", "zip": "92101",
            "square_feet": 1800, "bedrooms": 3, "bathrooms": 2, "target_raise": 1500000, "est_monthly_rent": 6500,
        },
        "listing": {"asking_price": 1850000, "bonus_percent": 2.5},
        "share_class": {"total_shares": 10000, "reference_price_per_share": 185},
        "images": [
            "https://images.unsplash.com/photo-1568605114967-8130f3a36994",
            "https://images.unsplash.com/photo-1507089947368-19c1da9775ae",
        ],
    },
    {
        "property": {
            "type": "CONDO", "address1": "455 Cedar Loop", "city": "Portland", "state": "OR", "zip": "97205",
            "square_feet": 950, "bedrooms": 2, "bathrooms": 1, "target_raise": 1200000, "est_monthly_rent": 5200,
        },
        "listing": {"asking_price": 1400000, "bonus_percent": 1.75},
        "share_class": {"total_shares": 10000, "reference_price_per_share": 140},
        "images": [
            "https://images.unsplash.com/photo-1449844908441-8829872d2607",
            "https://images.unsplash.com/photo-1512917774080-9991f1c4c750",
        ],
    },
]

STREET_NAMES = ["Maple", "Oak", "Pine", "Cedar", "Elm", "Willow", "Birch", "Sunset", "Ridge", "Valley",
                "Lake", "Meadow", "Park", "Hillcrest", "Grove"]

CITIES = [
    ("San Diego", "CA", "92101"),
    ("Austin", "TX", "78701"),
    ("Denver", "CO", "80202"),
    ("Nashville", "TN", "37203"),
    ("Charlotte", "NC", "28202"),
    ("Phoenix", "AZ", "85004"),
    ("Seattle", "WA", "98101"),
    ("Portland", "OR", "97205"),
    ("Tampa", "FL", "33602"),
    ("Atlanta", "GA", "30303"),
]

IMAGE_POOL = [
    "https://images.unsplash.com/photo-1568605114967-8130f3a36994",
    "https://images.unsplash.com/photo-1507089947368-19c1da9775ae",
    "https://images.unsplash.com/photo-1449844908441-8829872d2607",
    "https://images.unsplash.com/photo-1512917774080-9991f1c4c750",
    "https://images.unsplash.com/photo-1494526585095-c41746248156",
    "https://images.unsplash.com/photo-1484154218962-a197022b5858",
]

DEMO_HOLDING_SHARES = 500


def ensure_user(email: str, password: str, role: UserRole, kyc_approved: bool) -> User:
    """Fetch or create a verified user; approved users get an APPROVED KYC profile."""
    user = db.session.query(User).filter_by(email=email).first()
    if user is None:
        user = User(email=email, role=role)
        user.set_password(password)
        db.session.add(user)
    user.email_verified = True

    if kyc_approved:
        if user.kyc_profile is None:
            user.kyc_profile = KycProfile(data={"source": "seed"}, submitted_at=utcnow())
        user.kyc_profile.status = KycStatus.APPROVED

    db.session.flush()
    return user


def _lister_for(city: str, users: dict) -> User:
    if city == "Portland":
        return users["portland@brickly.io"]
    if city == "Tampa":
        return users["tampa@brickly.io"]
    return users["admin@brickly.io"]


def _random_listing() -> dict:
    city, state, zip_code = random.choice(CITIES)
    target_raise = random.randint(700_000, 2_500_000)
    asking_price = round(target_raise * (1 + random.randint(5, 25) / 100))
    total_shares = random.randint(5000, 15000)
    return {
        "property": {
            "type": random.choice([PropertyType.HOUSE, PropertyType.CONDO, PropertyType.TOWNHOME, PropertyType.APARTMENT]),
            "address1": f"{random.randint(100, 9999)} {random.choice(STREET_NAMES)} Ave",
            "city": city,
            "state": state,
            "zip": zip_code,
            "square_feet": random.randint(700, 3200),
            "bedrooms": random.randint(1, 5),
            "bathrooms": random.randint(1, 4),
            "target_raise": target_raise,
            "est_monthly_rent": round(asking_price / 180, 1),
        },
        "listing": {"asking_price": asking_price, "bonus_percent": random.randint(10, 35) / 10},
        "share_class": {
            "total_shares": total_shares,
            "reference_price_per_share": round(asking_price / total_shares, 2),
        },
        "images": [random.choice(IMAGE_POOL) for _ in range(3)],
    }


def seed_demo() -> dict:
    with atomic(db.session):
        users = {email: ensure_user(email, password, role, approved) for email, password, role, approved in DEMO_USERS}

        created = []
        for raw in DEMO_LISTINGS:
            payload = CreateListingIn.model_validate(raw)
            lister = _lister_for(payload.property.city, users)
            created.append(create_listing_bundle(db.session, lister.id, payload))

        # the demo investor starts with a slice of the first listing
        first_property = created[0]["property"]
        buy_primary_shares(db.session, users["investor@brickly.io"].id, first_property.id, DEMO_HOLDING_SHARES)

    return {"users": len(users), "listings": len(created)}


def seed_properties(count: int) -> int:
    with atomic(db.session):
        users = {email: ensure_user(email, password, role, approved) for email, password, role, approved in DEMO_USERS}
        for _ in range(count):
            payload = CreateListingIn.model_validate(_random_listing())
            lister = _lister_for(payload.property.city, users)
            create_listing_bundle(db.session, lister.id, payload)
    return count


def register_commands(app):
    @app.cli.command("seed-demo")
    def seed_demo_command():
        """Create demo users, two listings and one investor holding."""
        result = seed_demo()
        current_app.logger.info(f"Seeded demo data: {result}")
        click.echo(f"Seeded {result['users']} users and {result['listings']} listings")

    @app.cli.command("seed-properties")
    @click.option("--count", default=100, show_default=True, type=click.IntRange(min=1))
    def seed_properties_command(count):
        """Create COUNT random listings."""
        seeded = seed_properties(count)
        current_app.logger.info(f"Seeded {seeded} random properties")
        click.echo(f"Seeded {seeded} properties")

    @app.cli.command("seed-mls")
    def seed_mls_command():
        """Load the mock MLS dataset into mls_listings."""
        with atomic(db.session):
            count = seed_mls_listings(db.session)
        current_app.logger.info(f"Seeded {count} MLS listings")
        click.echo(f"Seeded {count} MLS listings")
