from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from brickly.database import atomic, to_cents
from brickly.extensions import db
from brickly.Models.ListingModel import Listing
from brickly.Models.UserModel import UserRole
from brickly.Schemas.Listing import CreatedListingOut, CreateListingIn, ListingDetailOut, ListingUpdateIn
from brickly.Schemas.base import dump, dump_many
from brickly.Services.ListingFactory import create_listing_bundle
from brickly.Utils.auth import current_user_id, kyc_approved_required, roles_required
from brickly.Utils.errors import InternalError, NotFoundError
from brickly.Utils.validation import parse_body

listings_bp = Blueprint("listings", __name__, url_prefix="/listings")

# wire field -> (model attribute, converter)
_PROPERTY_FIELDS = {
    "type": ("type", None),
    "address1": ("address1", None),
    "city": ("city", None),
    "state": ("state", None),
    "zip": ("zip", None),
    "square_feet": ("square_feet", None),
    "bedrooms": ("bedrooms", None),
    "bathrooms": ("bathrooms", None),
    "target_raise": ("target_raise_cents", to_cents),
    "est_monthly_rent": ("est_monthly_rent_cents", to_cents),
}
_LISTING_FIELDS = {
    "asking_price": ("asking_price_cents", to_cents),
    "bonus_percent": ("bonus_percent", None),
}


def _apply(target, changes: dict, fields: dict):
    for name, value in changes.items():
        attr, convert = fields[name]
        setattr(target, attr, convert(value) if convert else value)


@listings_bp.route("", methods=["POST"])
@roles_required(UserRole.ADMIN, UserRole.LISTER)
@kyc_approved_required
def create_listing():
    payload = parse_body(CreateListingIn)
    user_id = current_user_id()

    try:
        with atomic(db.session):
            created = create_listing_bundle(db.session, user_id, payload)
    except SQLAlchemyError:
        current_app.logger.error(f"Error creating listing for user {user_id}", exc_info=True)
        raise InternalError("Failed to create listing")

    current_app.logger.info(f"Listing {created['listing'].id} created by {user_id}")
    return jsonify(dump(CreatedListingOut, created)), 201


@listings_bp.route("/mine", methods=["GET"])
@roles_required(UserRole.LISTER)
def my_listings():
    listings = (
        db.session.query(Listing)
        .filter_by(lister_user_id=current_user_id())
        .order_by(Listing.posted_at.desc())
        .all()
    )
    return jsonify(dump_many(ListingDetailOut, listings)), 200


@listings_bp.route("/<string:listing_id>", methods=["PUT"])
@roles_required(UserRole.LISTER)
def update_listing(listing_id):
    """
    PUT /listings/<listing_id>
    Body: { "property": {...partial}, "listing": {"askingPrice": .., "bonusPercent": ..} }
    Only the owning lister may update.
    """
    payload = parse_body(ListingUpdateIn)
    user_id = current_user_id()

    try:
        with atomic(db.session):
            listing = (
                db.session.query(Listing)
                .filter_by(id=listing_id, lister_user_id=user_id)
                .with_for_update()
                .first()
            )
            if not listing:
                raise NotFoundError("Listing not found")

            if payload.property:
                changes = payload.property.model_dump(exclude_unset=True, exclude_none=True)
                _apply(listing.property, changes, _PROPERTY_FIELDS)
            if payload.listing:
                changes = payload.listing.model_dump(exclude_unset=True, exclude_none=True)
                _apply(listing, changes, _LISTING_FIELDS)
    except SQLAlchemyError:
        current_app.logger.error(f"Error updating listing {listing_id} for user {user_id}", exc_info=True)
        raise InternalError("Failed to update listing")

    listing = db.session.get(Listing, listing_id)
    return jsonify(dump(ListingDetailOut, listing)), 200

