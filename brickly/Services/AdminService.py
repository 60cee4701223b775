from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from brickly.database import atomic
from brickly.extensions import db
from brickly.Models.MLSListingModel import MLSListing
from brickly.Models.PropertyModel import Property, PropertyStatus
from brickly.Models.UserModel import UserRole
from brickly.Schemas.Imports import MLSListingAdminOut
from brickly.Schemas.base import dump_many
from brickly.Services.ListingSources import DatabaseListingSource, seed_mls_listings
from brickly.Utils.auth import current_user_id, roles_required
from brickly.Utils.errors import InternalError, InvalidStateError, NotFoundError

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")


@admin_bp.route("/mls-listings", methods=["GET"])
@roles_required(UserRole.ADMIN)
def list_mls_listings():
    source = "PARTNER" if request.args.get("source") == "PARTNER" else "PUBLIC"
    listings = DatabaseListingSource(db.session).search(source, request.args.get("q", ""), limit=50)
    return jsonify(dump_many(MLSListingAdminOut, listings)), 200


@admin_bp.route("/mls-listings/seed", methods=["POST"])
@roles_required(UserRole.ADMIN)
def seed_mls():
    try:
        with atomic(db.session):
            db.session.query(MLSListing).delete()
            count = seed_mls_listings(db.session)
    except SQLAlchemyError:
        current_app.logger.error("Failed to seed MLS listings", exc_info=True)
        raise InternalError("Failed to seed MLS listings")

    current_app.logger.info(f"Seeded {count} MLS listings")
    return jsonify({"count": count}), 200


@admin_bp.route("/mls-listings/clear", methods=["POST"])
@roles_required(UserRole.ADMIN)
def clear_mls():
    try:
        with atomic(db.session):
            count = db.session.query(MLSListing).delete()
    except SQLAlchemyError:
        current_app.logger.error("Failed to clear MLS listings", exc_info=True)
        raise InternalError("Failed to clear MLS listings")

    return jsonify({"count": count}), 200


@admin_bp.route("/properties/<string:property_id>", methods=["DELETE"])
@roles_required(UserRole.ADMIN)
def delete_property(property_id):
    """
    DELETE /admin/properties/<property_id>
    Only LISTED properties with no issued shares can be removed.
    """
    with atomic(db.session):
        prop = db.session.query(Property).filter_by(id=property_id).with_for_update().first()
        if not prop:
            raise NotFoundError("Property not found")
        if prop.status != PropertyStatus.LISTED:
            raise InvalidStateError("Only LISTED properties can be deleted")
        if prop.share_class and prop.share_class.shares_issued > 0:
            raise InvalidStateError("Properties with issued shares cannot be deleted")
        db.session.delete(prop)

    current_app.logger.info(f"Property {property_id} deleted by {current_user_id()}")
    return "", 204
