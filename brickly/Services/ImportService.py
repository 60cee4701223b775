from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from brickly.database import atomic
from brickly.extensions import db
from brickly.Models.PropertyModel import SourceType
from brickly.Schemas.Imports import ImportConfirmIn, ImportDetailOut, ImportSearchIn, ImportSourceIn, ImportSummaryOut
from brickly.Schemas.Listing import CreatedListingOut
from brickly.Schemas.base import dump, dump_many
from brickly.Services.ListingFactory import create_listing_bundle
from brickly.Services.ListingSources import get_listing_source
from brickly.Utils.auth import current_user_id, kyc_approved_required
from brickly.Utils.errors import InternalError, NotFoundError, ValidationFailed
from brickly.Utils.validation import parse_body, parse_query

imports_bp = Blueprint("imports", __name__, url_prefix="/import")


def _source():
    return get_listing_source(current_app.config, db.session)


@imports_bp.route("/listings", methods=["GET"])
def list_imports():
    """
    GET /import/listings?source=PUBLIC|PARTNER&q=<address, city or zip>
    Returns up to 10 summaries.
    """
    query = parse_query(ImportSearchIn)
    try:
        listings = _source().search(query.source, query.q, limit=10)
    except SQLAlchemyError:
        current_app.logger.error("Failed to load import listings", exc_info=True)
        raise InternalError("Failed to load listings")
    return jsonify(dump_many(ImportSummaryOut, listings)), 200


@imports_bp.route("/listings/<string:external_id>", methods=["GET"])
def get_import_detail(external_id):
    try:
        query = parse_query(ImportSourceIn)
    except ValidationFailed:
        raise ValidationFailed("Invalid source")

    try:
        listing = _source().get(external_id, query.source)
    except SQLAlchemyError:
        current_app.logger.error(f"Failed to load import listing {external_id}", exc_info=True)
        raise InternalError("Failed to load listing")

    if listing is None:
        raise NotFoundError("Listing not found")
    return jsonify(dump(ImportDetailOut, listing.detail())), 200


@imports_bp.route("/confirm", methods=["POST"])
@kyc_approved_required
def confirm_import():
    """
    POST /import/confirm
    Body: the /listings payload plus { "source", "externalId", "attribution" }.
    Creates the property with its provenance recorded.
    """
    payload = parse_body(ImportConfirmIn)
    user_id = current_user_id()

    try:
        with atomic(db.session):
            created = create_listing_bundle(
                db.session,
                user_id,
                payload,
                source=SourceType(payload.source),
                external_id=payload.external_id,
                attribution=payload.attribution,
            )
            result = dump(CreatedListingOut, created)
    except SQLAlchemyError:
        current_app.logger.error(f"Failed to import {payload.external_id} for user {user_id}", exc_info=True)
        raise InternalError("Failed to import listing")

    current_app.logger.info(f"Imported {payload.source} listing {payload.external_id} as property {result['property']['id']}")
    return jsonify(result), 201
