from flask import Blueprint, jsonify
from sqlalchemy.orm import joinedload, selectinload

from brickly.extensions import db
from brickly.Models.ListingModel import Listing
from brickly.Models.PropertyModel import Property
from brickly.Schemas.Listing import PropertyDetailOut
from brickly.Schemas.base import dump, dump_many
from brickly.Utils.errors import NotFoundError

properties_bp = Blueprint("properties", __name__, url_prefix="/properties")


def _with_details(query):
    return query.options(
        selectinload(Property.listings).joinedload(Listing.lister),
        selectinload(Property.images),
        joinedload(Property.share_class),
    )


@properties_bp.route("", methods=["GET"])
def list_properties():
    properties = _with_details(db.session.query(Property)).order_by(Property.created_at.desc()).all()
    return jsonify(dump_many(PropertyDetailOut, properties)), 200


@properties_bp.route("/<string:property_id>", methods=["GET"])
def get_property(property_id):
    prop = _with_details(db.session.query(Property)).filter(Property.id == property_id).first()
    if not prop:
        raise NotFoundError("Property not found")
    return jsonify(dump(PropertyDetailOut, prop)), 200
