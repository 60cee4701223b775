from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from brickly.database import atomic
from brickly.extensions import db
from brickly.Models.UserModel import UserRole
from brickly.Schemas.Market import HoldingOut, InvestBuyIn
from brickly.Schemas.base import dump
from brickly.Services.Trading import buy_primary_shares
from brickly.Utils.auth import current_user_id, kyc_approved_required, roles_required
from brickly.Utils.errors import InternalError
from brickly.Utils.validation import parse_body

invest_bp = Blueprint("invest", __name__, url_prefix="/invest")


@invest_bp.route("/buy", methods=["POST"])
@roles_required(UserRole.INVESTOR, UserRole.ADMIN, UserRole.LISTER)
@kyc_approved_required
def buy_shares():
    """
    POST /invest/buy
    Body: { "propertyId": "<uuid>", "sharesToBuy": 500 }
    Buys from the property's unissued pool.
    """
    body = parse_body(InvestBuyIn)
    user_id = current_user_id()
    property_id = str(body.property_id)

    try:
        with atomic(db.session):
            holding = buy_primary_shares(db.session, user_id, property_id, body.shares_to_buy)
            result = dump(HoldingOut, holding)
    except SQLAlchemyError:
        current_app.logger.error(
            f"Primary buy failed for user {user_id}, property {property_id}", exc_info=True
        )
        raise InternalError("Failed to purchase shares")

    return jsonify(result), 201
