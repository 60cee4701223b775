from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from brickly.database import atomic, to_cents
from brickly.extensions import db
from brickly.Models.SellOrder import SellOrder, SellOrderStatus
from brickly.Models.Trade import Trade
from brickly.Models.UserModel import UserRole
from brickly.Schemas.Market import (
    MarketBuyIn,
    MarketBuyOut,
    SellOrderIn,
    SellOrderListingOut,
    SellOrderOut,
    TradeOut,
)
from brickly.Schemas.base import dump, dump_many
from brickly.Services.Trading import create_sell_order, execute_market_buy
from brickly.Utils.auth import current_user_id, kyc_approved_required, roles_required
from brickly.Utils.errors import BusinessRuleError, InternalError
from brickly.Utils.validation import parse_body

market_bp = Blueprint("market", __name__, url_prefix="/market")


@market_bp.route("/sell-orders", methods=["POST"])
@kyc_approved_required
def place_sell_order():
    body = parse_body(SellOrderIn)
    user_id = current_user_id()
    property_id = str(body.property_id)

    try:
        with atomic(db.session):
            order = create_sell_order(
                db.session,
                user_id,
                property_id,
                body.shares_for_sale,
                to_cents(body.ask_price_per_share),
            )
            result = dump(SellOrderOut, order)
    except SQLAlchemyError:
        current_app.logger.error(
            f"Error committing sell order for user {user_id}, property {property_id}", exc_info=True
        )
        raise InternalError("Failed to create sell order")

    return jsonify(result), 201


@market_bp.route("/sell-orders", methods=["GET"])
def list_sell_orders():
    orders = (
        db.session.query(SellOrder)
        .options(joinedload(SellOrder.property), joinedload(SellOrder.user))
        .filter(SellOrder.status == SellOrderStatus.OPEN)
        .order_by(SellOrder.created_at.desc())
        .all()
    )
    return jsonify(dump_many(SellOrderListingOut, orders)), 200


@market_bp.route("/buy", methods=["POST"])
@roles_required(UserRole.INVESTOR, UserRole.ADMIN, UserRole.LISTER)
@kyc_approved_required
def buy_from_order():
    """
    POST /market/buy
    Body: { "sellOrderId": "<uuid>", "sharesToBuy": 200 }
    Fills the given sell order at its ask price; partial fills leave it OPEN.
    """
    body = parse_body(MarketBuyIn)
    user_id = current_user_id()
    sell_order_id = str(body.sell_order_id)

    try:
        with atomic(db.session):
            trade, order, holding = execute_market_buy(db.session, user_id, sell_order_id, body.shares_to_buy)
            result = dump(MarketBuyOut, {"trade": trade, "order": order, "holding": holding})
    except BusinessRuleError as e:
        current_app.logger.warning(
            f"Market buy on order {sell_order_id} by user {user_id} rejected: {e.code}"
        )
        raise
    except SQLAlchemyError:
        current_app.logger.error(
            f"Unexpected error buying from order {sell_order_id} (user {user_id})", exc_info=True
        )
        raise InternalError("Failed to buy shares")

    return jsonify(result), 201


@market_bp.route("/trades", methods=["GET"])
@jwt_required()
def list_trades():
    user_id = current_user_id()
    trades = (
        db.session.query(Trade)
        .filter(or_(Trade.buyer_user_id == user_id, Trade.seller_user_id == user_id))
        .order_by(Trade.created_at.desc())
        .all()
    )
    return jsonify(dump_many(TradeOut, trades)), 200
