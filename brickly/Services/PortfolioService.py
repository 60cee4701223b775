from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy.orm import joinedload

from brickly.extensions import db
from brickly.Models.Holdings import Holding
from brickly.Models.ShareClassModel import ShareClass
from brickly.Schemas.Market import PortfolioEntryOut
from brickly.Utils.auth import current_user_id

portfolio_bp = Blueprint("portfolio", __name__, url_prefix="/portfolio")


@portfolio_bp.route("", methods=["GET"])
@jwt_required()
def get_portfolio():
    holdings = (
        db.session.query(Holding)
        .options(joinedload(Holding.share_class).joinedload(ShareClass.property))
        .filter(Holding.user_id == current_user_id())
        .all()
    )

    out = []
    for h in holdings:
        out.append(PortfolioEntryOut.model_validate({
            "id": h.id,
            "shares_owned": h.shares_owned,
            "updated_at": h.updated_at,
            "percent": h.percent,
            "property": h.share_class.property,
            "share_class": h.share_class,
        }).model_dump(mode="json", by_alias=True))
    return jsonify(out), 200
