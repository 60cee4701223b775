from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import jwt_required
from sqlalchemy.orm import joinedload

from brickly.database import atomic, utcnow
from brickly.extensions import db
from brickly.Models.KycModel import KycProfile, KycStatus
from brickly.Models.UserModel import UserRole
from brickly.Schemas.Kyc import KycDecisionIn, KycProfileOut, KycSubmissionOut, KycSubmitIn
from brickly.Schemas.base import dump, dump_many
from brickly.Utils.auth import current_user_id, roles_required
from brickly.Utils.errors import NotFoundError
from brickly.Utils.validation import parse_body

kyc_bp = Blueprint("kyc", __name__, url_prefix="/kyc")


@kyc_bp.route("/me", methods=["GET"])
@jwt_required()
def my_kyc():
    profile = db.session.query(KycProfile).filter_by(user_id=current_user_id()).first()
    if not profile:
        raise NotFoundError("KYC profile not found")
    return jsonify(dump(KycProfileOut, profile)), 200


@kyc_bp.route("/submit", methods=["POST"])
@jwt_required()
def submit_kyc():
    """
    POST /kyc/submit
    Body: { "data": { ...identity fields... } }
    (Re)submission always puts the profile back to PENDING.
    """
    body = parse_body(KycSubmitIn)
    user_id = current_user_id()

    with atomic(db.session):
        profile = db.session.query(KycProfile).filter_by(user_id=user_id).with_for_update().first()
        if profile is None:
            profile = KycProfile(user_id=user_id)
            db.session.add(profile)
        profile.status = KycStatus.PENDING
        profile.data = body.data
        profile.submitted_at = utcnow()
        db.session.flush()
        result = dump(KycProfileOut, profile)

    return jsonify(result), 200


@kyc_bp.route("/submissions", methods=["GET"])
@roles_required(UserRole.ADMIN)
def list_submissions():
    submissions = (
        db.session.query(KycProfile)
        .options(joinedload(KycProfile.user))
        .filter(KycProfile.status == KycStatus.PENDING)
        .order_by(KycProfile.submitted_at.asc())
        .all()
    )
    return jsonify(dump_many(KycSubmissionOut, submissions)), 200


def _decide(status: KycStatus):
    body = parse_body(KycDecisionIn)
    user_id = str(body.user_id)

    with atomic(db.session):
        profile = db.session.query(KycProfile).filter_by(user_id=user_id).with_for_update().first()
        if profile is None:
            raise NotFoundError("KYC profile not found")
        profile.status = status
        db.session.flush()
        result = dump(KycProfileOut, profile)

    current_app.logger.info(f"KYC for user {user_id} set to {status.value} by {current_user_id()}")
    return jsonify(result), 200


@kyc_bp.route("/approve", methods=["POST"])
@roles_required(UserRole.ADMIN)
def approve_kyc():
    return _decide(KycStatus.APPROVED)


@kyc_bp.route("/reject", methods=["POST"])
@roles_required(UserRole.ADMIN)
def reject_kyc():
    return _decide(KycStatus.REJECTED)
