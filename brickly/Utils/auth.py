from functools import wraps

from flask_jwt_extended import create_access_token, get_jwt, get_jwt_identity, jwt_required

from brickly.extensions import db
from brickly.Models.KycModel import KycProfile
from brickly.Utils.errors import ForbiddenError, KycNotApprovedError


def issue_token(user) -> str:
    # identity is the user id; the role rides along as a claim
    return create_access_token(identity=user.id, additional_claims={"role": user.role.value})


def current_user_id() -> str:
    return get_jwt_identity()


def current_role() -> str:
    return get_jwt().get("role")


def roles_required(*roles):
    allowed = {role.value for role in roles}

    def decorator(fn):
        @wraps(fn)
        @jwt_required()
        def wrapper(*args, **kwargs):
            if current_role() not in allowed:
                raise ForbiddenError()
            return fn(*args, **kwargs)

        return wrapper

    return decorator


def kyc_approved_required(fn):
    @wraps(fn)
    @jwt_required()
    def wrapper(*args, **kwargs):
        profile = db.session.query(KycProfile).filter_by(user_id=current_user_id()).first()
        if profile is None or not profile.is_approved:
            raise KycNotApprovedError()
        return fn(*args, **kwargs)

    return wrapper
