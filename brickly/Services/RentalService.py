from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, selectinload

from brickly.database import atomic, to_cents
from brickly.extensions import db
from brickly.Models.PropertyModel import Property, PropertyStatus
from brickly.Models.RentalApplicationModel import RentalApplication, RentalApplicationStatus
from brickly.Models.UserModel import UserRole
from brickly.Schemas.Listing import PropertyOut
from brickly.Schemas.Rental import (
    RentalApplicationOut,
    RentalApplicationReviewOut,
    RentalApplyIn,
    RentalDecisionIn,
    RentalPropertyOut,
    RentListIn,
)
from brickly.Schemas.base import dump, dump_many
from brickly.Utils.auth import current_user_id, roles_required
from brickly.Utils.errors import (
    AlreadyAppliedError,
    InternalError,
    NotFoundError,
    NotPendingError,
    NotRentListedError,
)
from brickly.Utils.validation import parse_body

rentals_bp = Blueprint("rentals", __name__)


@rentals_bp.route("/rentals", methods=["GET"])
def list_rentals():
    properties = (
        db.session.query(Property)
        .options(selectinload(Property.images))
        .filter(Property.status == PropertyStatus.RENT_LISTED)
        .order_by(Property.created_at.desc())
        .all()
    )
    return jsonify(dump_many(RentalPropertyOut, properties)), 200


@rentals_bp.route("/rentals/apply", methods=["POST"])
@roles_required(UserRole.TENANT)
def apply_for_rental():
    body = parse_body(RentalApplyIn)
    property_id = str(body.property_id)
    tenant_id = current_user_id()

    prop = db.session.get(Property, property_id)
    if not prop:
        raise NotFoundError("Property not found")
    if prop.status != PropertyStatus.RENT_LISTED:
        raise NotRentListedError()

    existing = (
        db.session.query(RentalApplication)
        .filter(
            RentalApplication.property_id == property_id,
            RentalApplication.tenant_user_id == tenant_id,
            RentalApplication.status.in_([RentalApplicationStatus.PENDING, RentalApplicationStatus.APPROVED]),
        )
        .first()
    )
    if existing:
        raise AlreadyAppliedError()

    with atomic(db.session):
        application = RentalApplication(property_id=property_id, tenant_user_id=tenant_id)
        db.session.add(application)
        db.session.flush()
        result = dump(RentalApplicationOut, application)

    return jsonify(result), 201


@rentals_bp.route("/admin/rental-applications", methods=["GET"])
@roles_required(UserRole.ADMIN)
def list_pending_applications():
    applications = (
        db.session.query(RentalApplication)
        .options(joinedload(RentalApplication.property), joinedload(RentalApplication.tenant))
        .filter(RentalApplication.status == RentalApplicationStatus.PENDING)
        .order_by(RentalApplication.created_at.asc())
        .all()
    )
    return jsonify(dump_many(RentalApplicationReviewOut, applications)), 200


@rentals_bp.route("/admin/rental-applications/approve", methods=["POST"])
@roles_required(UserRole.ADMIN)
def approve_application():
    """
    POST /admin/rental-applications/approve
    Body: { "applicationId": "<uuid>", "rentAmount": 2400 }
    Approving rents the property out.
    """
    body = parse_body(RentalDecisionIn)
    application_id = str(body.application_id)

    try:
        with atomic(db.session):
            application = (
                db.session.query(RentalApplication)
                .filter_by(id=application_id)
                .with_for_update()
                .first()
            )
            if not application:
                raise NotFoundError("Application not found")
            if application.status != RentalApplicationStatus.PENDING:
                raise NotPendingError()
            if application.property.status != PropertyStatus.RENT_LISTED:
                raise NotRentListedError("Property is not rent listed")

            application.status = RentalApplicationStatus.APPROVED
            application.rent_amount_cents = to_cents(body.rent_amount) if body.rent_amount is not None else None
            application.property.status = PropertyStatus.RENTED
            db.session.flush()
            result = dump(RentalApplicationOut, application)
    except SQLAlchemyError:
        current_app.logger.error(f"Error approving rental application {application_id}", exc_info=True)
        raise InternalError("Failed to approve application")

    current_app.logger.info(f"Rental application {application_id} approved")
    return jsonify(result), 200


@rentals_bp.route("/admin/rental-applications/reject", methods=["POST"])
@roles_required(UserRole.ADMIN)
def reject_application():
    body = parse_body(RentalDecisionIn)

    with atomic(db.session):
        application = db.session.get(RentalApplication, str(body.application_id))
        if not application:
            raise NotFoundError("Application not found")
        application.status = RentalApplicationStatus.REJECTED
        db.session.flush()
        result = dump(RentalApplicationOut, application)

    return jsonify(result), 200


@rentals_bp.route("/admin/rent-list", methods=["POST"])
@roles_required(UserRole.ADMIN)
def rent_list_property():
    body = parse_body(RentListIn)

    with atomic(db.session):
        prop = db.session.get(Property, str(body.property_id))
        if not prop:
            raise NotFoundError("Property not found")
        prop.status = PropertyStatus.RENT_LISTED
        db.session.flush()
        result = dump(PropertyOut, prop)

    return jsonify(result), 200
