from flask import jsonify


def send_error(status: int, code: str, message: str):
    return jsonify({"error": {"code": code, "message": message}}), status


class ApiError(Exception):
    """Error surfaced to the caller as {"error": {"code", "message"}}."""

    status = 500
    code = "INTERNAL_ERROR"
    message = "Internal server error"

    def __init__(self, message: str = None, code: str = None, status: int = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code
        if status is not None:
            self.status = status

    def to_response(self):
        return send_error(self.status, self.code, self.message)


class ValidationFailed(ApiError):
    status = 400
    code = "VALIDATION_ERROR"
    message = "Invalid request"


class UnauthorizedError(ApiError):
    status = 401
    code = "UNAUTHORIZED"
    message = "Unauthorized"


class InvalidCredentialsError(ApiError):
    status = 401
    code = "INVALID_CREDENTIALS"
    message = "Invalid credentials"


class ForbiddenError(ApiError):
    status = 403
    code = "FORBIDDEN"
    message = "Forbidden"


class KycNotApprovedError(ForbiddenError):
    code = "KYC_NOT_APPROVED"
    message = "KYC not approved"


class EmailNotVerifiedError(ForbiddenError):
    code = "EMAIL_NOT_VERIFIED"
    message = "Please verify your email to continue"


class NotFoundError(ApiError):
    status = 404
    code = "NOT_FOUND"
    message = "Not found"


class ConflictError(ApiError):
    status = 400
    code = "CONFLICT"
    message = "Conflict"


class BusinessRuleError(ApiError):
    status = 400


class InsufficientSharesError(BusinessRuleError):
    code = "INSUFFICIENT_SHARES"
    message = "Not enough shares available"


class SellerInsufficientError(BusinessRuleError):
    code = "SELLER_INSUFFICIENT"
    message = "Seller has insufficient shares"


class InsufficientOrderSharesError(BusinessRuleError):
    code = "INSUFFICIENT_ORDER_SHARES"
    message = "Not enough shares in sell order"


class OrderClosedError(BusinessRuleError):
    code = "ORDER_CLOSED"
    message = "Sell order is not open"


class NotRentListedError(BusinessRuleError):
    code = "NOT_RENT_LISTED"
    message = "Property is not available for rent"


class AlreadyAppliedError(BusinessRuleError):
    code = "ALREADY_APPLIED"
    message = "Application already exists"


class NotPendingError(BusinessRuleError):
    code = "NOT_PENDING"
    message = "Application is not pending"


class InvalidStateError(BusinessRuleError):
    code = "INVALID_STATE"
    message = "Invalid state"


class InvalidTokenError(BusinessRuleError):
    # Email verification token; bearer token failures use the JWT loaders
    code = "INVALID_TOKEN"
    message = "Invalid or expired token"


class InternalError(ApiError):
    pass
