from flask import Flask, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from brickly.extensions import bcrypt, cors, db, jwt
from brickly.Init.commands import register_commands
from brickly.Services.AdminService import admin_bp
from brickly.Services.AuthenticationService import auth_bp
from brickly.Services.ImportService import imports_bp
from brickly.Services.InvestService import invest_bp
from brickly.Services.KycService import kyc_bp
from brickly.Services.ListingService import listings_bp
from brickly.Services.MarketService import market_bp
from brickly.Services.PortfolioService import portfolio_bp
from brickly.Services.PropertyService import properties_bp
from brickly.Services.RentalService import rentals_bp
from brickly.Utils.errors import ApiError, send_error

_HTTP_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _register_jwt_handlers():
    @jwt.unauthorized_loader
    def missing_token(reason):
        return send_error(401, "UNAUTHORIZED", "Missing token")

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return send_error(401, "INVALID_TOKEN", "Invalid token")

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return send_error(401, "INVALID_TOKEN", "Token expired")


def _register_error_handlers(app: Flask):
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return e.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        code = _HTTP_CODES.get(e.code, "HTTP_ERROR")
        return send_error(e.code, code, e.description or e.name)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.error(f"Unhandled error: {e}", exc_info=True)
        return send_error(500, "INTERNAL_ERROR", "Internal server error")


def _register_meta_routes(app: Flask):
    @app.route("/health", methods=["GET"])
    def health():
        try:
            db.session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            app.logger.error("Health check failed", exc_info=True)
            return send_error(500, "INTERNAL_ERROR", "Database unavailable")
        return jsonify({"ok": True, "db": True}), 200

    @app.route("/", methods=["GET"])
    def index():
        return "Fractional Property API", 200, {"Content-Type": "text/plain; charset=utf-8"}


def create_app(config_name: str = "DevelopmentConfig") -> Flask:

    config_module = __import__("brickly.config", fromlist=[config_name])
    config_class = getattr(config_module, config_name)

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    jwt.init_app(app)
    bcrypt.init_app(app)
    cors.init_app(
        app,
        origins=app.config["CORS_ORIGINS"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    _register_jwt_handlers()
    _register_error_handlers(app)
    _register_meta_routes(app)

    with app.app_context():
        # every model must be imported before create_all
        from brickly.Models import (  # noqa: F401
            Holdings,
            KycModel,
            ListingModel,
            MLSListingModel,
            PropertyModel,
            RentalApplicationModel,
            SellOrder,
            ShareClassModel,
            Trade,
            UserModel,
            VerificationTokenModel,
        )
        db.create_all()

    app.register_blueprint(auth_bp)
    app.register_blueprint(properties_bp)
    app.register_blueprint(listings_bp)
    app.register_blueprint(invest_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(market_bp)
    app.register_blueprint(kyc_bp)
    app.register_blueprint(rentals_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(imports_bp)

    register_commands(app)

    app.logger.info(f"Brickly API configured with {config_name}")
    return app
