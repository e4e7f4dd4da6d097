from flask import jsonify
from werkzeug.exceptions import HTTPException
from app.extensions import db, jwt
from app.exceptions import ApiError, UnauthenticatedError


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.is_fault:
            app.logger.error(f"Request failed: {error.message}", exc_info=error)
        else:
            app.logger.info(f"Request rejected ({error.reason}): {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return (
            jsonify({"message": f"Error: {error.description}", "reason": error.name.lower().replace(" ", "_")}),
            error.code,
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        app.logger.error(f"Unhandled exception: {str(error)}", exc_info=error)
        return jsonify({"message": "Error: An unexpected error occurred", "reason": "internal_error"}), 500


def register_jwt_handlers(app):
    """Answer every token failure with the API's 401 error body."""

    def unauthenticated(detail):
        app.logger.info(f"Rejected bearer token: {detail}")
        return jsonify(UnauthenticatedError().to_dict()), 401

    @jwt.invalid_token_loader
    def invalid_token(error_string):
        return unauthenticated(error_string)

    @jwt.unauthorized_loader
    def missing_token(error_string):
        return unauthenticated(error_string)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return unauthenticated("token has expired")
