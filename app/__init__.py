from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import os
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from app.extensions import db, migrate, jwt
from app.error_handlers import register_error_handlers, register_jwt_handlers
from datetime import timedelta
import logging

# Load environment variables
load_dotenv()


def create_app(test_config=None):
    app = Flask(__name__)

    app.config["TESTING"] = os.getenv("FLASK_ENV") in ["development", "testing"]

    # Configure database
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
        "DATABASE_URL", "postgresql://localhost/youth_events"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    # Identity tokens are issued by the external identity provider; the
    # subject claim carries the caller's external identity reference.
    app.config["JWT_SECRET_KEY"] = os.getenv("JWT_SECRET_KEY", "your-secret-key")
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(days=1)
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]
    app.config["JWT_HEADER_NAME"] = "Authorization"
    app.config["JWT_HEADER_TYPE"] = "Bearer"

    app.config["RATELIMIT_ENABLED"] = os.getenv("RATELIMIT_ENABLED", "true").lower() in ["true", "1", "t"]
    app.config["RATELIMIT_DEFAULT"] = os.getenv(
        "RATELIMIT_DEFAULT", "150 per minute, 10000 per hour, 100000 per day"
    )
    app.config["LIMITER_STORAGE_URL"] = os.getenv("LIMITER_STORAGE_URL", "memory://")
    app.config["SEED_TEAM_ROLES"] = os.getenv("SEED_TEAM_ROLES", "true").lower() in ["true", "1", "t"]
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")

    if test_config:
        app.config.update(test_config)

    # Configure logging
    log_level = getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO)
    logging.basicConfig(level=log_level)
    app.logger.setLevel(log_level)

    # Implement rate limiting using flask-limiter
    Limiter(
        get_remote_address,
        app=app,
        default_limits=[app.config["RATELIMIT_DEFAULT"]],
        storage_uri=app.config["LIMITER_STORAGE_URL"],
        strategy="fixed-window",
    )

    # Initialize Flask extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # Register models with the metadata before migrations or create_all run
    from app import models  # noqa: F401

    # Register blueprints
    from app.routes.participant_routes import participant_bp
    from app.routes.event_routes import event_bp
    from app.routes.volunteer_routes import volunteer_bp
    from app.routes.child_routes import child_bp
    from app.routes.user_routes import user_bp
    from app.routes.admin_routes import admin_bp

    app.register_blueprint(participant_bp, url_prefix="/api/participants")
    app.register_blueprint(volunteer_bp, url_prefix="/api/volunteers")
    app.register_blueprint(child_bp, url_prefix="/api/children")
    app.register_blueprint(user_bp, url_prefix="/api/user")
    app.register_blueprint(event_bp, url_prefix="/api")
    app.register_blueprint(admin_bp, url_prefix="/api")

    register_error_handlers(app)
    register_jwt_handlers(app)

    # Set up CORS
    cors_origins = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    ).split(",")
    app.logger.info(f"Initializing CORS with origins: {cors_origins}")

    CORS(
        app,
        resources={
            r"/api/*": {"origins": cors_origins},
        },
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        expose_headers=["Content-Type"],
    )

    return app
