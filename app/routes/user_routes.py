from flask import Blueprint, request, jsonify
from app.projections import user_to_dict
from app.routes import request_identity
from app.services import IdentityService, UserService

user_bp = Blueprint("user", __name__)


@user_bp.route("/sync", methods=["POST"])
def sync_user():
    """Create the local user record on first sign-in, or refresh its profile."""
    identity = request_identity()
    user, created = IdentityService.sync(identity, request.get_json(silent=True))
    return jsonify(user_to_dict(user)), 201 if created else 200


@user_bp.route("/me", methods=["GET"])
def get_current_user():
    user = UserService.me(request_identity())
    return jsonify(user_to_dict(user)), 200
