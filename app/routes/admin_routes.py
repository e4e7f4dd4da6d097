from flask import Blueprint, jsonify, request
from app.projections import user_to_dict
from app.routes import request_identity
from app.services import EventService, UserService

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/admin/check", methods=["GET"])
def check_admin():
    """Check if current user is an admin"""
    is_admin = UserService.is_admin(request_identity())
    return jsonify({"isAdmin": is_admin}), 200 if is_admin else 403


@admin_bp.route("/admin/users", methods=["GET"])
def get_all_users():
    """Get all users (admin only)"""
    users = UserService.get_users(request_identity())
    return jsonify([user_to_dict(user) for user in users]), 200


@admin_bp.route("/admin/users/<int:user_id>/type", methods=["PUT"])
def update_user_type(user_id):
    """Promote or demote a user (admin only)"""
    user = UserService.set_user_type(request_identity(), user_id, request.get_json(silent=True))
    return jsonify(user_to_dict(user)), 200


@admin_bp.route("/admin/users/<int:user_id>/roles", methods=["PUT"])
def update_user_roles(user_id):
    """Replace a user's team roles (admin only)"""
    user = UserService.set_user_roles(request_identity(), user_id, request.get_json(silent=True))
    return jsonify(user_to_dict(user)), 200


@admin_bp.route("/admin/events/stats", methods=["GET"])
def get_event_stats():
    """Registration and volunteer totals per event (admin only)"""
    return jsonify(EventService.event_stats(request_identity())), 200
