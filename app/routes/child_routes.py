from flask import Blueprint, jsonify, request
from app.projections import child_to_dict
from app.routes import request_identity
from app.services import ChildService

child_bp = Blueprint("child", __name__)


@child_bp.route("", methods=["GET"])
def get_my_children():
    return jsonify(ChildService.list_for_current_user(request_identity())), 200


@child_bp.route("", methods=["POST"])
def add_child():
    identity = request_identity()
    child = ChildService.add_child(identity, request.get_json(silent=True))
    return jsonify(child_to_dict(child)), 201


@child_bp.route("/<int:child_id>", methods=["PUT"])
def update_child(child_id):
    identity = request_identity()
    child = ChildService.update_child(identity, child_id, request.get_json(silent=True))
    return jsonify(child_to_dict(child)), 200


@child_bp.route("/<int:child_id>", methods=["DELETE"])
def remove_child(child_id):
    ChildService.remove_child(request_identity(), child_id)
    return jsonify({"message": "Child removed successfully"}), 200
