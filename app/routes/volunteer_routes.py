from flask import Blueprint, jsonify, request
from app.projections import volunteer_to_dict
from app.routes import request_identity
from app.services import VolunteerService

volunteer_bp = Blueprint("volunteer", __name__)


@volunteer_bp.route("", methods=["POST"])
def volunteer_for_event():
    identity = request_identity()
    volunteer = VolunteerService.sign_up(identity, request.get_json(silent=True))
    return jsonify(volunteer_to_dict(volunteer)), 200


@volunteer_bp.route("/me", methods=["GET"])
def get_my_volunteer_signups():
    return jsonify(VolunteerService.list_for_current_user(request_identity())), 200


@volunteer_bp.route("/event/<int:event_id>", methods=["GET"])
def get_event_volunteers(event_id):
    return jsonify(VolunteerService.list_for_event(request_identity(), event_id)), 200
