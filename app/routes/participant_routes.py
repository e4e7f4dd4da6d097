from flask import Blueprint, jsonify, request, current_app
from app.projections import participant_to_dict
from app.routes import request_identity
from app.services import CancellationService, RegistrationService, RosterService

participant_bp = Blueprint("participant", __name__)


@participant_bp.route("/me", methods=["GET"])
def get_current_user_registrations():
    registrations = RosterService.list_for_current_user(request_identity())
    return jsonify(registrations), 200


@participant_bp.route("", methods=["POST"])
def register_for_event():
    identity = request_identity()
    data = request.get_json(silent=True) or {}
    participant = RegistrationService.register(identity, data)
    return jsonify(participant_to_dict(participant)), 200


@participant_bp.route("/<int:participant_id>", methods=["DELETE"])
def cancel_registration(participant_id):
    identity = request_identity()
    current_app.logger.info(f"Cancel registration request: participant_id={participant_id}")
    CancellationService.cancel(identity, participant_id)
    return jsonify({"message": "Registration cancelled successfully"}), 200


@participant_bp.route("/event/<int:event_id>", methods=["GET"])
def get_event_participants(event_id):
    participants = RosterService.list_for_event(request_identity(), event_id)
    return jsonify(participants), 200
