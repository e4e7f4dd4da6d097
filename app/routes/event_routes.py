from flask import Blueprint, jsonify, request
from app.projections import event_to_dict
from app.routes import request_identity
from app.services import EventService

event_bp = Blueprint("event", __name__)


@event_bp.route("/events", methods=["GET"])
def get_all_events():
    events = EventService.get_events()
    return jsonify([event_to_dict(event) for event in events]), 200


@event_bp.route("/events/<int:event_id>", methods=["GET"])
def get_event(event_id):
    event = EventService.get_event(event_id)
    return jsonify(event_to_dict(event)), 200


@event_bp.route("/events", methods=["POST"])
def create_event():
    identity = request_identity()
    event = EventService.create_event(identity, request.get_json(silent=True))
    return jsonify(event_to_dict(event)), 201


@event_bp.route("/events/<int:event_id>", methods=["PUT"])
def update_event(event_id):
    identity = request_identity()
    event = EventService.update_event(identity, event_id, request.get_json(silent=True))
    return jsonify(event_to_dict(event)), 200


@event_bp.route("/events/<int:event_id>", methods=["DELETE"])
def delete_event(event_id):
    EventService.delete_event(request_identity(), event_id)
    return jsonify({"message": "Event deleted successfully"}), 200
