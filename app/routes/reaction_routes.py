from flask import Blueprint, jsonify

from app.errors import ServiceError
from app.models.post_model import DISLIKED, LIKED
from app.routes.helpers import current_actor, error_response, load_body
from app.schemas.post_schema import ReactionSchema
from app.services import reaction_service


reaction_bp = Blueprint("reactions", __name__)

reaction_schema = ReactionSchema()


@reaction_bp.route("/posts/<post_id>/like", methods=["POST"])
def toggle_like(post_id):
    try:
        identity = current_actor(load_body(reaction_schema))
        state = reaction_service.toggle_like(post_id, identity.user_id)
        return jsonify({"message": "Like updated", "liked": state == LIKED}), 200
    except ServiceError as e:
        return error_response(e)


@reaction_bp.route("/posts/<post_id>/dislike", methods=["POST"])
def toggle_dislike(post_id):
    try:
        identity = current_actor(load_body(reaction_schema))
        state = reaction_service.toggle_dislike(post_id, identity.user_id)
        return jsonify({"message": "Dislike updated", "disliked": state == DISLIKED}), 200
    except ServiceError as e:
        return error_response(e)
