from flask import Blueprint, jsonify

from app.errors import ServiceError
from app.routes.helpers import current_identity, error_response, load_body
from app.schemas.comment_schema import CommentCreateSchema, CommentResponseSchema
from app.services import comment_service


comment_bp = Blueprint("comments", __name__)

comment_create_schema = CommentCreateSchema()


@comment_bp.route("/posts/<post_id>/comments", methods=["POST"])
def create_comment(post_id):
    try:
        data = load_body(comment_create_schema)
        identity = current_identity(data)
        comment = comment_service.add_comment(post_id, identity, data["text"])
        return jsonify({
            "message": "Comment added",
            "comment": CommentResponseSchema().dump(comment),
        }), 201
    except ServiceError as e:
        return error_response(e)


@comment_bp.route("/posts/<post_id>/comments", methods=["GET"])
def list_comments(post_id):
    try:
        comments = comment_service.list_comments(post_id)
    except ServiceError as e:
        return error_response(e)

    return jsonify(CommentResponseSchema(many=True).dump(comments)), 200
