from flask import Blueprint, jsonify

from app.errors import AuthorizationError, NotFoundError, ServiceError
from app.routes.helpers import current_actor, current_identity, error_response, load_body
from app.schemas.base_schema import IdentityFieldsSchema
from app.schemas.post_schema import CreatePostSchema
from app.services import post_service


post_bp = Blueprint("posts", __name__)

create_post_schema = CreatePostSchema()
identity_schema = IdentityFieldsSchema()


@post_bp.route("/posts", methods=["GET"])
def list_posts():
    return jsonify(post_service.get_posts()), 200


@post_bp.route("/posts/<post_id>", methods=["GET"])
def get_post(post_id):
    try:
        return jsonify(post_service.get_post(post_id)), 200
    except ServiceError as e:
        return error_response(e)


@post_bp.route("/posts", methods=["POST"])
def create_post():
    try:
        data = load_body(create_post_schema)
        identity = current_identity(data)
        post = post_service.create_post(
            identity,
            content=data["content"],
            image=data["image"],
            video=data["video"],
        )
        return jsonify(post), 201
    except ServiceError as e:
        return error_response(e)


@post_bp.route("/posts/<post_id>", methods=["DELETE"])
def delete_post(post_id):
    try:
        identity = current_actor(
            load_body(identity_schema),
            unknown_error=AuthorizationError("Not authorized to delete this post"),
        )
        post_service.delete_post(post_id, identity)
        return jsonify({"message": "Post deleted"}), 200
    except ServiceError as e:
        return error_response(e)


@post_bp.route("/posts", methods=["DELETE"])
def clear_my_posts():
    try:
        identity = current_actor(
            load_body(identity_schema),
            unknown_error=NotFoundError("No posts found for this user"),
        )
        removed = post_service.clear_posts_by_owner(identity)
        return jsonify({"message": "Your posts were deleted", "deleted": removed}), 200
    except ServiceError as e:
        return error_response(e)
