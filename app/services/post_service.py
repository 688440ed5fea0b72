import logging

from app.errors import NotFoundError, ValidationError
from app.models.post_model import Post
from app.repositories import post_repository


logger = logging.getLogger(__name__)


def _has_text(value):
    return isinstance(value, str) and value.strip()


def _optional_payload(value, field_name):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be an encoded string")
    return value if value.strip() else None


def _require_identity(identity):
    if identity is None or not _has_text(identity.user_id) or not _has_text(identity.username):
        raise ValidationError("userId and username are required")


def get_posts():
    return [post.to_dict() for post in post_repository.get_posts()]


def get_post(post_id):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post.to_dict()


def create_post(identity, content=None, image=None, video=None):
    _require_identity(identity)

    if content is not None and not isinstance(content, str):
        raise ValidationError("content must be a string")
    content = content or ""
    image = _optional_payload(image, "image")
    video = _optional_payload(video, "video")

    if not content.strip() and image is None and video is None:
        raise ValidationError("Post must have content, an image or a video")

    post = post_repository.add_post(
        Post(
            user_id=identity.user_id,
            username=identity.username,
            content=content,
            image=image,
            video=video,
        )
    )

    logger.info("User %s created post %s", identity.user_id, post.id)
    return post.to_dict()


def delete_post(post_id, identity):
    _require_identity(identity)

    post_repository.delete_owned_post(post_id, identity.user_id)
    logger.info("User %s deleted post %s", identity.user_id, post_id)


def clear_posts_by_owner(identity):
    _require_identity(identity)

    removed = post_repository.delete_posts_by_owner(identity.user_id)
    logger.info("User %s cleared %d post(s)", identity.user_id, removed)
    return removed
