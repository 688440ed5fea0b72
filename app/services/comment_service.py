import logging

from app.errors import NotFoundError, ValidationError
from app.models.comment_model import Comment
from app.repositories import post_repository


logger = logging.getLogger(__name__)


def _has_text(value):
    return isinstance(value, str) and value.strip()


def add_comment(post_id, identity, text):
    if identity is None or not _has_text(identity.user_id) or not _has_text(identity.username):
        raise ValidationError("userId and username are required")
    if not _has_text(text):
        raise ValidationError("Comment text is required")

    comment = Comment(
        user_id=identity.user_id,
        user=identity.username,
        text=text.strip(),
    )

    def append(post):
        post.comments.append(comment)
        return comment

    post_repository.update_post(post_id, append)
    logger.info("User %s commented on post %s", identity.user_id, post_id)
    return comment


def list_comments(post_id):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post.comments
