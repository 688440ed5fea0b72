import logging

from app.errors import StateConflictError, ValidationError
from app.models.post_model import DISLIKED, LIKED, NEUTRAL
from app.repositories import post_repository


logger = logging.getLogger(__name__)


def reaction_state(post, user_id):
    return post.reaction_of(user_id)


def _require_user_id(user_id):
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError("userId is required")


def toggle_like(post_id, user_id):
    """
    neutral -> liked, liked -> neutral; rejected while disliked.

    Returns the resulting state.
    """
    _require_user_id(user_id)

    def apply(post):
        state = reaction_state(post, user_id)
        if state == DISLIKED:
            raise StateConflictError("Remove dislike first")
        if state == LIKED:
            post.liked_by.remove(user_id)
            return NEUTRAL
        post.liked_by.append(user_id)
        return LIKED

    state = post_repository.update_post(post_id, apply)
    logger.info("User %s like on post %s is now %s", user_id, post_id, state)
    return state


def toggle_dislike(post_id, user_id):
    """
    neutral -> disliked, disliked -> neutral; rejected while liked.

    Returns the resulting state.
    """
    _require_user_id(user_id)

    def apply(post):
        state = reaction_state(post, user_id)
        if state == LIKED:
            raise StateConflictError("Remove like first")
        if state == DISLIKED:
            post.disliked_by.remove(user_id)
            return NEUTRAL
        post.disliked_by.append(user_id)
        return DISLIKED

    state = post_repository.update_post(post_id, apply)
    logger.info("User %s dislike on post %s is now %s", user_id, post_id, state)
    return state
