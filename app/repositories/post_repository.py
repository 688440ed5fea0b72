from app.errors import AuthorizationError, NotFoundError
from app.extensions.json_store import POSTS
from app.models.post_model import Post
from app.repositories.collection import editing, load_all


def get_posts():
    return load_all(POSTS, Post)


def get_by_id(post_id: str):
    for post in load_all(POSTS, Post):
        if post.id == post_id:
            return post
    return None


def add_post(post: Post):
    with editing(POSTS, Post) as posts:
        posts.append(post)
    return post


def delete_owned_post(post_id: str, user_id: str):
    with editing(POSTS, Post) as posts:
        for index, post in enumerate(posts):
            if post.id == post_id and post.user_id == user_id:
                del posts[index]
                break
        else:
            # Absent and not-owned are reported the same way.
            raise AuthorizationError("Not authorized to delete this post")


def delete_posts_by_owner(user_id: str) -> int:
    with editing(POSTS, Post) as posts:
        before = len(posts)
        posts[:] = [post for post in posts if post.user_id != user_id]
        removed = before - len(posts)
        if removed == 0:
            raise NotFoundError("No posts found for this user")
    return removed


def update_post(post_id: str, mutate):
    """
    Apply ``mutate(post)`` to one post and persist the collection.

    Errors raised by ``mutate`` abort the write.
    """
    with editing(POSTS, Post) as posts:
        for post in posts:
            if post.id == post_id:
                result = mutate(post)
                break
        else:
            raise NotFoundError("Post not found")
    return result
