from app.extensions.json_store import USERS
from app.models.user_model import User
from app.repositories.collection import editing, load_all


def get_by_username(username: str):
    for user in load_all(USERS, User):
        if user.username == username:
            return user
    return None


def get_by_id(user_id: str):
    for user in load_all(USERS, User):
        if user.id == user_id:
            return user
    return None


def create_user(username, password_hash, exists_check=None):
    """
    Append a user to the collection.

    ``exists_check`` runs against the freshly loaded users while the
    collection lock is held, so a uniqueness check cannot race a concurrent
    registration.
    """
    with editing(USERS, User) as users:
        if exists_check is not None:
            exists_check(users)

        user = User(username=username, password_hash=password_hash)
        users.append(user)

    return user
