import uuid
from dataclasses import dataclass, field


@dataclass
class User:
    username: str
    password_hash: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get("id"),
            username=data.get("username"),
            password_hash=data.get("passwordHash"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "passwordHash": self.password_hash,
        }

    def to_public_dict(self):
        return {
            "id": self.id,
            "username": self.username,
        }


@dataclass(frozen=True)
class Identity:
    """The acting user, as resolved by the request boundary."""

    user_id: str
    username: str
