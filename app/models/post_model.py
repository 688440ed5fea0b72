import uuid
from dataclasses import dataclass, field

from app.models.comment_model import Comment
from app.models.timestamps import utc_now_iso


NEUTRAL = "neutral"
LIKED = "liked"
DISLIKED = "disliked"


def _as_list(value):
    return value if isinstance(value, list) else []


def _id_list(value):
    return [item for item in _as_list(value) if isinstance(item, str)]


@dataclass
class Post:
    user_id: str
    username: str
    content: str = ""
    image: str | None = None
    video: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(default_factory=utc_now_iso)
    # Membership lists keep insertion order; a user id appears at most once.
    liked_by: list = field(default_factory=list)
    disliked_by: list = field(default_factory=list)
    comments: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get("id"),
            user_id=data.get("userId"),
            username=data.get("username"),
            content=data.get("content") or "",
            image=data.get("image"),
            video=data.get("video"),
            timestamp=data.get("timestamp"),
            liked_by=_id_list(data.get("likedBy")),
            disliked_by=_id_list(data.get("dislikedBy")),
            comments=[
                Comment.from_dict(c)
                for c in _as_list(data.get("comments"))
                if isinstance(c, dict)
            ],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "username": self.username,
            "content": self.content,
            "image": self.image,
            "video": self.video,
            "timestamp": self.timestamp,
            "likedBy": list(self.liked_by),
            "dislikedBy": list(self.disliked_by),
            "comments": [c.to_dict() for c in self.comments],
        }

    def reaction_of(self, user_id):
        if user_id in self.liked_by:
            return LIKED
        if user_id in self.disliked_by:
            return DISLIKED
        return NEUTRAL
