import uuid
from dataclasses import dataclass, field

from app.models.timestamps import utc_now_iso


@dataclass
class Comment:
    user_id: str
    user: str
    text: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(default_factory=utc_now_iso)

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get("id"),
            user_id=data.get("userId"),
            user=data.get("user"),
            text=data.get("text"),
            timestamp=data.get("timestamp"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "user": self.user,
            "text": self.text,
            "timestamp": self.timestamp,
        }
