from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_TOPIC_STATUS = "UNANSWERED"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Topic:
    id: int
    title: str
    message: str
    author: str
    course: str
    status: str = DEFAULT_TOPIC_STATUS
    creation_timestamp: datetime = field(default_factory=_utcnow)
