from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

from forumhub.models.topic import Topic


class TopicCreate(BaseModel):
    title: str
    message: str
    author: str
    course: str


class TopicUpdate(BaseModel):
    title: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None


class TopicSummary(BaseModel):
    id: int
    title: str
    author: str
    course: str
    status: str

    @classmethod
    def from_topic(cls, topic: Topic) -> "TopicSummary":
        return cls(
            id=topic.id,
            title=topic.title,
            author=topic.author,
            course=topic.course,
            status=topic.status,
        )


class TopicDetail(BaseModel):
    id: int
    title: str
    message: str
    creation_timestamp: datetime = Field(alias="creationTimestamp")
    status: str
    author: str
    course: str

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_topic(cls, topic: Topic) -> "TopicDetail":
        return cls(
            id=topic.id,
            title=topic.title,
            message=topic.message,
            creation_timestamp=topic.creation_timestamp,
            status=topic.status,
            author=topic.author,
            course=topic.course,
        )
