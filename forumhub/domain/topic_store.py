import itertools
import logging
import threading
from typing import List

from forumhub.models.topic import Topic
from forumhub.schemas.topic_schema import TopicDetail, TopicSummary, TopicUpdate

logger = logging.getLogger(__name__)


class TopicNotFoundError(RuntimeError):
    def __init__(self, topic_id: int):
        super().__init__(f"Topic {topic_id} not found")
        self.topic_id = topic_id


class TopicStore:
    """In-memory topic collection.

    Ids come from a counter that is never rewound, so an id is not reused
    after its topic is deleted. Every operation holds the same lock, and
    callers only ever receive projections, never the stored ``Topic``.
    """

    def __init__(self):
        self._topics: List[Topic] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _find(self, topic_id: int) -> Topic:
        for topic in self._topics:
            if topic.id == topic_id:
                return topic
        raise TopicNotFoundError(topic_id)

    def create(self, title: str, message: str, author: str, course: str) -> TopicDetail:
        with self._lock:
            topic = Topic(
                id=next(self._ids),
                title=title,
                message=message,
                author=author,
                course=course,
            )
            self._topics.append(topic)
            logger.info(f"Topic created: {topic.title} (id={topic.id})")
            return TopicDetail.from_topic(topic)

    def list(self) -> List[TopicSummary]:
        with self._lock:
            return [TopicSummary.from_topic(topic) for topic in self._topics]

    def get_by_id(self, topic_id: int) -> TopicDetail:
        with self._lock:
            return TopicDetail.from_topic(self._find(topic_id))

    def update(self, topic_id: int, update_data: TopicUpdate) -> TopicDetail:
        with self._lock:
            topic = self._find(topic_id)

            if update_data.title is not None:
                topic.title = update_data.title
            if update_data.message is not None:
                topic.message = update_data.message
            if update_data.status is not None:
                topic.status = update_data.status

            logger.info(f"Topic {topic_id} updated")
            return TopicDetail.from_topic(topic)

    def delete(self, topic_id: int) -> None:
        with self._lock:
            topic = self._find(topic_id)
            self._topics.remove(topic)
            logger.info(f"Topic {topic_id} deleted")

    def count(self) -> int:
        with self._lock:
            return len(self._topics)
