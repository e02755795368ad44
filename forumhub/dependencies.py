from fastapi import Request

from forumhub.domain.topic_store import TopicStore

def get_topic_store(request: Request) -> TopicStore:
    store = getattr(request.app.state, "topic_store", None)
    if store is None:
        raise RuntimeError("Topic store not initialized")
    return store
