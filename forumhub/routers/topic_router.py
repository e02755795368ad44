from typing import List
from fastapi import APIRouter, Depends, Request, Response, status

from forumhub.dependencies import get_topic_store
from forumhub.domain.topic_store import TopicStore
from forumhub.schemas.topic_schema import TopicCreate, TopicDetail, TopicSummary, TopicUpdate

router = APIRouter(
    tags=["Topic"],
    responses={404: {"description": "Topic not found"}}
)

@router.post(
    "",
    response_model=TopicDetail,
    status_code=status.HTTP_201_CREATED
)
def create_topic(
    topic_data: TopicCreate,
    request: Request,
    response: Response,
    store: TopicStore = Depends(get_topic_store)
):
    topic = store.create(
        title=topic_data.title,
        message=topic_data.message,
        author=topic_data.author,
        course=topic_data.course,
    )
    response.headers["Location"] = str(request.url_for("get_topic", topic_id=topic.id))
    return topic

@router.get("", response_model=List[TopicSummary])
def list_topics(store: TopicStore = Depends(get_topic_store)):
    return store.list()

@router.get("/{topic_id}", response_model=TopicDetail)
def get_topic(topic_id: int, store: TopicStore = Depends(get_topic_store)):
    return store.get_by_id(topic_id)

@router.put("/{topic_id}", response_model=TopicDetail)
def update_topic(
    topic_id: int,
    update_data: TopicUpdate,
    store: TopicStore = Depends(get_topic_store)
):
    return store.update(topic_id, update_data)

@router.delete(
    "/{topic_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response
)
def delete_topic(topic_id: int, store: TopicStore = Depends(get_topic_store)):
    store.delete(topic_id)
