import threading

import pytest

from forumhub.domain.topic_store import TopicNotFoundError
from forumhub.schemas.topic_schema import TopicUpdate


def _create(store, title="T"):
    return store.create(title=title, message="M", author="A", course="C")


def test_create_assigns_defaults(store):
    topic = _create(store)

    assert topic.id == 1
    assert topic.status == "UNANSWERED"
    assert topic.creation_timestamp is not None
    assert (topic.title, topic.message, topic.author, topic.course) == ("T", "M", "A", "C")


def test_ids_increase_and_are_not_reused_after_delete(store):
    first = _create(store)
    second = _create(store)
    store.delete(second.id)
    third = _create(store)

    assert [first.id, second.id, third.id] == [1, 2, 3]


def test_list_returns_summaries_in_insertion_order(store):
    _create(store, "first")
    _create(store, "second")

    summaries = store.list()

    assert [s.title for s in summaries] == ["first", "second"]
    assert set(summaries[0].model_dump()) == {"id", "title", "author", "course", "status"}


def test_list_empty(store):
    assert store.list() == []


def test_get_by_id_unknown_raises(store):
    with pytest.raises(TopicNotFoundError) as exc_info:
        store.get_by_id(42)
    assert exc_info.value.topic_id == 42


def test_update_status_only(store):
    created = _create(store)

    updated = store.update(created.id, TopicUpdate(status="RESOLVED"))

    assert updated.status == "RESOLVED"
    assert updated.title == "T"
    assert updated.message == "M"
    assert updated.creation_timestamp == created.creation_timestamp


def test_empty_update_is_noop(store):
    created = _create(store)

    updated = store.update(created.id, TopicUpdate())

    assert updated == created
    assert store.get_by_id(created.id) == created


def test_update_unknown_raises(store):
    with pytest.raises(TopicNotFoundError):
        store.update(7, TopicUpdate(title="x"))


def test_delete_then_get_and_second_delete_fail(store):
    created = _create(store)
    store.delete(created.id)

    with pytest.raises(TopicNotFoundError):
        store.get_by_id(created.id)
    with pytest.raises(TopicNotFoundError):
        store.delete(created.id)
    assert store.count() == 0


def test_returned_projection_is_detached_from_store(store):
    created = _create(store)
    created.title = "changed"

    assert store.get_by_id(created.id).title == "T"


def test_concurrent_creates_get_unique_ids(store):
    def worker():
        for _ in range(50):
            _create(store)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [s.id for s in store.list()]
    assert sorted(ids) == list(range(1, 401))
    assert len(set(ids)) == 400
