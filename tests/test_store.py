from datetime import datetime, UTC

from taskzen.store import DocumentStore


def _insert(store: DocumentStore, email="a@x.com", category="todo", order=0, **attributes):
    fields = {"email": email, "category": category, "order": order, "timestamp": datetime.now(UTC)}
    return store.insert_task(fields, attributes)


def test_insert_and_find_user(store):
    assert store.find_user_by_email("a@x.com") is None
    user_id = store.insert_user("a@x.com", {"name": "Ada"})
    user = store.find_user_by_email("a@x.com")
    assert user == {"_id": user_id, "email": "a@x.com", "name": "Ada"}


def test_find_tasks_filters_by_owner_and_sorts_by_order(store):
    _insert(store, order=2, title="c")
    _insert(store, order=0, title="a")
    _insert(store, email="b@x.com", order=1, title="other")
    _insert(store, order=1, title="b")

    docs = store.find_tasks_by_email("a@x.com")
    assert [d["title"] for d in docs] == ["a", "b", "c"]
    assert all(d["email"] == "a@x.com" for d in docs)
    assert all(isinstance(d["_id"], str) for d in docs)


def test_update_task_counts_matches_and_modifications(store):
    task_id = _insert(store, category="todo")

    result = store.update_task(task_id, {"category": "todo"})
    assert (result.matched_count, result.modified_count) == (1, 0)

    result = store.update_task(task_id, {"category": "done"})
    assert (result.matched_count, result.modified_count) == (1, 1)
    assert store.find_task(task_id)["category"] == "done"


def test_update_task_with_email_only_matches_owner(store):
    task_id = _insert(store, email="a@x.com", order=3)

    result = store.update_task(task_id, {"order": 9}, email="b@x.com")
    assert result.matched_count == 0
    assert store.find_task(task_id)["order"] == 3


def test_delete_task(store):
    task_id = _insert(store)
    assert store.delete_task(task_id) == 1
    assert store.find_task(task_id) is None
    assert store.delete_task(task_id) == 0


def test_missing_fields_are_left_out_of_document(store):
    task_id = store.insert_task(
        {"email": "a@x.com", "category": None, "order": None, "timestamp": datetime.now(UTC)},
        {"title": "loose"},
    )
    doc = store.find_task(task_id)
    assert "category" not in doc and "order" not in doc
    assert doc["title"] == "loose"


def test_timestamp_is_serialized_as_utc(store):
    task_id = _insert(store)
    assert store.find_task(task_id)["timestamp"].endswith("+00:00")
