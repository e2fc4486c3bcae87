from uuid import uuid4

from todo_api.query import SortSpec, build_task_query, parse_sort

OWNER = uuid4()


def test_defaults_scope_to_owner_newest_first() -> None:
    query = build_task_query(OWNER, {}, default_limit=10, max_limit=100)

    assert query.filters == {"owner_id": OWNER}
    assert query.sort == SortSpec(field="created_at", descending=True)
    assert query.limit == 10
    assert query.skip == 0


def test_completed_and_priority_filters() -> None:
    query = build_task_query(OWNER, {"completed": "true", "priority": "high"})
    assert query.filters == {"owner_id": OWNER, "completed": True, "priority": "high"}

    query = build_task_query(OWNER, {"completed": "false"})
    assert query.filters["completed"] is False

    # Anything other than "true" means not completed
    query = build_task_query(OWNER, {"completed": "yes"})
    assert query.filters["completed"] is False


def test_unknown_priority_is_passed_through() -> None:
    query = build_task_query(OWNER, {"priority": "urgent"})
    assert query.filters["priority"] == "urgent"


def test_empty_priority_is_ignored() -> None:
    query = build_task_query(OWNER, {"priority": ""})
    assert "priority" not in query.filters


def test_owner_cannot_be_overridden_by_params() -> None:
    query = build_task_query(OWNER, {"owner_id": str(uuid4()), "owner": str(uuid4())})
    assert query.filters == {"owner_id": OWNER}


def test_parse_sort_directions() -> None:
    assert parse_sort("title") == SortSpec(field="title", descending=False)
    assert parse_sort("-dueDate") == SortSpec(field="due_date", descending=True)
    assert parse_sort("updated_at") == SortSpec(field="updated_at", descending=False)
    assert parse_sort(None) == SortSpec(field="created_at", descending=True)
    assert parse_sort("  ") == SortSpec(field="created_at", descending=True)


def test_unknown_sort_field_degrades_to_natural_order() -> None:
    assert parse_sort("-password_hash") == SortSpec(field=None, descending=True)
    assert parse_sort("owner_id") == SortSpec(field=None, descending=False)


def test_limit_and_skip_parsing() -> None:
    query = build_task_query(OWNER, {"limit": "5", "skip": "15"}, default_limit=10, max_limit=100)
    assert (query.limit, query.skip) == (5, 15)


def test_malformed_limit_and_skip_fall_back_to_defaults() -> None:
    query = build_task_query(OWNER, {"limit": "ten", "skip": "abc"}, default_limit=10, max_limit=100)
    assert (query.limit, query.skip) == (10, 0)


def test_limit_and_skip_use_leading_integer() -> None:
    query = build_task_query(OWNER, {"limit": "2abc", "skip": " 3.9"}, default_limit=10, max_limit=100)
    assert (query.limit, query.skip) == (2, 3)
    assert build_task_query(OWNER, {"limit": "2.0"}, default_limit=10).limit == 2
    assert build_task_query(OWNER, {"limit": "+7"}, default_limit=10).limit == 7


def test_limit_is_clamped() -> None:
    assert build_task_query(OWNER, {"limit": "1000"}, max_limit=100).limit == 100
    assert build_task_query(OWNER, {"limit": "0"}, max_limit=100).limit == 1
    assert build_task_query(OWNER, {"limit": "-3"}, max_limit=100).limit == 1


def test_negative_skip_is_clamped_to_zero() -> None:
    assert build_task_query(OWNER, {"skip": "-20"}).skip == 0


def test_completed_match_is_exact() -> None:
    assert build_task_query(OWNER, {"completed": "TRUE"}).filters["completed"] is False
    assert build_task_query(OWNER, {"completed": " true"}).filters["completed"] is False
    assert build_task_query(OWNER, {"completed": "true"}).filters["completed"] is True
