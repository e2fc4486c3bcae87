from todo_api.validation import FIELD_MESSAGES, collect_field_errors


def test_one_entry_per_field_in_order() -> None:
    errors = [
        {"loc": ("body", "title"), "type": "string_too_short", "msg": "too short"},
        {"loc": ("body", "priority"), "type": "literal_error", "msg": "bad literal"},
        {"loc": ("body", "title"), "type": "string_type", "msg": "not a string"},
    ]

    assert collect_field_errors(errors) == [
        {"field": "title", "message": FIELD_MESSAGES["title"]},
        {"field": "priority", "message": FIELD_MESSAGES["priority"]},
    ]


def test_task_id_path_param_reported_as_id() -> None:
    errors = [{"loc": ("path", "task_id"), "type": "uuid_parsing", "msg": "bad uuid"}]
    assert collect_field_errors(errors) == [{"field": "id", "message": "Invalid task ID"}]


def test_unknown_field_keeps_framework_message() -> None:
    errors = [{"loc": ("query", "page"), "type": "int_parsing", "msg": "Input should be a valid integer"}]
    assert collect_field_errors(errors) == [{"field": "page", "message": "Input should be a valid integer"}]


def test_missing_and_malformed_body() -> None:
    assert collect_field_errors([{"loc": ("body",), "type": "missing", "msg": "Field required"}]) == [
        {"field": "body", "message": "Request body must be a JSON object"}
    ]
    assert collect_field_errors([{"loc": ("body", 1), "type": "json_invalid", "msg": "JSON decode error"}]) == [
        {"field": "body", "message": "Request body must be valid JSON"}
    ]
