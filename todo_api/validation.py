"""
Translation of request validation failures into field-level errors.

Each request model declares its field rules (length bounds, enums, types).
Pydantic runs every rule and accumulates all failures; this module turns
that accumulated list into the ``[{field, message}]`` shape returned to
clients, one entry per offending field, in declaration order.
"""

from typing import Any, Dict, List, Sequence

FIELD_MESSAGES: Dict[str, str] = {
    "id": "Invalid task ID",
    "title": "Title is required and must be between 1 and 100 characters",
    "description": "Description must be at most 500 characters",
    "completed": "Completed must be a boolean",
    "priority": "Priority must be low, medium, or high",
    "dueDate": "Due date must be a valid ISO-8601 date",
    "username": "Username must be 3-30 characters of letters, digits, '.', '_' or '-'",
    "email": "A valid email is required",
    "password": "Password must be at least 6 characters",
}

# Path parameter names that are reported under their public name
PARAM_ALIASES = {"task_id": "id"}


def field_name(loc: Sequence[Any]) -> str:
    """``("body", "dueDate")`` -> ``"dueDate"``; a bare ``("body",)`` -> ``"body"``"""
    if len(loc) < 2:
        return str(loc[0]) if loc else "request"
    name = str(loc[1])
    return PARAM_ALIASES.get(name, name)


def field_message(field: str, error: Dict[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        return "Request body must be valid JSON"
    if field == "body":
        return "Request body must be a JSON object"
    return FIELD_MESSAGES.get(field, error.get("msg", "Invalid value"))


def collect_field_errors(errors: Sequence[Dict[str, Any]]) -> List[dict]:
    """Collapse raw validation errors into one ``{field, message}`` entry per field"""
    collected: List[dict] = []
    seen = set()
    for error in errors:
        loc = tuple(error.get("loc") or ())
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = field_name(loc)
        if field in seen:
            continue
        seen.add(field)
        collected.append({"field": field, "message": field_message(field, error)})
    return collected
