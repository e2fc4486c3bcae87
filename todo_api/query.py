"""
Query builder for task listings.

Turns raw query-string values into the filter, sort order and page window
used by the listing endpoint. Malformed values never raise: they fall back
to defaults so that a bad query string still yields a well-formed page.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from uuid import UUID
from . import config

DEFAULT_SORT = "-createdAt"

INT_PREFIX = re.compile(r"\s*[+-]?\d+")

# Public sort keys -> Task attributes. snake_case spellings are accepted too.
SORT_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "dueDate": "due_date",
    "title": "title",
    "priority": "priority",
    "completed": "completed",
}
SORT_FIELDS.update({attr: attr for attr in list(SORT_FIELDS.values())})


@dataclass(frozen=True)
class SortSpec:
    field: Optional[str]  # Task attribute, or None when the key is unknown
    descending: bool


@dataclass(frozen=True)
class TaskQuery:
    filters: Dict[str, Any]
    sort: SortSpec
    limit: int
    skip: int


def parse_sort(raw: Optional[str]) -> SortSpec:
    """``-createdAt`` sorts newest first, ``createdAt`` oldest first"""
    value = (raw or "").strip() or DEFAULT_SORT
    descending = value.startswith("-")
    name = value[1:] if descending else value
    return SortSpec(field=SORT_FIELDS.get(name), descending=descending)


def parse_int(raw: Optional[str], default: int) -> int:
    """Leading integer of ``raw`` (``"2abc"`` and ``"2.0"`` give 2), else ``default``"""
    if raw is None:
        return default
    match = INT_PREFIX.match(str(raw))
    if match is None:
        return default
    return int(match.group())


def build_task_query(
    owner_id: UUID,
    params: Mapping[str, Optional[str]],
    default_limit: Optional[int] = None,
    max_limit: Optional[int] = None,
) -> TaskQuery:
    """Build the listing query for ``owner_id`` from raw query parameters"""
    default_limit = config.DEFAULT_PAGE_LIMIT if default_limit is None else default_limit
    max_limit = config.MAX_PAGE_LIMIT if max_limit is None else max_limit

    filters: Dict[str, Any] = {"owner_id": owner_id}

    completed = params.get("completed")
    if completed is not None:
        filters["completed"] = completed == "true"

    # Unknown priorities are passed through and simply match nothing
    priority = params.get("priority")
    if priority:
        filters["priority"] = priority

    limit = parse_int(params.get("limit"), default_limit)
    limit = min(max(limit, 1), max_limit)
    skip = max(parse_int(params.get("skip"), 0), 0)

    return TaskQuery(filters=filters, sort=parse_sort(params.get("sort")), limit=limit, skip=skip)
