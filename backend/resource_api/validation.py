"""
Resource API - Request Validation Layer
========================================

What:  Input-shape rules for path and query parameters, and translation of
       validation failures into field-level error descriptors.
How:   Path/query rules are declared here as annotated FastAPI parameters;
       body rules live in schemas/resource.py. FastAPI collects every
       violation of a request (path, query and body together) into one
       RequestValidationError, which `field_errors()` turns into the
       descriptor list the 400 response carries.
When:  Before any route handler runs, so a rejected request never reaches
       the service or the store.

Rules:
    get/update/delete   id (path)      integer in [0, 2^31 - 1]
    list                name (query)   string, optional substring filter
    list                page (query)   integer >= 1, default 1
    list                limit (query)  integer in [1, 100], default 10
"""

from dataclasses import dataclass
from typing import Annotated, Any, Dict, Iterable, List, Mapping, Optional, TypedDict

from fastapi import Path, Query

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# Largest value the INTEGER primary key column holds
MAX_ID = 2**31 - 1

_LOCATIONS = {"path", "query", "body", "header", "cookie"}


class FieldError(TypedDict):
    location: str
    field: str
    message: str
    type: str


# ── Path parameters ───────────────────────────────────────────────────────

ResourceId = Annotated[
    int,
    Path(ge=0, le=MAX_ID, description="Identifier of the resource (integer in [0, 2^31-1])"),
]


# ── Query parameters ──────────────────────────────────────────────────────

@dataclass
class ListResourcesQuery:
    """Validated query string of GET /resources, used as a FastAPI dependency."""

    name: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_request(
        cls,
        name: Annotated[
            Optional[str],
            Query(description="Return only resources whose name contains this value"),
        ] = None,
        page: Annotated[
            int, Query(ge=1, description="Page number, starting at 1")
        ] = DEFAULT_PAGE,
        limit: Annotated[
            int, Query(ge=1, le=MAX_LIMIT, description="Page size (1-100)")
        ] = DEFAULT_LIMIT,
    ) -> "ListResourcesQuery":
        return cls(name=name, page=page, limit=limit)


# ── Error translation ─────────────────────────────────────────────────────

def field_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """
    Convert pydantic/FastAPI error dicts into field error descriptors.

    A pydantic `loc` such as ("body", "value3") becomes
    {"location": "body", "field": "value3"}. Errors raised by a body model
    validated outside a request have no location prefix and are reported
    under "body".

    Example:
        >>> field_errors([{"loc": ("path", "id"), "msg": "bad", "type": "int_parsing"}])
        [{'location': 'path', 'field': 'id', 'message': 'bad', 'type': 'int_parsing'}]
    """
    descriptors: List[FieldError] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATIONS:
            location, rest = loc[0], loc[1:]
        else:
            location, rest = "body", loc
        descriptors.append(
            FieldError(
                location=location,
                field=".".join(rest) if rest else location,
                message=str(error.get("msg", "Invalid value")),
                type=str(error.get("type", "value_error")),
            )
        )
    return descriptors


def describe(errors: List[FieldError]) -> Dict[str, Any]:
    """Compact mapping of field name to message, for log lines."""
    return {f"{e['location']}.{e['field']}": e["message"] for e in errors}
