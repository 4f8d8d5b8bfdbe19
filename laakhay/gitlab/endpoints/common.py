"""Shared helpers for GitLab endpoint definitions."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from laakhay.gitlab.core import MalformedResponseError
from laakhay.gitlab.runtime.pagination import HeaderPagination
from laakhay.gitlab.runtime.rest import ResponseAdapter

# All resource listings here use GitLab offset pagination
OFFSET_PAGINATION = HeaderPagination()


def encode_path_segment(value: int | str) -> str:
    """Encode an id or path for use as one URL segment.

    Examples:
        >>> encode_path_segment("group/sub/project")
        'group%2Fsub%2Fproject'
        >>> encode_path_segment(42)
        '42'
    """
    return quote(str(value), safe="")


def project_path(params: dict[str, Any]) -> str:
    return f"/projects/{encode_path_segment(params['project_id'])}"


def encode_descriptor(params: dict[str, Any]) -> tuple[tuple[str, str], ...]:
    """Build query for endpoints whose params carry a ``query`` descriptor."""
    query = params.get("query")
    return query.encode() if query is not None else ()


def request_body(params: dict[str, Any]) -> dict[str, Any]:
    return params["request"].to_body()


class ModelAdapter(ResponseAdapter):
    """Parse a single JSON object into a pydantic model."""

    def __init__(self, model: type[BaseModel]) -> None:
        self._model = model

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        if not isinstance(response, dict):
            raise MalformedResponseError(
                f"Expected a {self._model.__name__} object, got {type(response).__name__}"
            )
        try:
            return self._model.model_validate(response)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid {self._model.__name__} payload: {e}") from e


class ModelListAdapter(ModelAdapter):
    """Parse a JSON list into pydantic models, preserving order."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[Any]:
        if response is None:
            return []
        if not isinstance(response, list):
            raise MalformedResponseError(
                f"Expected a list of {self._model.__name__}, got {type(response).__name__}"
            )
        return [super(ModelListAdapter, self).parse(row, params) for row in response]


class EmptyAdapter(ResponseAdapter):
    """For endpoints answering 204 No Content."""

    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
