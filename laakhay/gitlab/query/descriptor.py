"""Query descriptor base and per-field encoding metadata.

Architecture:
    A query descriptor is a pydantic model whose fields are all optional and
    default to ``None`` (unset). How each field reaches the query string is
    declared next to the field as ``Annotated`` metadata (``QueryParam``), so
    one shared encoder serves every endpoint:

        class ReleasesQuery(QueryDescriptor):
            order_by: Annotated[ReleaseOrderBy | None, QueryParam()] = None
            tags: Annotated[list[str] | None, QueryParam(style=ListStyle.JOIN)] = None

Design Decisions:
    - ``None`` is the only "unset" marker; ``False``, ``0`` and ``""`` are set
      values and are encoded
    - validate_assignment: mutation callbacks are validated field by field,
      so bad values are rejected before encoding
    - extra="forbid": typos in field names fail loudly instead of being
      silently dropped from the query
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..core.exceptions import EncodingError

_Q = TypeVar("_Q", bound="QueryDescriptor")


class ListStyle(str, Enum):
    """How a list-valued field is written to the query string."""

    REPEAT = "repeat"  # key=a&key=b
    JOIN = "join"  # key=a,b


class DateFormat(str, Enum):
    """Wire format for date/time fields."""

    DATE = "date"  # 2024-01-31
    DATETIME = "datetime"  # 2024-01-31T12:00:00Z


@dataclass(frozen=True)
class QueryParam:
    """Encoding rules for one descriptor field.

    Attributes:
        key: Wire key (defaults to the field name)
        style: List encoding strategy
        delimiter: Separator used by ListStyle.JOIN
        bool_tokens: (true, false) wire tokens
        date_format: Wire format for date/datetime values
    """

    key: str | None = None
    style: ListStyle = ListStyle.REPEAT
    delimiter: str = ","
    bool_tokens: tuple[str, str] = ("true", "false")
    date_format: DateFormat = DateFormat.DATETIME

    def __post_init__(self) -> None:
        if self.key == "":
            raise ValueError("QueryParam key cannot be empty")
        if not self.delimiter:
            raise ValueError("QueryParam delimiter cannot be empty")


_DEFAULT_PARAM = QueryParam()


class QueryDescriptor(BaseModel):
    """Base class for per-endpoint listing filters."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    @classmethod
    def query_params(cls) -> list[tuple[str, QueryParam]]:
        """Field names with their encoding rules, in declaration order."""
        out: list[tuple[str, QueryParam]] = []
        for name, info in cls.model_fields.items():
            param = next((m for m in info.metadata if isinstance(m, QueryParam)), _DEFAULT_PARAM)
            out.append((name, param))
        return out

    def is_empty(self) -> bool:
        """True when no field is set."""
        return all(getattr(self, name) is None for name in type(self).model_fields)

    def encode(self) -> tuple[tuple[str, str], ...]:
        """Encode this descriptor; see ``encode_query``."""
        from .encoder import encode_query

        return encode_query(self)


def build_query(
    cls: type[_Q],
    query: _Q | None = None,
    configure: Callable[[_Q], Any] | None = None,
) -> _Q:
    """Produce a populated descriptor for a single call.

    Starts from ``query`` (copied, never mutated) or an empty descriptor and
    applies the ``configure`` callback to it.

    Args:
        cls: Descriptor type expected by the endpoint
        query: Optional pre-built descriptor
        configure: Optional mutation callback, e.g. ``lambda q: setattr(q, "search", "bug")``

    Returns:
        Descriptor ready for encoding

    Raises:
        EncodingError: If the callback assigns an invalid value
        TypeError: If ``query`` is not an instance of ``cls``
    """
    if query is None:
        descriptor = cls()
    elif isinstance(query, cls):
        descriptor = query.model_copy(deep=True)
    else:
        raise TypeError(f"expected {cls.__name__}, got {type(query).__name__}")

    if configure is not None:
        try:
            configure(descriptor)
        except ValidationError as e:
            errors = e.errors()
            field = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else None
            raise EncodingError(f"Invalid {cls.__name__} value: {e}", field=field) from e
        except ValueError as e:
            # assignment to an undeclared field
            raise EncodingError(f"Invalid {cls.__name__} value: {e}") from e
    return descriptor
