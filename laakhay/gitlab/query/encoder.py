"""Query encoder: descriptor -> ordered key/value pairs -> query string."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from ..core.enums import WireEnum
from ..core.exceptions import EncodingError
from .descriptor import DateFormat, ListStyle, QueryDescriptor, QueryParam

EncodedQuery = tuple[tuple[str, str], ...]


def encode_query(descriptor: QueryDescriptor) -> EncodedQuery:
    """Encode a descriptor into ordered (key, value) pairs.

    Fields are emitted in declaration order. Unset fields emit nothing;
    list fields emit one pair per element (REPEAT) or a single joined pair
    (JOIN).

    Raises:
        EncodingError: If a value has no wire representation
    """
    pairs: list[tuple[str, str]] = []
    for name, param in type(descriptor).query_params():
        value = getattr(descriptor, name)
        if value is None:
            continue
        key = param.key or name
        if isinstance(value, list | tuple):
            items = [_encode_scalar(name, item, param) for item in value]
            if param.style is ListStyle.JOIN:
                pairs.append((key, param.delimiter.join(items)))
            else:
                pairs.extend((key, item) for item in items)
        else:
            pairs.append((key, _encode_scalar(name, value, param)))
    return tuple(pairs)


def to_query_string(pairs: EncodedQuery) -> str:
    """Percent-encode pairs into a query string, preserving order and repeats.

    Examples:
        >>> to_query_string((("labels", "bug,ui"), ("search", "a b")))
        'labels=bug%2Cui&search=a%20b'
    """
    return urlencode(list(pairs), quote_via=quote, safe="")


def _encode_scalar(field: str, value: Any, param: QueryParam) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return param.bool_tokens[0] if value else param.bool_tokens[1]
    if isinstance(value, WireEnum):
        return value.to_wire()
    if isinstance(value, Enum):
        raise EncodingError(
            f"{field}: {type(value).__name__} has no wire mapping", field=field
        )
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"{field}: {value!r} is not representable", field=field)
        return repr(value)
    if isinstance(value, datetime):
        return _encode_datetime(value, param.date_format)
    if isinstance(value, date):
        return _encode_datetime(datetime.combine(value, time.min, tzinfo=UTC), param.date_format)
    raise EncodingError(
        f"{field}: unsupported value type {type(value).__name__}", field=field
    )


def _encode_datetime(value: datetime, fmt: DateFormat) -> str:
    if fmt is DateFormat.DATE:
        return value.date().isoformat()
    # naive datetimes are taken as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
