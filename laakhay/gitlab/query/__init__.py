"""Typed query descriptors and the shared query encoder.

Architecture:
    - descriptor.py: QueryDescriptor base, QueryParam per-field rules, build_query
    - encoder.py: encode_query (descriptor -> pairs), to_query_string (pairs -> str)

Endpoint modules declare their own descriptor subclasses; nothing here knows
about individual GitLab resources.
"""

from __future__ import annotations

from .descriptor import DateFormat, ListStyle, QueryDescriptor, QueryParam, build_query
from .encoder import EncodedQuery, encode_query, to_query_string

__all__ = [
    "QueryDescriptor",
    "QueryParam",
    "ListStyle",
    "DateFormat",
    "EncodedQuery",
    "build_query",
    "encode_query",
    "to_query_string",
]
