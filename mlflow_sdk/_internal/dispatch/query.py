"""Query-parameter flattening for tracking server GET requests."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

QueryValue: TypeAlias = (
    str | int | bool | Sequence["QueryValue"] | Mapping[str, "QueryValue"]
)
QueryParams: TypeAlias = list[tuple[str, str]]

KEY_SEPARATOR = "."


def flatten_query(params: Mapping[str, Any] | None) -> QueryParams:
    """Flatten structured parameters into repeated-key query pairs.

    Nested mappings become dotted keys (``{"a": {"b": 1}}`` -> ``a.b=1``) and
    sequences repeat their key once per element. Values of any other type
    are dropped without error.

    Args:
        params: Mapping from parameter name to a scalar, sequence or mapping.

    Returns:
        Ordered list of ``(key, value)`` string pairs, suitable for
        ``httpx`` ``params``.
    """
    pairs: QueryParams = []
    if not params:
        return pairs
    for key, value in params.items():
        _add_query(pairs, key, value)
    return pairs


def _add_query(pairs: QueryParams, key: str, value: Any) -> None:
    """Recursively append the pairs for a single value."""
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        pairs.append((key, "true" if value else "false"))
    elif isinstance(value, str):
        pairs.append((key, value))
    elif isinstance(value, int):
        pairs.append((key, str(value)))
    elif isinstance(value, Mapping):
        for inner_key, inner_value in value.items():
            _add_query(pairs, f"{key}{KEY_SEPARATOR}{inner_key}", inner_value)
    elif isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray, memoryview)):
        for item in value:
            _add_query(pairs, key, item)
