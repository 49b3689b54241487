from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence, Tuple


def ensure_mapping(value: Any, field: str) -> Mapping[str, Any]:
    """Guarantee document fields that should be objects behave like mappings."""
    if isinstance(value, Mapping):
        return value
    raise TypeError(f"Field '{field}' must be an object, got {type(value).__name__}")


def to_count(value: Any) -> int:
    """Convert JSON numbers to non-negative ints, rejecting fractional values."""
    if value is None:
        raise ValueError("Expected integer-like value, received None")
    if isinstance(value, bool):
        raise ValueError(f"Cannot use boolean {value!r} as a count")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Cannot convert fractional {value!r} to a count")
        value = int(value)
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to int") from exc
    if count < 0:
        raise ValueError(f"Counts must be non-negative, got {count}")
    return count


def to_counts(values: Any, field: str) -> Tuple[int, ...]:
    """Convert a JSON array to a tuple of counts."""
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        raise TypeError(f"Field '{field}' must be an array, got {type(values).__name__}")
    return tuple(to_count(item) for item in values)


def to_frequency_map(values: Any, field: str) -> Dict[str, int]:
    """Convert a JSON object of n-gram counts to a plain ``str -> int`` dict."""
    mapping = ensure_mapping(values, field)
    return {str(ngram): to_count(count) for ngram, count in mapping.items()}
