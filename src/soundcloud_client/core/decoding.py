# src/soundcloud_client/core/decoding.py
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from soundcloud_client.core.errors import JsonError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(record_type: Any) -> TypeAdapter:
    return TypeAdapter(record_type)


def decode(record_type: Type[T], data: Any) -> T:
    """Validate decoded JSON against *record_type* (a model or e.g. ``List[Track]``)."""
    try:
        return _adapter(record_type).validate_python(data)
    except ValidationError as e:
        raise JsonError(str(e)) from e
