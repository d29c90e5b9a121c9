"""Key normalization shared by the validation engine and the response wrapper.

Payloads and API bodies may key the same field differently (``"email"``,
``Field.EMAIL``, ``1`` vs ``"1"``). A key is looked up as given first, then by
its string form.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator, Mapping

_MISSING: Any = object()


def _key_forms(key: Hashable) -> Iterator[Hashable]:
    yield key
    if isinstance(key, Enum):
        yield key.value
        yield key.name
    elif not isinstance(key, str):
        yield str(key)


def key_name(key: Hashable) -> str:
    """Return the diagnostic name used in error messages for *key*."""
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def has_key(mapping: Mapping[Any, Any], key: Hashable) -> bool:
    try:
        return any(form in mapping for form in _key_forms(key))
    except TypeError:
        # Unhashable forms cannot be keys.
        return False


def lookup(mapping: Mapping[Any, Any], key: Hashable, default: Any = None) -> Any:
    """Return the value stored under *key* or one of its string forms."""
    for form in _key_forms(key):
        try:
            value = mapping.get(form, _MISSING)
        except TypeError:
            continue
        if value is not _MISSING:
            return value
    return default
