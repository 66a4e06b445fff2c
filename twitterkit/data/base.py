"""Shared behaviour of the read-only payload views."""
from typing import Any, Callable, List, Optional, Type, TypeVar

V = TypeVar('V', bound='DataView')


class DataView:
    """Named accessors over one raw JSON object. The object is never copied."""

    def __init__(self, data: Optional[dict]):
        self._data = data if data is not None else {}

    @property
    def data(self) -> Any:
        return self._data

    def _get(self, key: str, default=None):
        return self._data.get(key, default)

    def _wrap(self, key: str, cls: Type[V]) -> Optional[V]:
        value = self._data.get(key)
        return cls(value) if value is not None else None

    def _wrap_list(self, key: str, cls: Callable[[Any], V]) -> List[V]:
        return [cls(item) for item in (self._data.get(key) or [])]

    def __str__(self):
        return str(self._data)

    def __repr__(self):
        return f'<{type(self).__name__} {self}>'
