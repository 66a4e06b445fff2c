from .base import DataView
from .user import User


class Event(DataView):
    """User stream event (follow, favorite, list_created, ...)."""

    @property
    def type(self):
        return self._get('event')

    @property
    def source(self) -> User:
        return User(self._get('source'))

    @property
    def target(self) -> User:
        return User(self._get('target'))

    @property
    def target_object(self):
        return self._get('target_object')

    @property
    def date(self):
        return self._get('created_at')

    def is_type(self, event_type: str) -> bool:
        return self.type == event_type

    def __str__(self):
        return str(self.type)
