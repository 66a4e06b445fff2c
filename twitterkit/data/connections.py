from typing import List

from .base import DataView


class Connections(DataView):
    """First entry of a ``friendships/lookup`` response."""

    @property
    def connections(self) -> List[str]:
        entries = self._data if isinstance(self._data, list) else [self._data]
        if not entries or not isinstance(entries[0], dict):
            return []
        return entries[0].get('connections') or []

    @property
    def is_user_following_you(self) -> bool:
        return 'followed_by' in self.connections

    @property
    def are_you_following_user(self) -> bool:
        return 'following' in self.connections

    @property
    def are_all_following_each_other(self) -> bool:
        return self.is_user_following_you and self.are_you_following_user

    @property
    def are_you_blocking(self) -> bool:
        return 'blocking' in self.connections

    @property
    def are_you_muting(self) -> bool:
        return 'muting' in self.connections

    @property
    def is_following_requested(self) -> bool:
        return 'following_requested' in self.connections

    @property
    def has_no_connection(self) -> bool:
        return 'none' in self.connections

    def __str__(self):
        return ','.join(self.connections)
