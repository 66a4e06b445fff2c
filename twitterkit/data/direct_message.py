"""Direct message views and the builders used when sending one."""
from typing import List, Optional

from .base import DataView
from .entities import Entities
from .user import User


class DirectMessage(DataView):
    """Legacy direct message object, as delivered on the user stream."""

    def __init__(self, data: Optional[dict], client=None):
        super().__init__(data)
        self.client = client

    @property
    def id(self):
        return self._get('id_str')

    @property
    def text(self):
        return self._get('text')

    @property
    def sender(self) -> User:
        return User(self._get('sender'))

    @property
    def user(self) -> User:
        return self.sender

    @property
    def sender_id(self):
        return self._get('sender_id_str')

    @property
    def sender_username(self):
        return self._get('sender_screen_name')

    @property
    def recipient(self) -> User:
        return User(self._get('recipient'))

    @property
    def recipient_id(self):
        return self._get('recipient_id_str')

    @property
    def recipient_username(self):
        return self._get('recipient_screen_name')

    @property
    def date(self):
        return self._get('created_at')

    @property
    def entities(self) -> Entities:
        return Entities(self._get('entities'))

    def send_reply(self, text: str, on_success=None, on_error=None):
        if not self.client:
            return None
        return self.client.send_new_direct_message(self.sender_id, text, on_success, on_error)

    def __str__(self):
        return str(self.text)


class DirectMessageDelete(DataView):
    """Body of a ``{"delete": {"direct_message": ...}}`` stream notice."""

    @property
    def id(self):
        return self._get('id_str')

    @property
    def user_id(self):
        return self._get('user_id')

    def __str__(self):
        return str(self.id)


class MessageCreateEvent(DataView):
    """``message_create`` event returned by ``direct_messages/events/new``."""

    def _message_create(self) -> dict:
        return self._get('message_create') or {}

    @property
    def id(self):
        return self._get('id')

    @property
    def timestamp(self):
        return self._get('created_timestamp')

    @property
    def type(self):
        return self._get('type')

    @property
    def recipient_id(self):
        return (self._message_create().get('target') or {}).get('recipient_id')

    @property
    def sender_id(self):
        return self._message_create().get('sender_id')

    @property
    def text(self):
        return (self._message_create().get('message_data') or {}).get('text')

    @property
    def entities(self) -> Entities:
        return Entities((self._message_create().get('message_data') or {}).get('entities'))

    def __str__(self):
        return str(self.text)


class DirectMessageButtons:
    """Call-to-action buttons (``ctas``) for a direct message."""

    def __init__(self):
        self._buttons: List[dict] = []

    def add_button(self, label: str, url: str) -> 'DirectMessageButtons':
        self._buttons.append({'type': 'web_url', 'label': label, 'url': url})
        return self

    @property
    def size(self) -> int:
        return len(self._buttons)

    @property
    def buttons(self) -> List[dict]:
        return self._buttons

    def to_ctas(self) -> List[dict]:
        return self._buttons

    def __str__(self):
        return ', '.join(b['label'] for b in self._buttons)


class DirectMessageQuickReply:
    """Quick reply options for a direct message."""

    def __init__(self):
        self._data = {'type': 'options', 'options': []}

    @property
    def data(self) -> dict:
        return self._data

    def add_option(self, label: str, description: Optional[str] = None,
                   metadata: Optional[str] = None) -> 'DirectMessageQuickReply':
        if not metadata:
            metadata = f"external_id_{len(self._data['options']) + 1}"
        self._data['options'].append({
            'label': label,
            'description': description or None,
            'metadata': metadata,
        })
        return self

    @property
    def size(self) -> int:
        return len(self._data['options'])

    @property
    def options(self) -> List[dict]:
        return self._data['options']

    def to_quick_reply(self) -> Optional[dict]:
        return self._data if self._data['options'] else None

    def __str__(self):
        return ', '.join(o['label'] for o in self._data['options'])
