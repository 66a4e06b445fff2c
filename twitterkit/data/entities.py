"""Views over tweet/user entities: hashtags, symbols, urls, mentions and media."""
import json
from typing import List, Optional

from .base import DataView


class Hashtag(DataView):
    @property
    def text(self):
        return self._get('text')

    def __str__(self):
        return str(self.text)


class Symbol(DataView):
    """A cashtag such as ``$TWTR``."""

    @property
    def text(self):
        return self._get('text')

    def __str__(self):
        return str(self.text)


class Url(DataView):
    @property
    def short_url(self):
        return self._get('url')

    @property
    def full_url(self):
        return self._get('expanded_url')

    @property
    def display_url(self):
        return self._get('display_url')

    def __str__(self):
        return str(self.display_url)


class UserMention(DataView):
    @property
    def username(self):
        return self._get('screen_name')

    @property
    def name(self):
        return self._get('name')

    @property
    def user_id(self):
        return self._get('id_str')

    def __str__(self):
        return str(self.name)


class Size(DataView):
    @property
    def width(self):
        return self._get('w')

    @property
    def height(self):
        return self._get('h')

    @property
    def resize(self):
        return self._get('resize')

    def __str__(self):
        return json.dumps(self._data)


class Media(DataView):
    """Photo, video or animated GIF attached to a tweet."""

    @property
    def id(self):
        return self._get('id_str')

    @property
    def type(self):
        return self._get('type')

    def get_size(self, size: str) -> Optional[Size]:
        """One of ``thumb``, ``small``, ``medium``, ``large``."""
        value = (self._get('sizes') or {}).get(size)
        return Size(value) if value is not None else None

    @property
    def size_thumb(self):
        return self.get_size('thumb')

    @property
    def size_small(self):
        return self.get_size('small')

    @property
    def size_medium(self):
        return self.get_size('medium')

    @property
    def size_large(self):
        return self.get_size('large')

    @property
    def url(self):
        return self._get('url')

    @property
    def path(self):
        return self._get('media_url')

    @property
    def path_https(self):
        return self._get('media_url_https')

    @property
    def display_url(self):
        return self._get('display_url')

    @property
    def expanded_url(self):
        return self._get('expanded_url')

    @property
    def indices(self):
        return self._get('indices')

    @property
    def video_info(self):
        return self._get('video_info')

    @property
    def video_aspect_ratio(self):
        return (self.video_info or {}).get('aspect_ratio')

    @property
    def video_variants(self) -> List[dict]:
        return (self.video_info or {}).get('variants') or []

    @property
    def video_url(self):
        variants = self.video_variants
        return variants[0].get('url') if variants else None

    @property
    def video_content_type(self):
        variants = self.video_variants
        return variants[0].get('content_type') if variants else None

    def __str__(self):
        return str(self.path)


class Entities(DataView):
    @property
    def hashtags(self) -> List[Hashtag]:
        return self._wrap_list('hashtags', Hashtag)

    @property
    def user_mentions(self) -> List[UserMention]:
        return self._wrap_list('user_mentions', UserMention)

    @property
    def symbols(self) -> List[Symbol]:
        return self._wrap_list('symbols', Symbol)

    @property
    def urls(self) -> List[Url]:
        return self._wrap_list('urls', Url)

    @property
    def media(self) -> Optional[List[Media]]:
        if not self._get('media'):
            return None
        return self._wrap_list('media', Media)

    def __str__(self):
        return json.dumps(self._data)
