"""User profile view."""
from typing import List, Optional

from .base import DataView
from .entities import Url


class User(DataView):
    @property
    def id(self):
        return self._get('id_str')

    @property
    def name(self):
        return self._get('name')

    @property
    def username(self):
        return self._get('screen_name')

    @property
    def location(self):
        return self._get('location')

    def _entity_urls(self, field: str) -> List[Url]:
        section = (self._get('entities') or {}).get(field) or {}
        return [Url(u) for u in section.get('urls') or []]

    @property
    def url(self) -> Optional[Url]:
        urls = self.urls
        return urls[0] if urls else None

    @property
    def urls(self) -> List[Url]:
        return self._entity_urls('url')

    @property
    def description_urls(self) -> List[Url]:
        return self._entity_urls('description')

    @property
    def description(self):
        return self._get('description')

    @property
    def followers_count(self):
        return self._get('followers_count')

    @property
    def friends_count(self):
        return self._get('friends_count')

    @property
    def listed_count(self):
        return self._get('listed_count')

    @property
    def favourites_count(self):
        return self._get('favourites_count')

    @property
    def statuses_count(self):
        return self._get('statuses_count')

    @property
    def date(self):
        return self._get('created_at')

    @property
    def utc_offset(self):
        return self._get('utc_offset')

    @property
    def time_zone(self):
        return self._get('time_zone')

    @property
    def verified(self):
        return self._get('verified')

    @property
    def language(self):
        return self._get('lang')

    @property
    def protected(self):
        return self._get('protected')

    @property
    def contributors_enabled(self):
        return self._get('contributors_enabled')

    @property
    def geo_enabled(self):
        return self._get('geo_enabled')

    @property
    def has_extended_profile(self):
        return self._get('has_extended_profile')

    @property
    def default_profile(self):
        return self._get('default_profile')

    @property
    def default_profile_image(self):
        return self._get('default_profile_image')

    @property
    def profile_background_tile(self):
        return self._get('profile_background_tile')

    @property
    def profile_background_color(self):
        return self._get('profile_background_color')

    @property
    def profile_background_image_url(self):
        return self._get('profile_background_image_url')

    @property
    def profile_background_image_url_https(self):
        return self._get('profile_background_image_url_https')

    @property
    def profile_link_color(self):
        return self._get('profile_link_color')

    @property
    def profile_sidebar_border_color(self):
        return self._get('profile_sidebar_border_color')

    @property
    def profile_sidebar_fill_color(self):
        return self._get('profile_sidebar_fill_color')

    @property
    def profile_text_color(self):
        return self._get('profile_text_color')

    @property
    def profile_use_background_image(self):
        return self._get('profile_use_background_image')

    @property
    def profile_image_url(self):
        return self._get('profile_image_url')

    @property
    def profile_image_url_https(self):
        return self._get('profile_image_url_https')

    @property
    def profile_banner_url(self):
        return self._get('profile_banner_url')

    @property
    def last_tweet(self):
        """The embedded most recent status, if the payload carries one."""
        from .tweet import Tweet

        return self._wrap('status', Tweet)

    def __str__(self):
        return str(self.name)
