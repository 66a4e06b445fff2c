"""Search request builder and the metadata returned with results."""
import json
from typing import Optional

from .base import DataView


class StandardSearch:
    """Parameters for ``search/tweets``."""

    def __init__(self, query: Optional[str] = None):
        self._params = {}
        if query:
            self.query = query
        self.set_tweet_mode_extended()
        self.result_type = 'recent'
        self.count = 100

    def _set(name):
        def setter(self, value):
            self._params[name] = value

        def getter(self):
            return self._params.get(name)

        return property(getter, setter)

    query = _set('q')
    language = _set('lang')
    locale = _set('locale')
    result_type = _set('result_type')
    count = _set('count')
    until = _set('until')
    since_id = _set('since_id')
    max_id = _set('max_id')
    include_entities = _set('include_entities')

    del _set

    def geocode(self, latitude, longitude, radius, in_km: bool = False) -> None:
        self._params['geocode'] = f"{latitude},{longitude},{radius}{'km' if in_km else 'mi'}"

    def set_tweet_mode_extended(self) -> None:
        self._params['tweet_mode'] = 'extended'

    def to_params(self) -> dict:
        return dict(self._params)

    def __str__(self):
        return json.dumps(self._params)


class SearchMetadata(DataView):
    @property
    def max_id(self):
        return self._get('max_id_str')

    @property
    def since_id(self):
        return self._get('since_id_str') or self._get('since_id')

    @property
    def next_results(self):
        return self._get('next_results')

    @property
    def query(self):
        return self._get('query')

    @property
    def refresh_url(self):
        return self._get('refresh_url')

    @property
    def count(self):
        return self._get('count')

    def __str__(self):
        return str(self.query)
