"""View handed to error callbacks and to ERROR subscribers."""
from typing import List

import tweepy


class DataError:
    """
    Wraps a tweepy exception, or an error object from the API body or the
    streaming connection.

    ``message``/``code`` come from the first API error when there is one,
    otherwise from the exception itself.
    """

    def __init__(self, error):
        self._error = error

    @property
    def data(self):
        return self._error

    @property
    def error(self):
        return self._error

    @property
    def message(self) -> str:
        if isinstance(self._error, dict):
            return self._error.get('message')
        if isinstance(self._error, tweepy.HTTPException) and self._error.api_messages:
            return self._error.api_messages[0]
        return str(self._error)

    @property
    def code(self):
        if isinstance(self._error, dict):
            return self._error.get('code')
        if isinstance(self._error, tweepy.HTTPException) and self._error.api_codes:
            return self._error.api_codes[0]
        return None

    @property
    def status_code(self):
        if isinstance(self._error, dict):
            return self._error.get('status_code')
        response = getattr(self._error, 'response', None)
        return getattr(response, 'status_code', None)

    @property
    def all_errors(self) -> List['DataError']:
        if isinstance(self._error, tweepy.HTTPException):
            return [DataError(e if isinstance(e, dict) else {'message': e}) for e in self._error.api_errors]
        return []

    @property
    def twitter_reply(self):
        """Decoded response body, when the error came from an HTTP response."""
        response = getattr(self._error, 'response', None)
        if response is None:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def __str__(self):
        return str(self.message)

    def __repr__(self):
        return f'<DataError {self.status_code} {self.message!r}>'
