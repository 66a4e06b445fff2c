from dotenv import load_dotenv
import os

load_dotenv()


def _csv(value):
    return [v.strip() for v in (value or '').split(',') if v.strip()]


class Config:
    TWITTER_CONSUMER_KEY = os.getenv('TWITTER_CONSUMER_KEY')
    TWITTER_CONSUMER_SECRET = os.getenv('TWITTER_CONSUMER_SECRET')
    TWITTER_ACCESS_TOKEN = os.getenv('TWITTER_ACCESS_TOKEN')
    TWITTER_ACCESS_TOKEN_SECRET = os.getenv('TWITTER_ACCESS_TOKEN_SECRET')

    TWITTER_TIMEOUT = float(os.getenv('TWITTER_TIMEOUT', '60'))

    TWITTER_API_HOST = os.getenv('TWITTER_API_HOST', 'api.twitter.com')
    TWITTER_UPLOAD_HOST = os.getenv('TWITTER_UPLOAD_HOST', 'upload.twitter.com')
    TWITTER_STREAM_URL = os.getenv('TWITTER_STREAM_URL', 'https://stream.twitter.com/1.1')
    TWITTER_USER_STREAM_URL = os.getenv('TWITTER_USER_STREAM_URL', 'https://userstream.twitter.com/1.1')

    DEMO_TRACKS = _csv(os.getenv('DEMO_TRACKS', 'python,django'))
    MENTION_POLL_MINUTES = int(os.getenv('MENTION_POLL_MINUTES', '5'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
