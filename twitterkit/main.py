"""
Demo: follow the home stream and a keyword-filtered stream, and poll the
mentions timeline.

    python -m twitterkit.main
"""
import signal

from apscheduler.schedulers.background import BackgroundScheduler

from .auth import Auth
from .client import TwitterClient
from .config import Config
from .events import TwitterEvent
from .logger import logger


def on_home_tweet(tweet):
    logger.info('[home] @%s: %s', tweet.user.username, tweet.text)


def on_public_tweet(tweet):
    logger.info('[filter] %s (@%s): %s', tweet.user.name, tweet.user.username, tweet.text)


def on_stream_error(error):
    logger.error('Stream error: %s', error)


class MentionPoller:
    """Logs new mentions; ``since_id`` moves past every mention seen."""

    def __init__(self, client: TwitterClient, scheduler=None):
        self.client = client
        self.scheduler = scheduler or BackgroundScheduler()
        self.since_id = None

    def start(self):
        self.scheduler.add_job(
            self.poll,
            'interval',
            minutes=Config.MENTION_POLL_MINUTES,
            id='mention_job',
            max_instances=1,
            coalesce=True,
            misfire_grace_time=300
        )
        self.scheduler.start()
        logger.info('Mention poller started')

    def poll(self):
        self.client.get_mentions_timeline(self.on_mentions, on_stream_error, since_id=self.since_id)

    def on_mentions(self, tweets):
        # newest first
        for tweet in reversed(tweets):
            logger.info('[mention] @%s: %s', tweet.user.username, tweet.text)
        if tweets:
            self.since_id = tweets[0].id

    def shutdown(self):
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)


def build_client() -> TwitterClient:
    auth = Auth.from_env()
    if auth is None:
        logger.warning('Twitter credentials not set in .env; streams will be rejected')
    client = TwitterClient(auth=auth)

    client.register_user_stream_event(TwitterEvent.TWEET, on_home_tweet)
    client.register_user_stream_event(TwitterEvent.ERROR, on_stream_error)

    client.add_tracks_to_filter_stream(Config.DEMO_TRACKS)
    client.register_filter_stream_event(TwitterEvent.TWEET_NOT_RETWEET, on_public_tweet)
    client.register_filter_stream_event(TwitterEvent.ERROR, on_stream_error)
    return client


def main():
    logger.info('Starting twitterkit demo')
    client = build_client()
    client.start_user_stream()
    logger.info('Listening to the user stream...')
    client.start_filter_stream()
    logger.info('Listening to public tweets that contain %s ...', ', '.join(client.filter_stream_tracks))
    poller = MentionPoller(client)
    poller.start()

    def _stop(signum, frame):
        logger.info('Shutting down...')
        poller.shutdown()
        client.close()
        raise SystemExit(0)

    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)

    # keep alive
    while True:
        signal.pause()


if __name__ == '__main__':
    main()
