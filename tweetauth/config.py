import os

class Config(object):
    SECRET_KEY = os.getenv('SECRET_KEY_AUTH')

    TWITTER = {
        'consumer_key': os.getenv('TWITTER_CONSUMER_KEY'),
        'consumer_secret': os.getenv('TWITTER_CONSUMER_SECRET'),
        'base_url': 'https://api.twitter.com',
        'request_token_url': 'oauth/request_token',
        'access_token_url': 'oauth/access_token',
        'authorize_url': 'oauth/authorize',
        'verify_credentials_url': '1.1/account/verify_credentials.json'
    }
    TWITTER_CALLBACK_URL = os.getenv('TWITTER_CALLBACK_URL')

    # Backoff units are seconds
    REQUEST_TOKEN_MAX_ATTEMPTS = 10
    REQUEST_TOKEN_BACKOFF = 5
    API_MAX_ATTEMPTS = 5
    API_BACKOFF = 10

    # 'session' keeps the oauth state in the signed cookie, 'cache' in flask-caching
    STATE_STORE = os.getenv('STATE_STORE', 'session')
    CACHE_TYPE = 'SimpleCache'
    CACHE_DEFAULT_TIMEOUT = 60 * 60 * 24
    CACHE_KEY_PREFIX = 'tweetauth:'

class DevConfig(Config):
    SECRET_KEY = os.getenv('SECRET_KEY_AUTH', 'dev')

class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    TWITTER = dict(
        Config.TWITTER,
        consumer_key='test_consumer_key',
        consumer_secret='test_consumer_secret'
    )
    TWITTER_CALLBACK_URL = 'http://test/callback'
    REQUEST_TOKEN_BACKOFF = 0
    API_BACKOFF = 0

class ProdConfig(Config):
    CACHE_TYPE = 'RedisCache'
    CACHE_REDIS_HOST = os.getenv('REDIS_HOST')
    CACHE_REDIS_PORT = os.getenv('REDIS_PORT', 6379)

app_config = {
    'development': DevConfig,
    'testing': TestConfig,
    'production': ProdConfig
}
