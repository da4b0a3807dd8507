import logging
import os

from flask import Flask

from tweetauth import config
from tweetauth.cache import cache
from tweetauth.errors import ConfigurationError
from tweetauth.flow import flow
from tweetauth.retry import log as retry_log


def setup_logger_handlers(app):
    sh = logging.StreamHandler()
    sh.setFormatter(logging.Formatter(
    '%(asctime)s %(levelname)s: %(message)s '
    '[in %(pathname)s:%(lineno)d]'
    ))
    sh.setLevel(logging.DEBUG)
    app.logger.addHandler(sh)

    # the retry helper logs through its own module logger
    if not retry_log.handlers:
        retry_log.addHandler(sh)
        retry_log.setLevel(logging.INFO)

def check_config(app):
    '''Refuses to start without the consumer key and secret.'''
    twitter = app.config.get('TWITTER') or {}
    for key in ('consumer_key', 'consumer_secret'):
        if not twitter.get(key):
            msg = 'TWITTER {} is not set, register an application with twitter and add its keys'.format(key)
            raise ConfigurationError(msg)

    if not app.config.get('SECRET_KEY'):
        raise ConfigurationError('SECRET_KEY is not set, sessions need it')

def create_app(config_name=None):
    """
    Returns the Flask app.
    """
    app = Flask(__name__)

    if not config_name:
        config_name = os.getenv('FLASK_ENV', 'development')

    if config_name == 'production':
        setup_logger_handlers(app)

    app.config.from_object(config.app_config[config_name])
    check_config(app)

    cache.init_app(app)
    app.register_blueprint(flow)

    return app
