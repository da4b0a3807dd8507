'''Calls the twitter API on the user's behalf.

It's quite common to get occasional 50x errors from the API as the servers
get overloaded, so those are retried after a sleep. Anything else is
reported straight away.
'''
import time
from collections import namedtuple

from flask import current_app
from requests import RequestException

from tweetauth.retry import retry, fixed_backoff

Ok = namedtuple('Ok', ['body'])
APICallError = namedtuple('APICallError', ['status_code', 'body'])


def is_transient(status_code):
    return 500 <= status_code < 600


def call(accessor, endpoint, params=None, method='GET', sleep=time.sleep):
    '''Makes a signed API call with accessor, a TwitterClient.

    Returns:
        Ok(body) if twitter answered with a 200, otherwise an APICallError
        holding the status code and body of the last response. Connection
        errors are retried like 5xx responses and reported with no status code.
    '''
    msg = 'Calling Twitter API at {} with {}'.format(endpoint, params)
    current_app.logger.debug(msg)

    def attempt():
        resp = accessor.request(endpoint, params=params, method=method)
        if resp.status_code != 200:
            msg = 'API call failed with {}: {}'.format(resp.status_code, resp.text)
            current_app.logger.info(msg)
        return resp

    try:
        resp = retry(
            attempt,
            max_attempts=current_app.config['API_MAX_ATTEMPTS'],
            backoff=fixed_backoff(current_app.config['API_BACKOFF']),
            succeeded=lambda r: r.status_code == 200,
            retryable=lambda r: is_transient(r.status_code),
            exceptions=(RequestException,),
            sleep=sleep
        )
    except RequestException as err:
        msg = 'API call could not reach twitter: {}'.format(err)
        current_app.logger.info(msg)
        return APICallError(None, str(err))

    if resp.status_code == 200:
        return Ok(resp.text)

    return APICallError(resp.status_code, resp.text)
