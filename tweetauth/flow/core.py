'''Drives a user through twitter's three legged oauth process.

At the start there's no oauth information, so a request token is fetched and
the user is shown a link to twitter's authorization page. Once they approve,
twitter sends them back here with an oauth_token in the url; the request
token is then exchanged for an access token and the flow is done. From then
on every visit makes an API call to show who we're authorized as.
'''
import time
from collections import namedtuple

from flask import current_app, json, url_for
from requests import RequestException

from tweetauth.errors import ExchangeFailed, RequestTokenFailed
from tweetauth.flow import api
from tweetauth.models import OAuthState, Phase
from tweetauth.oauth import has_token, twitter_client
from tweetauth.retry import retry, linear_backoff
from tweetauth.store import get_store, session_id

# The template to render and what to render it with
Page = namedtuple('Page', ['template', 'context'])


def callback_url():
    return current_app.config.get('TWITTER_CALLBACK_URL') or url_for('flow.index', _external=True)


def fetch_request_token(sleep=time.sleep):
    '''Gets a temporary credential, backing off more after each failure.

    Returns:
        a new OAuthState in the START phase.

    Raises:
        RequestTokenFailed: if no attempt returned both token fields.
    '''
    client = twitter_client(callback=callback_url())

    def attempt():
        resp = client.fetch_request_token()
        if not has_token(resp.token):
            msg = 'Request token attempt failed with {}: {}'.format(resp.status_code, resp.body)
            current_app.logger.info(msg)
        return resp

    try:
        resp = retry(
            attempt,
            max_attempts=current_app.config['REQUEST_TOKEN_MAX_ATTEMPTS'],
            backoff=linear_backoff(current_app.config['REQUEST_TOKEN_BACKOFF']),
            succeeded=lambda r: has_token(r.token),
            exceptions=(RequestException,),
            sleep=sleep
        )
    except RequestException as err:
        raise RequestTokenFailed(None, str(err))

    if not has_token(resp.token):
        raise RequestTokenFailed(resp.status_code, resp.body)

    return OAuthState.started(resp.token['oauth_token'], resp.token['oauth_token_secret'])


def exchange_request_token(state, verifier=None):
    '''Trades the request token in state for an access token. Only tried once.

    Returns:
        a copy of state in the DONE phase.

    Raises:
        ExchangeFailed: if twitter couldn't be reached or didn't hand back both
            token fields.
    '''
    msg = 'Creating API with {}, {}'.format(state.request_token, state.request_token_secret)
    current_app.logger.debug(msg)

    client = twitter_client(state.request_token, state.request_token_secret, verifier=verifier)
    try:
        resp = client.fetch_access_token()
    except RequestException as err:
        raise ExchangeFailed(None, str(err))

    if resp.status_code != 200 or not has_token(resp.token):
        raise ExchangeFailed(resp.status_code, resp.body)

    return state.authorized(resp.token['oauth_token'], resp.token['oauth_token_secret'])


def advance(store, sid, state, params):
    '''Moves the stored state along as far as this request allows.

    Each transition is saved as soon as it happens, so a failed exchange
    still leaves the request token behind for the next visit.

    Returns:
        the current state, which is state itself if nothing happened.
    '''
    if state is None:
        current_app.logger.info('No OAuth state found')
        state = fetch_request_token()
        store.save(sid, state)

    if 'oauth_token' in params and state.awaiting_access:
        msg = 'Found access tokens in the URL - {}'.format(params['oauth_token'])
        current_app.logger.info(msg)
        state = exchange_request_token(state, params.get('oauth_verifier'))
        store.save(sid, state)

    return state


def authorization_link(state):
    client = twitter_client()
    return client.authorization_url(state.request_token)


def authorized_page(state):
    '''Calls the API with the access token to show who we've been authorized as.'''
    accessor = twitter_client(state.access_token, state.access_token_secret)
    endpoint = current_app.config['TWITTER']['verify_credentials_url']
    result = api.call(accessor, endpoint, {}, 'GET')

    if isinstance(result, api.APICallError):
        return Page('flow/failed.html', {
            'heading': 'Authorization failed',
            'message': 'Authorization tokens were returned, but when I tried an API call I received the following error:',
            'status_code': result.status_code,
            'body': result.body
        })

    try:
        account = json.loads(result.body)
        screen_name = account['screen_name']
    except (ValueError, TypeError, KeyError):
        return Page('flow/failed.html', {
            'heading': 'Authorization failed',
            'message': 'The API call succeeded but the account details could not be read:',
            'status_code': 200,
            'body': result.body
        })

    current_app.logger.debug(account)
    return Page('flow/authorized.html', {'screen_name': screen_name})


def handle_twitter_oauth(params):
    '''Handles one request to the authorization page.

    Args:
        params: the request's query/form parameters.

    Returns:
        the Page to show the user.
    '''
    store = get_store()
    sid = session_id()
    state = store.load(sid)

    if state is not None and state.phase is Phase.START and 'denied' in params:
        current_app.logger.info('User denied the authorization request')
        return Page('flow/denied.html', {'link': authorization_link(state)})

    state = advance(store, sid, state, params)

    if state.phase is Phase.START:
        return Page('flow/authorize.html', {'link': authorization_link(state)})

    return authorized_page(state)
