from flask import current_app, render_template, request

from tweetauth.errors import CorruptState, ExchangeFailed, RequestTokenFailed
from tweetauth.flow import flow
from tweetauth.flow.core import handle_twitter_oauth
from tweetauth.store import get_store, session_id


@flow.errorhandler(RequestTokenFailed)
def handle_request_token_failed(error):
    current_app.logger.warning(error)
    return render_template(
        'flow/failed.html',
        heading='Could not contact Twitter',
        message='Twitter did not hand out a request token, please try again later:',
        status_code=error.status_code,
        body=error.body
    ), 502


@flow.errorhandler(ExchangeFailed)
def handle_exchange_failed(error):
    current_app.logger.warning(error)
    return render_template(
        'flow/failed.html',
        heading='Authorization failed',
        message='Twitter did not exchange the request token for an access token:',
        status_code=error.status_code,
        body=error.body
    ), 502


@flow.errorhandler(CorruptState)
def handle_corrupt_state(error):
    msg = 'Corrupt OAuth state {}'.format(error.messages)
    current_app.logger.warning(msg)
    get_store().discard(session_id())
    return render_template(
        'flow/failed.html',
        heading='Something went wrong',
        message='Your authorization details were unreadable and have been reset, reload the page to start again.',
        status_code=500,
        body=''
    ), 500


@flow.route('/')
def index():
    """Shows the user where they are in the authorization process.

    Twitter redirects back here once the user has approved us:
    GET /
    ?oauth_token=TOKEN
    &oauth_verifier=VERIFIER
    """
    page = handle_twitter_oauth(request.values)
    return render_template(page.template, **page.context)
