from collections import namedtuple

from authlib.integrations.requests_client import OAuth1Session
from flask import current_app

# What twitter sent back for a token request. token is empty unless the
# body could be decoded.
TokenResponse = namedtuple('TokenResponse', ['status_code', 'body', 'token'])

TOKEN_FIELDS = ('oauth_token', 'oauth_token_secret')


def has_token(token):
    '''True if the decoded response carries both halves of a credential.'''
    return all(token.get(field) for field in TOKEN_FIELDS)


class TwitterClient(object):
    '''Signs requests to twitter with the consumer key and an optional token.

    Signing, nonces and timestamps are all left to authlib.
    '''
    def __init__(self, consumer_key, consumer_secret, token=None, token_secret=None,
                 verifier=None, callback=None, base_url='https://api.twitter.com',
                 request_token_url='oauth/request_token',
                 access_token_url='oauth/access_token',
                 authorize_url='oauth/authorize', **kwargs):
        self.base_url = base_url.rstrip('/')
        self.request_token_url = self.url(request_token_url)
        self.access_token_url = self.url(access_token_url)
        self.authorize_url = self.url(authorize_url)
        self.session = OAuth1Session(
            consumer_key,
            consumer_secret,
            token=token,
            token_secret=token_secret,
            redirect_uri=callback,
            verifier=verifier
        )

    def url(self, endpoint):
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        return '{}/{}'.format(self.base_url, endpoint.lstrip('/'))

    def _fetch_token(self, url):
        resp = self.session.post(url)
        if resp.status_code != 200:
            return TokenResponse(resp.status_code, resp.text, {})

        try:
            token = self.session.parse_response_token(resp.status_code, resp.text)
        except ValueError as err:
            msg = 'Could not decode token response from {}: {}'.format(url, err)
            current_app.logger.info(msg)
            token = {}

        return TokenResponse(resp.status_code, resp.text, token)

    def fetch_request_token(self):
        '''Asks twitter for a temporary credential.'''
        return self._fetch_token(self.request_token_url)

    def fetch_access_token(self):
        '''Exchanges the request token this client was built with for an access token.'''
        return self._fetch_token(self.access_token_url)

    def authorization_url(self, request_token):
        '''The page the user visits to grant us access.'''
        return self.session.create_authorization_url(
            self.authorize_url, request_token=request_token
        )

    def request(self, endpoint, params=None, method='GET'):
        '''Makes a signed call to the API, returning the requests Response.'''
        url = self.url(endpoint)
        if method.upper() in ('GET', 'DELETE'):
            return self.session.request(method, url, params=params)
        return self.session.request(method, url, data=params)


def twitter_client(token=None, token_secret=None, **kwargs):
    '''Builds a TwitterClient from the app's TWITTER config.'''
    cfg = dict(current_app.config['TWITTER'])
    cfg.update(kwargs)
    return TwitterClient(token=token, token_secret=token_secret, **cfg)
