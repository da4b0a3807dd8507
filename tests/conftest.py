import pytest

from flask.cli import load_dotenv
load_dotenv()

from tweetauth import create_app
from tweetauth.cache import cache as _cache
from tweetauth.oauth import TokenResponse


@pytest.fixture(scope="session")
def app():
    app = create_app("testing")

    with app.app_context():
        yield app


@pytest.fixture(scope="function")
def cache():
    yield _cache
    _cache.clear()


def api_response(status_code, text=""):
    resp = FakeResponse()
    resp.status_code = status_code
    resp.text = text
    return resp


class FakeResponse(object):
    status_code = 200
    text = ""


class FakeTwitter(object):
    """Stands in for TwitterClient, answering from canned responses."""

    def __init__(self):
        self.request_tokens = [TokenResponse(200, "", {})]
        self.access_tokens = [TokenResponse(200, "", {})]
        self.api_responses = [api_response(200, "{}")]
        self.built_with = []
        self.calls = []

    def __call__(self, token=None, token_secret=None, **kwargs):
        self.built_with.append((token, token_secret, kwargs))
        return self

    def _next(self, responses):
        # the last canned response repeats once the others are used up
        if len(responses) > 1:
            response = responses.pop(0)
        else:
            response = responses[0]

        if isinstance(response, Exception):
            raise response
        return response

    def fetch_request_token(self):
        self.calls.append("request_token")
        return self._next(self.request_tokens)

    def fetch_access_token(self):
        self.calls.append("access_token")
        return self._next(self.access_tokens)

    def authorization_url(self, request_token):
        return "https://api.twitter.com/oauth/authorize?oauth_token=" + request_token

    def request(self, endpoint, params=None, method="GET"):
        self.calls.append(endpoint)
        return self._next(self.api_responses)


@pytest.fixture(scope="function")
def twitter(mocker):
    fake = FakeTwitter()
    mocker.patch("tweetauth.flow.core.twitter_client", new=fake)
    return fake
