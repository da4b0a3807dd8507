'''Exceptions raised while walking a user through the authorization flow.'''


class TweetAuthError(Exception):
    pass


class ConfigurationError(TweetAuthError):
    '''The app is missing something it needs to talk to twitter.'''
    pass


class CorruptState(TweetAuthError):
    '''The stored oauth state could not be validated.

    Attributes:
        messages: the marshmallow validation messages, if any.
    '''
    def __init__(self, message, messages=None):
        super(CorruptState, self).__init__(message)
        self.messages = messages or {}


class ProviderError(TweetAuthError):
    '''Twitter answered with something we can't use.

    Attributes:
        status_code: the HTTP status of the last response, None if there was none.
        body: the raw body of the last response.
    '''
    def __init__(self, status_code, body):
        msg = 'Twitter responded with {}: {}'.format(status_code, body)
        super(ProviderError, self).__init__(msg)
        self.status_code = status_code
        self.body = body


class RequestTokenFailed(ProviderError):
    '''A request token could not be obtained within the retry budget.'''
    pass


class ExchangeFailed(ProviderError):
    '''The request token could not be exchanged for an access token.'''
    pass
