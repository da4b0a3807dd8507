from enum import Enum


class Phase(Enum):
    START = 'start'
    DONE = 'done'


class OAuthState(object):
    '''A single user's progress through the twitter authorization process.

    There is at most one of these per session. Having none at all means the
    process hasn't been started yet.

    Attributes:
        request_token: public half of the temporary credential.
        request_token_secret: private half of the temporary credential.
        access_token: public half of the long lived credential. Initially ''.
        access_token_secret: private half of the long lived credential. Initially ''.
        phase: Phase.START until we have access, Phase.DONE afterwards.
    '''
    def __init__(self, request_token, request_token_secret,
                 access_token='', access_token_secret='', phase=Phase.START):
        self.request_token = request_token
        self.request_token_secret = request_token_secret
        self.access_token = access_token
        self.access_token_secret = access_token_secret
        self.phase = phase

    @classmethod
    def started(cls, request_token, request_token_secret):
        return cls(request_token, request_token_secret)

    def authorized(self, access_token, access_token_secret):
        '''Returns a copy of this state holding the access credential.'''
        return OAuthState(
            request_token=self.request_token,
            request_token_secret=self.request_token_secret,
            access_token=access_token,
            access_token_secret=access_token_secret,
            phase=Phase.DONE
        )

    @property
    def awaiting_access(self):
        return self.access_token == ''

    def __eq__(self, other):
        if not isinstance(other, OAuthState):
            return NotImplemented
        return vars(self) == vars(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __repr__(self):
        return '<OAuthState {} request_token={!r}>'.format(self.phase.value, self.request_token)
