'''Persistence for a user's OAuthState.

The flow only ever reads and writes one record per session, under a fixed
key. Where it lives is up to the STATE_STORE setting.
'''
from flask import current_app, session
from marshmallow import ValidationError
from oauthlib.common import generate_token

from tweetauth.cache import cache
from tweetauth.errors import ConfigurationError, CorruptState
from tweetauth.schemas import OAuthStateSchema

STATE_KEY = 'twitteroauthstate'
SESSION_ID_KEY = 'sid'


def session_id():
    '''Opaque identifier for the current browser session.'''
    if SESSION_ID_KEY not in session:
        session[SESSION_ID_KEY] = generate_token()
    return session[SESSION_ID_KEY]


class StateStore(object):
    '''Loads and saves a session's OAuthState.

    Subclasses only deal with the serialized form; validation happens here.
    '''
    schema = OAuthStateSchema()

    def load(self, session_id):
        '''Returns the stored OAuthState, None if nothing has been saved yet.

        Raises:
            CorruptState: if the stored record fails validation.
        '''
        data = self._read(session_id)
        if data is None:
            return None

        msg = 'Found state {}'.format(data)
        current_app.logger.debug(msg)

        try:
            return self.schema.load(data)
        except ValidationError as err:
            raise CorruptState('Stored oauth state is invalid', err.messages)

    def save(self, session_id, state):
        '''Overwrites whatever is stored with state.'''
        data = self.schema.dump(state)
        msg = 'Setting OAuth state to - {}'.format(data)
        current_app.logger.debug(msg)
        self._write(session_id, data)

    def discard(self, session_id):
        '''Throws away a stored record, used when it can't be trusted.'''
        current_app.logger.info('Discarding stored OAuth state')
        self._delete(session_id)

    def _read(self, session_id):
        raise NotImplementedError

    def _write(self, session_id, data):
        raise NotImplementedError

    def _delete(self, session_id):
        raise NotImplementedError


class SessionStateStore(StateStore):
    '''Keeps the state in the flask session.

    The session is already scoped to one browser so session_id isn't needed.
    '''
    def _read(self, session_id):
        return session.get(STATE_KEY) or None

    def _write(self, session_id, data):
        session[STATE_KEY] = data

    def _delete(self, session_id):
        session.pop(STATE_KEY, None)


class CacheStateStore(StateStore):
    '''Keeps the state in the configured cache, keyed by session id.'''
    def key(self, session_id):
        return '{}:{}'.format(STATE_KEY, session_id)

    def _read(self, session_id):
        return cache.get(self.key(session_id))

    def _write(self, session_id, data):
        cache.set(self.key(session_id), data)

    def _delete(self, session_id):
        cache.delete(self.key(session_id))


stores = {
    'session': SessionStateStore,
    'cache': CacheStateStore
}


def get_store():
    '''The StateStore picked by the app's STATE_STORE setting.'''
    name = current_app.config.get('STATE_STORE', 'session')
    try:
        return stores[name]()
    except KeyError:
        raise ConfigurationError('Unknown STATE_STORE {}'.format(name))
