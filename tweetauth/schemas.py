from marshmallow import Schema, fields, post_load, validates_schema, ValidationError
from tweetauth.models import OAuthState, Phase

class OAuthStateSchema(Schema):
    request_token = fields.Str(required=True)
    request_token_secret = fields.Str(required=True)
    access_token = fields.Str(required=True)
    access_token_secret = fields.Str(required=True)
    phase = fields.Enum(Phase, by_value=True, required=True)

    @validates_schema
    def check_phase(self, data, **kwargs):
        if not data['request_token'] or not data['request_token_secret']:
            raise ValidationError('Request token is missing', 'request_token')

        has_access = bool(data['access_token']) and bool(data['access_token_secret'])
        no_access = not data['access_token'] and not data['access_token_secret']

        if data['phase'] is Phase.DONE and not has_access:
            raise ValidationError('Phase is done but the access token is missing', 'phase')

        if data['phase'] is Phase.START and not no_access:
            raise ValidationError('Phase is start but an access token is present', 'phase')

    @post_load
    def make_state(self, data, **kwargs):
        return OAuthState(**data)
