from marshmallow import EXCLUDE

from app.extensions.extensions import ma


class RequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE


class IdentityFieldsSchema(RequestSchema):
    user_id = ma.Str(data_key="userId", load_default=None, allow_none=True)
    username = ma.Str(load_default=None, allow_none=True)
