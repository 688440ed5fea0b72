from app.extensions.extensions import ma
from app.schemas.base_schema import RequestSchema


class CredentialsSchema(RequestSchema):
    username = ma.Str(load_default=None, allow_none=True)
    password = ma.Str(load_default=None, allow_none=True)
