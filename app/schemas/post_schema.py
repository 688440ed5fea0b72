from app.extensions.extensions import ma
from app.schemas.base_schema import IdentityFieldsSchema


class CreatePostSchema(IdentityFieldsSchema):
    content = ma.Str(load_default=None, allow_none=True)
    image = ma.Str(load_default=None, allow_none=True)
    video = ma.Str(load_default=None, allow_none=True)


class ReactionSchema(IdentityFieldsSchema):
    pass
