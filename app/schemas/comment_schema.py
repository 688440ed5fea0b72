from app.extensions.extensions import ma
from app.schemas.base_schema import IdentityFieldsSchema


class CommentCreateSchema(IdentityFieldsSchema):
    text = ma.Str(load_default=None, allow_none=True)


class CommentResponseSchema(ma.Schema):
    id = ma.Str()
    user_id = ma.Str(data_key="userId")
    user = ma.Str()
    text = ma.Str()
    timestamp = ma.Str()
