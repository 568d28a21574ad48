from marshmallow import Schema, fields
from dailydiet.schemas.fields import StrictNumber

class CreateUserSchema(Schema):
    name = fields.Str(required=True)
    # No range checks: any number is accepted
    age = StrictNumber(required=True)
    height = StrictNumber(required=True)
    weight = StrictNumber(required=True)

class UserIdParamSchema(Schema):
    user_id = fields.UUID(required=True, data_key="userId")
