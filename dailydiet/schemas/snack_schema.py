from marshmallow import Schema, fields
from dailydiet.schemas.fields import StrictBoolean, NaiveTime

class UpdateSnackSchema(Schema):
    title = fields.Str(required=True)
    description = fields.Str(required=True)
    at_diet = StrictBoolean(required=True)
    date = fields.Date(required=True)
    time = NaiveTime(required=True)

class CreateSnackSchema(UpdateSnackSchema):
    user_id = fields.UUID(required=True, data_key="userId")
