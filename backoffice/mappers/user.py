"""
User mapper
"""

from marshmallow import fields, post_load

from backoffice.models import User, UserStatus
from .base import WireSchema, load_entity
from .fields import DisplayString, Strings, Timestamp


class UserSchema(WireSchema):
    id = fields.String(required=True)
    email = DisplayString()
    username = DisplayString()
    first_name = DisplayString(data_key='firstName')
    last_name = DisplayString(data_key='lastName')
    status = fields.Enum(UserStatus, by_value=True, required=True)
    roles = Strings()
    last_login_at = Timestamp(data_key='lastLoginAt')
    created_at = Timestamp(data_key='createdAt')
    updated_at = Timestamp(data_key='updatedAt')

    @post_load
    def make_user(self, data, **kwargs):
        return User(**data)


_schema = UserSchema()


def to_domain(payload) -> User:
    return load_entity(_schema, payload, 'User')
