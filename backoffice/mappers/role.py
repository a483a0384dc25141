"""
Role mapper
"""

from marshmallow import fields, post_load

from backoffice.models import Permission, Role
from .base import WireSchema, load_entity
from .fields import DisplayString, Flag, Lines, NullableString, Timestamp


class PermissionSchema(WireSchema):
    id = fields.String(required=True)
    name = DisplayString()
    description = NullableString()
    module = DisplayString()
    action = DisplayString()

    @post_load
    def make_permission(self, data, **kwargs):
        return Permission(**data)


class RoleSchema(WireSchema):
    id = fields.String(required=True)
    name = DisplayString()
    description = NullableString()
    is_active = Flag(fallback=True, data_key='isActive')
    is_system = Flag(data_key='isSystem')
    permissions = Lines(PermissionSchema())
    created_at = Timestamp(data_key='createdAt')
    updated_at = Timestamp(data_key='updatedAt')

    @post_load
    def make_role(self, data, **kwargs):
        return Role(**data)


_schema = RoleSchema()


def to_domain(payload) -> Role:
    return load_entity(_schema, payload, 'Role')
