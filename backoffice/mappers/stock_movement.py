"""
Stock movement mapper
"""

from marshmallow import fields, post_load

from backoffice.models import MovementLine, MovementStatus, MovementType, StockMovement
from .base import WireSchema, load_entity
from .fields import ZERO, Count, DisplayString, Lines, Money, NullableString, Timestamp


class MovementLineSchema(WireSchema):
    id = DisplayString()
    product_id = DisplayString(data_key='productId')
    product_name = DisplayString(data_key='productName')
    product_sku = DisplayString(data_key='productSku')
    quantity = Count(fallback=0)
    unit_cost = Money(data_key='unitCost')

    @post_load
    def make_line(self, data, **kwargs):
        return MovementLine(**data)


class StockMovementSchema(WireSchema):
    id = fields.String(required=True)
    document_number = DisplayString(data_key='movementNumber')
    warehouse_id = DisplayString(data_key='warehouseId')
    warehouse_name = DisplayString(data_key='warehouseName')
    type = fields.Enum(MovementType, by_value=True, required=True)
    status = fields.Enum(MovementStatus, by_value=True, required=True)
    reference = NullableString()
    reason = NullableString()
    note = NullableString()
    lines = Lines(MovementLineSchema())
    total_amount = Money(fallback=ZERO, data_key='totalAmount')
    currency = DisplayString()
    created_by = DisplayString(data_key='createdBy')
    created_at = Timestamp(data_key='createdAt')
    posted_at = Timestamp(data_key='postedAt')
    voided_at = Timestamp(data_key='voidedAt')

    @post_load
    def make_movement(self, data, **kwargs):
        return StockMovement(**data)


_schema = StockMovementSchema()


def to_domain(payload) -> StockMovement:
    """Map one wire movement to the domain entity"""
    return load_entity(_schema, payload, 'StockMovement')
