"""
Return mapper
"""

from marshmallow import fields, post_load

from backoffice.models import ReturnLine, ReturnStatus, ReturnType, SalesReturn
from .base import WireSchema, load_entity
from .fields import ZERO, Count, DisplayString, Lines, Money, NullableString, Timestamp


class ReturnLineSchema(WireSchema):
    id = DisplayString()
    product_id = DisplayString(data_key='productId')
    product_name = DisplayString(data_key='productName')
    product_sku = DisplayString(data_key='productSku')
    quantity = Count(fallback=0)
    original_sale_price = Money(data_key='originalSalePrice')
    original_unit_cost = Money(data_key='originalUnitCost')
    currency = DisplayString()
    total_price = Money(fallback=ZERO, data_key='totalPrice')

    @post_load
    def make_line(self, data, **kwargs):
        return ReturnLine(**data)


class SalesReturnSchema(WireSchema):
    id = fields.String(required=True)
    document_number = DisplayString(data_key='returnNumber')
    status = fields.Enum(ReturnStatus, by_value=True, required=True)
    type = fields.Enum(ReturnType, by_value=True, required=True)
    reason = NullableString()
    warehouse_id = DisplayString(data_key='warehouseId')
    warehouse_name = DisplayString(data_key='warehouseName')
    sale_id = NullableString(data_key='saleId')
    sale_number = NullableString(data_key='saleNumber')
    source_movement_id = NullableString(data_key='sourceMovementId')
    return_movement_id = NullableString(data_key='returnMovementId')
    note = NullableString()
    total_amount = Money(fallback=ZERO, data_key='totalAmount')
    currency = DisplayString()
    lines = Lines(ReturnLineSchema())
    created_by = DisplayString(data_key='createdBy')
    created_at = Timestamp(data_key='createdAt')
    confirmed_at = Timestamp(data_key='confirmedAt')
    cancelled_at = Timestamp(data_key='cancelledAt')

    @post_load
    def make_return(self, data, **kwargs):
        return SalesReturn(**data)


_schema = SalesReturnSchema()


def to_domain(payload) -> SalesReturn:
    return load_entity(_schema, payload, 'SalesReturn')
