"""
Sale mapper
"""

from marshmallow import fields, post_load

from backoffice.models import Sale, SaleLine, SaleStatus
from .base import WireSchema, load_entity
from .fields import ZERO, Count, DisplayString, Lines, Money, NullableString, Timestamp


class SaleLineSchema(WireSchema):
    id = DisplayString()
    product_id = DisplayString(data_key='productId')
    product_name = DisplayString(data_key='productName')
    product_sku = DisplayString(data_key='productSku')
    quantity = Count(fallback=0)
    sale_price = Money(fallback=ZERO, data_key='salePrice')
    currency = DisplayString()
    total_price = Money(fallback=ZERO, data_key='totalPrice')

    @post_load
    def make_line(self, data, **kwargs):
        return SaleLine(**data)


class SaleSchema(WireSchema):
    id = fields.String(required=True)
    document_number = DisplayString(data_key='saleNumber')
    status = fields.Enum(SaleStatus, by_value=True, required=True)
    warehouse_id = DisplayString(data_key='warehouseId')
    warehouse_name = DisplayString(data_key='warehouseName')
    customer_reference = NullableString(data_key='customerReference')
    external_reference = NullableString(data_key='externalReference')
    note = NullableString()
    total_amount = Money(fallback=ZERO, data_key='totalAmount')
    currency = DisplayString()
    lines = Lines(SaleLineSchema())
    movement_id = NullableString(data_key='movementId')
    created_by = DisplayString(data_key='createdBy')
    created_at = Timestamp(data_key='createdAt')
    confirmed_at = Timestamp(data_key='confirmedAt')
    cancelled_at = Timestamp(data_key='cancelledAt')

    @post_load
    def make_sale(self, data, **kwargs):
        return Sale(**data)


_schema = SaleSchema()


def to_domain(payload) -> Sale:
    """Map one wire sale (list item or detail) to the domain entity"""
    return load_entity(_schema, payload, 'Sale')
