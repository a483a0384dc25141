"""
Transfer mapper
"""

from marshmallow import fields, post_load

from backoffice.models import Transfer, TransferLine, TransferStatus
from .base import WireSchema, load_entity
from .fields import ZERO, Count, DisplayString, Lines, Money, NullableString, Timestamp


class TransferLineSchema(WireSchema):
    id = DisplayString()
    product_id = DisplayString(data_key='productId')
    product_name = DisplayString(data_key='productName')
    product_sku = DisplayString(data_key='productSku')
    quantity = Count(fallback=0)
    received_quantity = Count(data_key='receivedQuantity')

    @post_load
    def make_line(self, data, **kwargs):
        return TransferLine(**data)


class TransferSchema(WireSchema):
    id = fields.String(required=True)
    document_number = DisplayString(data_key='transferNumber')
    from_warehouse_id = DisplayString(data_key='fromWarehouseId')
    from_warehouse_name = DisplayString(data_key='fromWarehouseName')
    to_warehouse_id = DisplayString(data_key='toWarehouseId')
    to_warehouse_name = DisplayString(data_key='toWarehouseName')
    status = fields.Enum(TransferStatus, by_value=True, required=True)
    note = NullableString()
    lines = Lines(TransferLineSchema())
    lines_count = Count(data_key='linesCount')
    total_amount = Money(fallback=ZERO, data_key='totalAmount')
    currency = DisplayString()
    created_by = DisplayString(data_key='createdBy')
    created_at = Timestamp(data_key='createdAt')
    completed_at = Timestamp(data_key='completedAt')
    cancelled_at = Timestamp(data_key='cancelledAt')

    @post_load
    def make_transfer(self, data, **kwargs):
        # list responses carry only the count, detail responses only the lines
        if data['lines_count'] is None:
            data['lines_count'] = len(data['lines'])
        return Transfer(**data)


_schema = TransferSchema()


def to_domain(payload) -> Transfer:
    """Map one wire transfer to the domain entity"""
    return load_entity(_schema, payload, 'Transfer')
