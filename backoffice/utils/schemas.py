"""
Request schemas for the BFF endpoints

Bodies and query strings arrive in the UI's camelCase shape; each schema
loads straight into the filter or command dataclass the services expect.
"""

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from backoffice.models import (
    CreateMovementDto, CreateMovementLineDto, CreateReturnDto, CreateReturnLineDto, CreateSaleDto,
    CreateSaleLineDto, CreateTransferDto, CreateTransferLineDto, MovementFilters, MovementStatus,
    MovementType, ReturnFilters, ReturnStatus, ReturnType, SaleFilters, SaleStatus, StockFilters,
    TransferFilters, TransferStatus, UpdateReturnDto, UpdateSaleDto, UserFilters, UserStatus
)


class RequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE


# Query string filters

class PageSchema(RequestSchema):
    page = fields.Int(validate=validate.Range(min=1))
    limit = fields.Int(validate=validate.Range(min=1))


class MovementFiltersSchema(PageSchema):
    warehouse_id = fields.Str(data_key='warehouseId')
    product_id = fields.Str(data_key='productId')
    type = fields.Enum(MovementType, by_value=True)
    status = fields.Enum(MovementStatus, by_value=True)
    start_date = fields.Str(data_key='startDate')
    end_date = fields.Str(data_key='endDate')
    search = fields.Str()

    @post_load
    def make_filters(self, data, **kwargs):
        return MovementFilters(**data)


class TransferFiltersSchema(PageSchema):
    from_warehouse_id = fields.Str(data_key='fromWarehouseId')
    to_warehouse_id = fields.Str(data_key='toWarehouseId')
    status = fields.Enum(TransferStatus, by_value=True)
    search = fields.Str()

    @post_load
    def make_filters(self, data, **kwargs):
        return TransferFilters(**data)


class SaleFiltersSchema(PageSchema):
    warehouse_id = fields.Str(data_key='warehouseId')
    status = fields.Enum(SaleStatus, by_value=True)
    start_date = fields.Str(data_key='startDate')
    end_date = fields.Str(data_key='endDate')
    search = fields.Str()
    sort_by = fields.Str(data_key='sortBy')
    sort_order = fields.Str(data_key='sortOrder', validate=validate.OneOf(['asc', 'desc']))

    @post_load
    def make_filters(self, data, **kwargs):
        return SaleFilters(**data)


class ReturnFiltersSchema(SaleFiltersSchema):
    status = fields.Enum(ReturnStatus, by_value=True)
    type = fields.Enum(ReturnType, by_value=True)

    @post_load
    def make_filters(self, data, **kwargs):
        return ReturnFilters(**data)


class StockFiltersSchema(PageSchema):
    product_id = fields.Str(data_key='productId')
    warehouse_id = fields.Str(data_key='warehouseId')
    search = fields.Str()
    low_stock = fields.Bool(data_key='lowStock')

    @post_load
    def make_filters(self, data, **kwargs):
        return StockFilters(**data)


class UserFiltersSchema(PageSchema):
    status = fields.Enum(UserStatus, by_value=True)
    search = fields.Str()

    @post_load
    def make_filters(self, data, **kwargs):
        return UserFilters(**data)


# Movement bodies

class MovementLineRequestSchema(RequestSchema):
    product_id = fields.Str(required=True, data_key='productId', validate=validate.Length(min=1))
    quantity = fields.Int(required=True, validate=validate.Range(min=1))
    unit_cost = fields.Decimal(data_key='unitCost', allow_none=True, validate=validate.Range(min=0))

    @post_load
    def make_line(self, data, **kwargs):
        return CreateMovementLineDto(**data)


class CreateMovementRequestSchema(RequestSchema):
    warehouse_id = fields.Str(required=True, data_key='warehouseId', validate=validate.Length(min=1))
    type = fields.Enum(MovementType, by_value=True, required=True)
    lines = fields.List(fields.Nested(MovementLineRequestSchema), required=True, validate=validate.Length(min=1))
    reference = fields.Str(allow_none=True)
    reason = fields.Str(allow_none=True, validate=validate.Length(max=500))
    note = fields.Str(allow_none=True, validate=validate.Length(max=1000))

    @post_load
    def make_dto(self, data, **kwargs):
        data['lines'] = tuple(data['lines'])
        return CreateMovementDto(**data)


# Transfer bodies

class TransferLineRequestSchema(RequestSchema):
    product_id = fields.Str(required=True, data_key='productId', validate=validate.Length(min=1))
    quantity = fields.Int(required=True, validate=validate.Range(min=1))

    @post_load
    def make_line(self, data, **kwargs):
        return CreateTransferLineDto(**data)


class CreateTransferRequestSchema(RequestSchema):
    from_warehouse_id = fields.Str(required=True, data_key='fromWarehouseId', validate=validate.Length(min=1))
    to_warehouse_id = fields.Str(required=True, data_key='toWarehouseId', validate=validate.Length(min=1))
    lines = fields.List(fields.Nested(TransferLineRequestSchema), required=True, validate=validate.Length(min=1))
    note = fields.Str(allow_none=True, validate=validate.Length(max=1000))

    @validates_schema
    def validate_warehouses(self, data, **kwargs):
        if data.get('from_warehouse_id') and data.get('from_warehouse_id') == data.get('to_warehouse_id'):
            raise ValidationError('Source and destination warehouse must differ', 'toWarehouseId')

    @post_load
    def make_dto(self, data, **kwargs):
        data['lines'] = tuple(data['lines'])
        return CreateTransferDto(**data)


class TransferStatusRequestSchema(RequestSchema):
    """Target status; a transfer never goes back to PENDING"""
    status = fields.Enum(
        TransferStatus,
        by_value=True,
        required=True,
        validate=validate.OneOf([
            TransferStatus.IN_TRANSIT, TransferStatus.COMPLETED, TransferStatus.CANCELLED
        ])
    )


# Sale bodies

class SaleLineRequestSchema(RequestSchema):
    product_id = fields.Str(required=True, data_key='productId', validate=validate.Length(min=1))
    quantity = fields.Int(required=True, validate=validate.Range(min=1))
    sale_price = fields.Decimal(required=True, data_key='salePrice', validate=validate.Range(min=0))
    currency = fields.Str(allow_none=True)

    @post_load
    def make_line(self, data, **kwargs):
        return CreateSaleLineDto(**data)


class CreateSaleRequestSchema(RequestSchema):
    warehouse_id = fields.Str(required=True, data_key='warehouseId', validate=validate.Length(min=1))
    lines = fields.List(fields.Nested(SaleLineRequestSchema), required=True, validate=validate.Length(min=1))
    customer_reference = fields.Str(data_key='customerReference', allow_none=True)
    external_reference = fields.Str(data_key='externalReference', allow_none=True)
    note = fields.Str(allow_none=True, validate=validate.Length(max=1000))

    @post_load
    def make_dto(self, data, **kwargs):
        data['lines'] = tuple(data['lines'])
        return CreateSaleDto(**data)


class UpdateSaleRequestSchema(RequestSchema):
    customer_reference = fields.Str(data_key='customerReference', allow_none=True)
    external_reference = fields.Str(data_key='externalReference', allow_none=True)
    note = fields.Str(allow_none=True, validate=validate.Length(max=1000))

    @post_load
    def make_dto(self, data, **kwargs):
        return UpdateSaleDto(**data)


# Return bodies

class ReturnLineRequestSchema(RequestSchema):
    product_id = fields.Str(required=True, data_key='productId', validate=validate.Length(min=1))
    quantity = fields.Int(required=True, validate=validate.Range(min=1))
    original_sale_price = fields.Decimal(data_key='originalSalePrice', allow_none=True,
                                         validate=validate.Range(min=0))
    original_unit_cost = fields.Decimal(data_key='originalUnitCost', allow_none=True,
                                        validate=validate.Range(min=0))
    currency = fields.Str(allow_none=True)

    @post_load
    def make_line(self, data, **kwargs):
        return CreateReturnLineDto(**data)


class CreateReturnRequestSchema(RequestSchema):
    type = fields.Enum(ReturnType, by_value=True, required=True)
    warehouse_id = fields.Str(required=True, data_key='warehouseId', validate=validate.Length(min=1))
    lines = fields.List(fields.Nested(ReturnLineRequestSchema), required=True, validate=validate.Length(min=1))
    sale_id = fields.Str(data_key='saleId', allow_none=True)
    source_movement_id = fields.Str(data_key='sourceMovementId', allow_none=True)
    reason = fields.Str(allow_none=True, validate=validate.Length(max=500))
    note = fields.Str(allow_none=True, validate=validate.Length(max=1000))

    @post_load
    def make_dto(self, data, **kwargs):
        data['lines'] = tuple(data['lines'])
        return CreateReturnDto(**data)


class UpdateReturnRequestSchema(RequestSchema):
    reason = fields.Str(allow_none=True, validate=validate.Length(max=500))
    note = fields.Str(allow_none=True, validate=validate.Length(max=1000))

    @post_load
    def make_dto(self, data, **kwargs):
        return UpdateReturnDto(**data)


# User roles

class AssignRoleRequestSchema(RequestSchema):
    role_id = fields.Str(required=True, data_key='roleId', validate=validate.Length(min=1))
