from datetime import datetime, timezone
from decimal import Decimal

import pytest

from backoffice.exceptions import PayloadMappingError
from backoffice.mappers import role, sale, sales_return, stock, stock_movement, transfer
from backoffice.mappers import user as user_mapper
from backoffice.models import MovementStatus, MovementType, ReturnType, SaleStatus, TransferStatus, UserStatus
from tests.conftest import (
    generate_movement_data, generate_return_data, generate_role_data, generate_sale_data, generate_stock_data,
    generate_transfer_data, generate_user_data
)


class TestStockMovementMapper:

    def test_maps_full_payload(self):
        movement = stock_movement.to_domain(generate_movement_data())

        assert movement.id == 'mov-1'
        assert movement.document_number == 'MOV-0001'
        assert movement.type == MovementType.IN
        assert movement.status == MovementStatus.DRAFT
        assert movement.total_amount == Decimal('62.5')
        assert movement.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert movement.lines[0].product_sku == 'WID-001'
        assert movement.lines[0].unit_cost == Decimal('12.5')

    def test_minimal_payload_gets_defaults(self):
        movement = stock_movement.to_domain({'id': 'mov-2', 'type': 'OUT', 'status': 'POSTED'})

        assert movement.document_number == ''
        assert movement.warehouse_name == ''
        assert movement.reference is None
        assert movement.note is None
        assert movement.lines == ()
        assert movement.total_amount == Decimal('0')
        assert movement.created_at is None
        assert movement.posted_at is None

    def test_non_string_nullable_field_maps_to_none(self):
        movement = stock_movement.to_domain(generate_movement_data(note={'text': 'odd'}, reference=42))

        assert movement.note is None
        assert movement.reference is None

    def test_unparseable_date_maps_to_none(self):
        movement = stock_movement.to_domain(generate_movement_data(postedAt='not-a-date', createdAt=123))

        assert movement.posted_at is None
        assert movement.created_at is None

    def test_unknown_keys_are_ignored(self):
        movement = stock_movement.to_domain(generate_movement_data(somethingNew={'a': 1}))

        assert movement.id == 'mov-1'

    @pytest.mark.parametrize('payload', [
        {'type': 'IN', 'status': 'DRAFT'},
        {'id': 'mov-1', 'type': 'IN'},
        {'id': 'mov-1', 'status': 'DRAFT'},
        {'id': 'mov-1', 'type': 'SIDEWAYS', 'status': 'DRAFT'},
        {'id': None, 'type': 'IN', 'status': 'DRAFT'},
    ])
    def test_missing_or_invalid_identifiers_raise(self, payload):
        with pytest.raises(PayloadMappingError) as exc_info:
            stock_movement.to_domain(payload)

        assert exc_info.value.entity == 'StockMovement'

    def test_non_object_payload_raises(self):
        with pytest.raises(PayloadMappingError):
            stock_movement.to_domain(['not', 'an', 'object'])

    def test_mapping_is_deterministic(self):
        payload = generate_movement_data()

        assert stock_movement.to_domain(payload) == stock_movement.to_domain(payload)

    def test_missing_line_fields_degrade(self):
        movement = stock_movement.to_domain(generate_movement_data(lines=[{'productId': 'p9'}, 'garbage']))

        assert len(movement.lines) == 1
        line = movement.lines[0]
        assert line.product_id == 'p9'
        assert line.product_name == ''
        assert line.quantity == 0
        assert line.unit_cost is None


class TestTransferMapper:

    def test_maps_status(self):
        item = transfer.to_domain(generate_transfer_data(status='IN_TRANSIT'))

        assert item.status == TransferStatus.IN_TRANSIT
        assert item.from_warehouse_name == 'Main warehouse'

    def test_lines_count_falls_back_to_lines(self):
        item = transfer.to_domain(generate_transfer_data())

        assert item.lines_count == 1

    def test_list_item_keeps_server_count(self):
        payload = generate_transfer_data(linesCount=4)
        del payload['lines']
        item = transfer.to_domain(payload)

        assert item.lines == ()
        assert item.total_items == 4

    @pytest.mark.parametrize('status', ['DRAFT', 'RECEIVED', 'pending', None])
    def test_status_outside_enum_is_malformed(self, status):
        with pytest.raises(PayloadMappingError):
            transfer.to_domain(generate_transfer_data(status=status))


class TestSaleMapper:

    def test_maps_payload(self):
        item = sale.to_domain(generate_sale_data(status='CONFIRMED', confirmedAt='2024-01-17T10:00:00Z'))

        assert item.status == SaleStatus.CONFIRMED
        assert item.confirmed_at == datetime(2024, 1, 17, 10, 0, tzinfo=timezone.utc)
        assert item.lines[0].total_price == Decimal('39.98')
        assert item.customer_reference == 'CUST-9'
        assert item.external_reference is None

    def test_list_item_without_denormalized_fields(self):
        item = sale.to_domain({'id': 'sale-2', 'status': 'DRAFT', 'warehouseId': 'wh-1'})

        assert item.warehouse_name == ''
        assert item.lines == ()
        assert item.can_confirm is False
        assert item.movement_id is None


class TestReturnMapper:

    def test_maps_type(self):
        item = sales_return.to_domain(generate_return_data(type='RETURN_SUPPLIER', saleId=None))

        assert item.type == ReturnType.RETURN_SUPPLIER
        assert item.sale_id is None
        assert item.lines[0].original_unit_cost == Decimal('12.5')

    def test_missing_type_is_malformed(self):
        payload = generate_return_data()
        del payload['type']

        with pytest.raises(PayloadMappingError):
            sales_return.to_domain(payload)

    def test_absent_optional_money_stays_none(self):
        payload = generate_return_data(lines=[{'id': 'rl-2', 'productId': 'p1', 'quantity': 1}])
        line = sales_return.to_domain(payload).lines[0]

        assert line.original_sale_price is None
        assert line.original_unit_cost is None
        assert line.total_price == Decimal('0')


class TestStockMapper:

    def test_available_falls_back_to_quantity(self):
        payload = generate_stock_data()
        del payload['availableQuantity']
        item = stock.to_domain(payload)

        assert item.available_quantity == 40

    def test_missing_last_movement(self):
        item = stock.to_domain(generate_stock_data(lastMovementAt=None))

        assert item.last_movement_at is None


class TestUserMapper:

    def test_maps_payload(self):
        user = user_mapper.to_domain(generate_user_data())

        assert user.status == UserStatus.ACTIVE
        assert user.full_name == 'Jane Doe'
        assert user.roles == ('Cashier',)
        assert user.has_role('Cashier')
        assert user.last_login_at == datetime(2024, 1, 19, 7, 45, tzinfo=timezone.utc)

    def test_non_string_roles_are_dropped(self):
        user = user_mapper.to_domain(generate_user_data(roles=['Cashier', 7, None]))

        assert user.roles == ('Cashier',)

    def test_locked_user(self):
        user = user_mapper.to_domain(generate_user_data(status='LOCKED', roles=None))

        assert user.is_locked
        assert not user.is_active
        assert user.roles == ()

    def test_missing_status_is_malformed(self):
        payload = generate_user_data()
        del payload['status']

        with pytest.raises(PayloadMappingError):
            user_mapper.to_domain(payload)


class TestRoleMapper:

    def test_maps_permissions(self):
        item = role.to_domain(generate_role_data())

        assert item.permission_count == 1
        assert item.permissions[0].module == 'sales'
        assert item.permissions[0].description is None
        assert item.can_edit and item.can_delete

    def test_system_role_is_locked_down(self):
        item = role.to_domain(generate_role_data(isSystem=True))

        assert not item.can_edit
        assert not item.can_delete

    def test_flags_default_when_unreadable(self):
        item = role.to_domain({'id': 'role-9', 'isActive': 'yes', 'isSystem': 1})

        assert item.is_active is True
        assert item.is_system is False
        assert item.permissions == ()
        assert item.description is None
