"""
Request payloads sent to the remote API for document mutations
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from backoffice.utils.formatting import to_camel_case
from .enums import MovementType, ReturnType


def _wire_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, tuple):
        return [_wire_value(item) for item in value]
    if hasattr(value, 'to_payload'):
        return value.to_payload()
    return value


class Command:
    """Base for payload dataclasses: camelCase keys, None fields omitted"""

    def to_payload(self) -> Dict[str, Any]:
        payload = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            payload[to_camel_case(item.name)] = _wire_value(value)
        return payload


@dataclass(frozen=True)
class CreateMovementLineDto(Command):
    product_id: str
    quantity: int
    unit_cost: Optional[Decimal] = None


@dataclass(frozen=True)
class CreateMovementDto(Command):
    warehouse_id: str
    type: MovementType
    lines: Tuple[CreateMovementLineDto, ...] = ()
    reference: Optional[str] = None
    reason: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class CreateTransferLineDto(Command):
    product_id: str
    quantity: int


@dataclass(frozen=True)
class CreateTransferDto(Command):
    from_warehouse_id: str
    to_warehouse_id: str
    lines: Tuple[CreateTransferLineDto, ...] = ()
    note: Optional[str] = None


@dataclass(frozen=True)
class CreateSaleLineDto(Command):
    product_id: str
    quantity: int
    sale_price: Decimal
    currency: Optional[str] = None


@dataclass(frozen=True)
class CreateSaleDto(Command):
    warehouse_id: str
    lines: Tuple[CreateSaleLineDto, ...] = ()
    customer_reference: Optional[str] = None
    external_reference: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class UpdateSaleDto(Command):
    customer_reference: Optional[str] = None
    external_reference: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class CreateReturnLineDto(Command):
    product_id: str
    quantity: int
    original_sale_price: Optional[Decimal] = None
    original_unit_cost: Optional[Decimal] = None
    currency: Optional[str] = None


@dataclass(frozen=True)
class CreateReturnDto(Command):
    type: ReturnType
    warehouse_id: str
    lines: Tuple[CreateReturnLineDto, ...] = ()
    sale_id: Optional[str] = None
    source_movement_id: Optional[str] = None
    reason: Optional[str] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class UpdateReturnDto(Command):
    reason: Optional[str] = None
    note: Optional[str] = None
