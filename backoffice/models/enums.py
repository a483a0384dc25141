"""
Model Enums
"""

from enum import Enum


class MovementType(Enum):
    IN = "IN"
    OUT = "OUT"
    ADJUST_IN = "ADJUST_IN"
    ADJUST_OUT = "ADJUST_OUT"
    TRANSFER_IN = "TRANSFER_IN"
    TRANSFER_OUT = "TRANSFER_OUT"


class MovementStatus(Enum):
    DRAFT = "DRAFT"
    POSTED = "POSTED"
    VOID = "VOID"


class TransferStatus(Enum):
    PENDING = "PENDING"
    IN_TRANSIT = "IN_TRANSIT"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class SaleStatus(Enum):
    DRAFT = "DRAFT"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class ReturnStatus(Enum):
    DRAFT = "DRAFT"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class ReturnType(Enum):
    RETURN_CUSTOMER = "RETURN_CUSTOMER"
    RETURN_SUPPLIER = "RETURN_SUPPLIER"


ENTRY_MOVEMENT_TYPES = frozenset({MovementType.IN, MovementType.ADJUST_IN, MovementType.TRANSFER_IN})
EXIT_MOVEMENT_TYPES = frozenset({MovementType.OUT, MovementType.ADJUST_OUT, MovementType.TRANSFER_OUT})


class UserStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    LOCKED = "LOCKED"
