"""
Lenient marshmallow fields for wire payloads

The remote API omits denormalized fields, sends nulls for absent values and
occasionally sends the wrong JSON type. These fields never raise: anything
they cannot read degrades to their fallback value.
"""

from decimal import Decimal
from typing import Any, Optional

from marshmallow import Schema, ValidationError, fields, missing

ZERO = Decimal('0')


class LenientField(fields.Field):
    """Field that returns `fallback` for missing, null or unreadable input"""

    def __init__(self, fallback: Any = None, **kwargs):
        super().__init__(**kwargs)
        self.fallback = fallback

    def deserialize(self, value, attr=None, data=None, **kwargs):
        if value is missing or value is None:
            return self.fallback
        try:
            return self._coerce(value)
        except (ValidationError, TypeError, ValueError, ArithmeticError):
            return self.fallback

    def _coerce(self, value: Any) -> Any:
        return value


class DisplayString(LenientField):
    """Denormalized display text (names, SKUs, numbers); falls back to ''"""

    def __init__(self, **kwargs):
        super().__init__(fallback='', **kwargs)

    def _coerce(self, value: Any) -> str:
        if isinstance(value, bool):
            return self.fallback
        if isinstance(value, (str, int, float)):
            return str(value)
        return self.fallback


class NullableString(LenientField):
    """Semantically optional text; anything that is not a string becomes None"""

    def _coerce(self, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class Timestamp(LenientField):
    """ISO-8601 string parsed into a datetime, None when absent or unparseable"""

    _parser = fields.DateTime(format='iso')

    def _coerce(self, value: Any):
        if not isinstance(value, str):
            return None
        return self._parser.deserialize(value)


class Money(LenientField):
    """Monetary figure as Decimal"""

    _parser = fields.Decimal()

    def _coerce(self, value: Any) -> Optional[Decimal]:
        if isinstance(value, bool):
            return self.fallback
        return self._parser.deserialize(value)


class Count(LenientField):
    """Integer quantity"""

    _parser = fields.Integer(strict=False)

    def _coerce(self, value: Any) -> Optional[int]:
        if isinstance(value, bool):
            return self.fallback
        return self._parser.deserialize(value)


class Lines(LenientField):
    """Nested line items mapped element-wise; absent or invalid lists become ()"""

    def __init__(self, schema: Schema, **kwargs):
        super().__init__(fallback=(), **kwargs)
        self.line_schema = schema

    def _coerce(self, value: Any):
        if not isinstance(value, list):
            return self.fallback
        return tuple(self.line_schema.load(item) for item in value if isinstance(item, dict))


class Flag(LenientField):
    """Boolean; only real JSON booleans count"""

    def __init__(self, fallback: bool = False, **kwargs):
        super().__init__(fallback=fallback, **kwargs)

    def _coerce(self, value: Any) -> bool:
        return value if isinstance(value, bool) else self.fallback


class Strings(LenientField):
    """List of strings; non-string elements are dropped"""

    def __init__(self, **kwargs):
        super().__init__(fallback=(), **kwargs)

    def _coerce(self, value: Any):
        if not isinstance(value, list):
            return self.fallback
        return tuple(item for item in value if isinstance(item, str))
