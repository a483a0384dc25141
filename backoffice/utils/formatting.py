"""
JSON formatting helpers for domain values
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional


def iso_or_none(value: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as ISO-8601, keeping absent values absent"""
    return value.isoformat() if value else None


def money_or_none(value: Optional[Decimal]) -> Optional[str]:
    """Render a monetary figure as a string so no precision is lost in JSON"""
    return str(value) if value is not None else None


def to_camel_case(name: str) -> str:
    """snake_case attribute name -> camelCase wire key"""
    head, *tail = name.split('_')
    return head + ''.join(part.title() for part in tail)
