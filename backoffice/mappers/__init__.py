"""
Wire-to-domain mappers

Each module exposes `to_domain(payload)` which turns one remote API object
into a frozen domain entity or raises PayloadMappingError.
"""

from . import pagination, role, sale, sales_return, stock, stock_movement, transfer, user

__all__ = ['pagination', 'role', 'sale', 'sales_return', 'stock', 'stock_movement', 'transfer', 'user']
