"""
Back-office gateway

Flask backend-for-frontend that exposes inventory movements, transfers,
sales, returns and stock to the back-office UI, keeping a per-tenant query
cache in step with every successful mutation.
"""

from backoffice.api.main import create_app

__all__ = ['create_app']
