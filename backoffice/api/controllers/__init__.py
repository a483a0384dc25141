"""
Controllers package initialization
"""

# Import all blueprints for registration
from backoffice.api.controllers.health import health_bp
from backoffice.api.controllers.movements import movements_bp
from backoffice.api.controllers.returns import returns_bp
from backoffice.api.controllers.roles import roles_bp
from backoffice.api.controllers.sales import sales_bp
from backoffice.api.controllers.stock import stock_bp
from backoffice.api.controllers.transfers import transfers_bp
from backoffice.api.controllers.users import users_bp

__all__ = [
    'health_bp', 'movements_bp', 'returns_bp', 'roles_bp', 'sales_bp', 'stock_bp', 'transfers_bp',
    'users_bp'
]
