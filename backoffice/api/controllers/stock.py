"""
Stock Controller - read-only stock levels
"""

from flask import Blueprint, abort, jsonify

from backoffice.api.dependencies import load_filters, stock_service
from backoffice.utils.schemas import StockFiltersSchema

stock_bp = Blueprint('stock', __name__)

filters_schema = StockFiltersSchema()


@stock_bp.route('/inventory/stock', methods=['GET'])
async def list_stock():
    result = await stock_service().list(load_filters(filters_schema))
    return jsonify(result.to_dict()), 200


@stock_bp.route('/inventory/stock/product/<product_id>/warehouse/<warehouse_id>', methods=['GET'])
async def get_stock_location(product_id, warehouse_id):
    stock = await stock_service().get_location(product_id, warehouse_id)
    if stock is None:
        abort(404, description=f'No stock for product {product_id} in warehouse {warehouse_id}')
    return jsonify(stock.to_dict()), 200
