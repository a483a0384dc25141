"""
Sale Controller
"""

from flask import Blueprint, abort, jsonify

from backoffice.api.dependencies import load_body, load_filters, sale_service
from backoffice.utils.schemas import (
    CreateSaleRequestSchema, SaleFiltersSchema, SaleLineRequestSchema, UpdateSaleRequestSchema
)

sales_bp = Blueprint('sales', __name__)

filters_schema = SaleFiltersSchema()
create_schema = CreateSaleRequestSchema()
update_schema = UpdateSaleRequestSchema()
line_schema = SaleLineRequestSchema()


@sales_bp.route('/sales', methods=['GET'])
async def list_sales():
    result = await sale_service().list(load_filters(filters_schema))
    return jsonify(result.to_dict()), 200


@sales_bp.route('/sales/<sale_id>', methods=['GET'])
async def get_sale(sale_id):
    sale = await sale_service().get(sale_id)
    if sale is None:
        abort(404, description=f'Sale {sale_id} not found')
    return jsonify(sale.to_dict()), 200


@sales_bp.route('/sales', methods=['POST'])
async def create_sale():
    sale = await sale_service().create(load_body(create_schema))
    return jsonify(sale.to_dict()), 201


@sales_bp.route('/sales/<sale_id>', methods=['PATCH'])
async def update_sale(sale_id):
    sale = await sale_service().update(sale_id, load_body(update_schema))
    return jsonify(sale.to_dict()), 200


@sales_bp.route('/sales/<sale_id>/confirm', methods=['POST'])
async def confirm_sale(sale_id):
    sale = await sale_service().confirm(sale_id)
    return jsonify(sale.to_dict()), 200


@sales_bp.route('/sales/<sale_id>/cancel', methods=['POST'])
async def cancel_sale(sale_id):
    sale = await sale_service().cancel(sale_id)
    return jsonify(sale.to_dict()), 200


@sales_bp.route('/sales/<sale_id>/lines', methods=['POST'])
async def add_sale_line(sale_id):
    """Add a line; responds with the whole updated sale"""
    sale = await sale_service().add_line(sale_id, load_body(line_schema))
    return jsonify(sale.to_dict()), 201


@sales_bp.route('/sales/<sale_id>/lines/<line_id>', methods=['DELETE'])
async def remove_sale_line(sale_id, line_id):
    sale = await sale_service().remove_line(sale_id, line_id)
    return jsonify(sale.to_dict()), 200
