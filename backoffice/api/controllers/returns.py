"""
Return Controller
"""

from flask import Blueprint, abort, jsonify

from backoffice.api.dependencies import load_body, load_filters, return_service
from backoffice.utils.schemas import (
    CreateReturnRequestSchema, ReturnFiltersSchema, ReturnLineRequestSchema, UpdateReturnRequestSchema
)

returns_bp = Blueprint('returns', __name__)

filters_schema = ReturnFiltersSchema()
create_schema = CreateReturnRequestSchema()
update_schema = UpdateReturnRequestSchema()
line_schema = ReturnLineRequestSchema()


@returns_bp.route('/returns', methods=['GET'])
async def list_returns():
    result = await return_service().list(load_filters(filters_schema))
    return jsonify(result.to_dict()), 200


@returns_bp.route('/returns/<return_id>', methods=['GET'])
async def get_return(return_id):
    sales_return = await return_service().get(return_id)
    if sales_return is None:
        abort(404, description=f'Return {return_id} not found')
    return jsonify(sales_return.to_dict()), 200


@returns_bp.route('/returns', methods=['POST'])
async def create_return():
    sales_return = await return_service().create(load_body(create_schema))
    return jsonify(sales_return.to_dict()), 201


@returns_bp.route('/returns/<return_id>', methods=['PUT'])
async def update_return(return_id):
    sales_return = await return_service().update(return_id, load_body(update_schema))
    return jsonify(sales_return.to_dict()), 200


@returns_bp.route('/returns/<return_id>/confirm', methods=['POST'])
async def confirm_return(return_id):
    sales_return = await return_service().confirm(return_id)
    return jsonify(sales_return.to_dict()), 200


@returns_bp.route('/returns/<return_id>/cancel', methods=['POST'])
async def cancel_return(return_id):
    sales_return = await return_service().cancel(return_id)
    return jsonify(sales_return.to_dict()), 200


@returns_bp.route('/returns/<return_id>/lines', methods=['POST'])
async def add_return_line(return_id):
    sales_return = await return_service().add_line(return_id, load_body(line_schema))
    return jsonify(sales_return.to_dict()), 201


@returns_bp.route('/returns/<return_id>/lines/<line_id>', methods=['DELETE'])
async def remove_return_line(return_id, line_id):
    sales_return = await return_service().remove_line(return_id, line_id)
    return jsonify(sales_return.to_dict()), 200
