"""
Stock Movement Controller
"""

from flask import Blueprint, abort, jsonify

from backoffice.api.dependencies import load_body, load_filters, movement_service
from backoffice.utils.schemas import CreateMovementRequestSchema, MovementFiltersSchema

movements_bp = Blueprint('movements', __name__)

filters_schema = MovementFiltersSchema()
create_schema = CreateMovementRequestSchema()


@movements_bp.route('/inventory/movements', methods=['GET'])
async def list_movements():
    """List stock movements matching the query filters"""
    result = await movement_service().list(load_filters(filters_schema))
    return jsonify(result.to_dict()), 200


@movements_bp.route('/inventory/movements/<movement_id>', methods=['GET'])
async def get_movement(movement_id):
    movement = await movement_service().get(movement_id)
    if movement is None:
        abort(404, description=f'Stock movement {movement_id} not found')
    return jsonify(movement.to_dict()), 200


@movements_bp.route('/inventory/movements', methods=['POST'])
async def create_movement():
    dto = load_body(create_schema)
    movement = await movement_service().create(dto)
    return jsonify(movement.to_dict()), 201


@movements_bp.route('/inventory/movements/<movement_id>/post', methods=['POST'])
async def post_movement(movement_id):
    """Post a draft movement; stock changes on the server"""
    movement = await movement_service().post(movement_id)
    return jsonify(movement.to_dict()), 200


@movements_bp.route('/inventory/movements/<movement_id>/void', methods=['POST'])
async def void_movement(movement_id):
    """Void a posted movement, reversing its stock effect"""
    movement = await movement_service().void(movement_id)
    return jsonify(movement.to_dict()), 200
