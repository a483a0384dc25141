"""
User Controller - account reads and role links
"""

from flask import Blueprint, abort, jsonify

from backoffice.api.dependencies import load_body, load_filters, user_role_service, user_service
from backoffice.utils.schemas import AssignRoleRequestSchema, UserFiltersSchema

users_bp = Blueprint('users', __name__)

filters_schema = UserFiltersSchema()
assign_schema = AssignRoleRequestSchema()


@users_bp.route('/users', methods=['GET'])
async def list_users():
    result = await user_service().list(load_filters(filters_schema))
    return jsonify(result.to_dict()), 200


@users_bp.route('/users/<user_id>', methods=['GET'])
async def get_user(user_id):
    user = await user_service().get(user_id)
    if user is None:
        abort(404, description=f'User {user_id} not found')
    return jsonify(user.to_dict()), 200


@users_bp.route('/users/<user_id>/roles', methods=['POST'])
async def assign_role(user_id):
    data = load_body(assign_schema)
    await user_role_service().assign_role(user_id, data['role_id'])
    return '', 204


@users_bp.route('/users/<user_id>/roles/<role_id>', methods=['DELETE'])
async def remove_role(user_id, role_id):
    await user_role_service().remove_role(user_id, role_id)
    return '', 204
