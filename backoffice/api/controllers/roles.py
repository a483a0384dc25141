"""
Role Controller
"""

from flask import Blueprint, abort, jsonify

from backoffice.api.dependencies import role_service

roles_bp = Blueprint('roles', __name__)


@roles_bp.route('/roles', methods=['GET'])
async def list_roles():
    result = await role_service().list()
    return jsonify(result.to_dict()), 200


@roles_bp.route('/roles/<role_id>', methods=['GET'])
async def get_role(role_id):
    role = await role_service().get(role_id)
    if role is None:
        abort(404, description=f'Role {role_id} not found')
    return jsonify(role.to_dict()), 200
