"""
Transfer Controller
"""

from flask import Blueprint, abort, jsonify

from backoffice.api.dependencies import load_body, load_filters, transfer_service
from backoffice.utils.schemas import (
    CreateTransferRequestSchema, TransferFiltersSchema, TransferStatusRequestSchema
)

transfers_bp = Blueprint('transfers', __name__)

filters_schema = TransferFiltersSchema()
create_schema = CreateTransferRequestSchema()
status_schema = TransferStatusRequestSchema()


@transfers_bp.route('/inventory/transfers', methods=['GET'])
async def list_transfers():
    result = await transfer_service().list(load_filters(filters_schema))
    return jsonify(result.to_dict()), 200


@transfers_bp.route('/inventory/transfers/<transfer_id>', methods=['GET'])
async def get_transfer(transfer_id):
    transfer = await transfer_service().get(transfer_id)
    if transfer is None:
        abort(404, description=f'Transfer {transfer_id} not found')
    return jsonify(transfer.to_dict()), 200


@transfers_bp.route('/inventory/transfers', methods=['POST'])
async def create_transfer():
    dto = load_body(create_schema)
    transfer = await transfer_service().create(dto)
    return jsonify(transfer.to_dict()), 201


@transfers_bp.route('/inventory/transfers/<transfer_id>/status', methods=['PATCH'])
async def update_transfer_status(transfer_id):
    """Dispatch, complete or cancel a transfer"""
    data = load_body(status_schema)
    transfer = await transfer_service().update_status(transfer_id, data['status'])
    return jsonify(transfer.to_dict()), 200
