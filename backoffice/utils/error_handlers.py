from flask import jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
import httpx
import logging

from backoffice.exceptions import ApiError, InvalidRequestError, PayloadMappingError

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Register application error handlers"""

    @app.errorhandler(ApiError)
    def api_error(error):
        # Upstream rejections keep their status so the UI sees the server's verdict
        logger.warning(f"Upstream API error: {error!r}")
        body = error.to_dict()
        body['code'] = error.code
        return jsonify(body), error.status_code

    @app.errorhandler(PayloadMappingError)
    def payload_mapping_error(error):
        logger.error(f"Unreadable upstream payload: {error}")
        return jsonify({
            'error': 'Bad Gateway',
            'message': f'The upstream service returned a malformed {error.entity}',
            'details': error.messages,
            'status_code': 502
        }), 502

    @app.errorhandler(httpx.HTTPError)
    def transport_error(error):
        logger.error(f"Upstream request failed: {error}")
        return jsonify({
            'error': 'Bad Gateway',
            'message': 'The upstream service could not be reached',
            'status_code': 502
        }), 502

    @app.errorhandler(ValidationError)
    def validation_error(error):
        return jsonify({
            'error': 'Validation Error',
            'message': 'Request data validation failed',
            'details': error.messages,
            'status_code': 400
        }), 400

    @app.errorhandler(InvalidRequestError)
    def invalid_request(error):
        return jsonify({
            'error': 'Invalid Value',
            'message': str(error),
            'status_code': 400
        }), 400

    @app.errorhandler(HTTPException)
    def http_exception(error):
        return jsonify({
            'error': error.name,
            'message': error.description,
            'status_code': error.code
        }), error.code

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {error}")
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred',
            'status_code': 500
        }), 500
