#!/usr/bin/env python3
"""
Back-office gateway API
Flask application sitting between the back-office UI and the business API.
"""

import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

logger = logging.getLogger(__name__)


def create_app(config_name='default'):
    """Application factory pattern for API"""
    # Load environment variables before the config classes read them
    load_dotenv()

    app = Flask(__name__)

    from config import config
    app.config.from_object(config[config_name])

    # Correlation ids on every request and on every upstream call
    from backoffice.api.middlewares.correlation_id import CorrelationIdMiddleware, init_correlation_id_logging
    CorrelationIdMiddleware(app)
    init_correlation_id_logging(app)

    CORS(app, origins=app.config.get('CORS_ORIGINS', ['*']))

    # Shared query cache store
    from backoffice.cache import init_redis
    init_redis(app)

    if not app.testing:
        logging.basicConfig(
            level=getattr(logging, app.config['LOG_LEVEL'].upper()),
            format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )

    from backoffice.utils.telemetry import init_telemetry, instrument_app
    if init_telemetry(app):
        instrument_app(app)

    # Register blueprints/controllers
    from backoffice.api.controllers import (
        health_bp, movements_bp, returns_bp, roles_bp, sales_bp, stock_bp, transfers_bp, users_bp
    )
    for blueprint in (movements_bp, transfers_bp, sales_bp, returns_bp, stock_bp, users_bp, roles_bp):
        app.register_blueprint(blueprint, url_prefix='/api/v1')
    app.register_blueprint(health_bp)

    from backoffice.utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    app.logger.info(f"Back-office gateway configured for {app.config['API_BASE_URL']}")
    return app


def main():
    """Main application entry point for API"""
    env = os.environ.get('FLASK_ENV', 'production')

    if env != 'testing':
        from backoffice.validators.config_validator import validate_config
        validate_config()

    app = create_app(env)

    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 5000))
    debug = env == 'development'

    logger.info(f"Starting back-office gateway on {host}:{port} (env: {env})")

    app.run(
        host=host,
        port=port,
        debug=debug,
        threaded=True
    )


if __name__ == '__main__':
    main()
