"""
Flask Server for the Rob Tracker
Serves the tracking spreadsheet as a JSON API plus the static front-end.
Features: fresh data on every request, persisted AJL status, centralized error handling
"""

from flask import Flask, send_from_directory
from flask_cors import CORS
from dotenv import load_dotenv
from typing import Optional
import logging

from api.routes import api_bp
from api.middleware.error_handler import setup_error_handlers, setup_request_logging
from app.config import AppConfig, get_config
from services.tracker_service import TrackerService

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None, service: Optional[TrackerService] = None) -> Flask:
    """
    Build the Flask app

    Args:
        config: Settings; read from the environment when omitted
        service: Tracker service; file-backed from config when omitted
    """
    config = config or get_config()
    service = service or TrackerService.from_config(config)

    app = Flask(__name__, static_folder=str(config.static_dir), static_url_path='/static')
    app.config['DEBUG'] = config.debug
    # keep display column order in responses
    app.json.sort_keys = False
    app.config['TRACKER_CONFIG'] = config
    app.extensions['tracker_service'] = service

    CORS(app, origins=config.cors_origin_list())
    setup_error_handlers(app)
    if config.debug:
        setup_request_logging(app)

    app.register_blueprint(api_bp)

    @app.route('/', methods=['GET'])
    def index():
        """Front-end entry page"""
        return send_from_directory(app.static_folder, 'index.html')

    return app


def main():
    load_dotenv()
    config = get_config()

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = create_app(config)

    logger.info("============================================================")
    logger.info("Rob Tracker")
    logger.info("============================================================")
    logger.info(f"Data directory: {config.data_dir}")
    logger.info(f"Status summary aircraft: {config.tracked_aircraft}")
    logger.info(f"Rob Tracker server running on http://localhost:{config.port}")
    app.run(host='0.0.0.0', port=config.port, debug=config.debug)


if __name__ == '__main__':
    main()
