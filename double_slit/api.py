"""
REST API for saved configurations (Flask).

    GET    /api/configurations        -> 200 [configuration, ...]
    POST   /api/configurations        -> 201 configuration | 400 {message, field}
    DELETE /api/configurations/<id>   -> 204 | 400 invalid id | 404 not found
"""
import logging
from typing import Optional

from flask import Flask, jsonify, request

from double_slit import config
from double_slit.errors import ConfigurationNotFoundError, ConfigurationValidationError
from double_slit.logging_config import setup_logging
from double_slit.storage import ConfigurationStore

logger = logging.getLogger(__name__)

CONFIGURATIONS_PATH = "/api/configurations"


def _to_json(configuration):
    return configuration.model_dump(mode="json", by_alias=True)


def create_app(store: Optional[ConfigurationStore] = None) -> Flask:
    app = Flask(__name__)
    if store is None:
        store = ConfigurationStore(config.get_database_path())
    app.config["CONFIGURATION_STORE"] = store

    @app.errorhandler(ConfigurationValidationError)
    def _validation_failed(err):
        return jsonify(message=err.message, field=err.field), 400

    @app.errorhandler(ConfigurationNotFoundError)
    def _not_found(err):
        return jsonify(message="Configuration not found"), 404

    @app.get(CONFIGURATIONS_PATH)
    def list_configurations():
        return jsonify([_to_json(c) for c in store.list()])

    @app.post(CONFIGURATIONS_PATH)
    def create_configuration():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ConfigurationValidationError("Request body must be a JSON object")
        data = store.parse_create(payload)
        return jsonify(_to_json(store.insert(data))), 201

    @app.delete(CONFIGURATIONS_PATH + "/<config_id>")
    def delete_configuration(config_id):
        try:
            config_id = int(config_id)
        except ValueError:
            return jsonify(message="Invalid ID"), 400
        store.delete(config_id)
        return "", 204

    return app


def main():
    setup_logging(config.get_log_level(), config.get_log_file())
    host, port = config.get_api_address()
    logger.info(f"Serving configuration API on http://{host}:{port}{CONFIGURATIONS_PATH}")
    create_app().run(host=host, port=port)


if __name__ == "__main__":
    main()
