import os

from flask import Flask, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from app.config import Config
from app.extensions.extensions import cors, ma
from app.extensions.json_store import JsonFileStore, init_json_store
from app.log import configure_logging
from app.routes.auth_routes import auth_bp
from app.routes.comment_routes import comment_bp
from app.routes.main_routes import main_bp
from app.routes.post_routes import post_bp
from app.routes.reaction_routes import reaction_bp


def create_app(test_config=None, store=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    log = configure_logging(app)

    ma.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ALLOWED_ORIGINS"])

    store = init_json_store(app, store)
    if isinstance(store, JsonFileStore):
        os.makedirs(store.data_dir, exist_ok=True)
        log.info("Using JSON collections in %s", store.data_dir)

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(reaction_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")
    app.register_blueprint(main_bp, url_prefix="/api")

    @app.errorhandler(RequestEntityTooLarge)
    def request_too_large(e):
        limit = app.config.get("MAX_CONTENT_LENGTH")
        log.warning("Rejected request body over %s bytes", limit)
        return jsonify({"error": "Request body is too large"}), 413

    return app
