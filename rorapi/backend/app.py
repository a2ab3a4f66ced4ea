from typing import Any, Mapping, Optional

from flask import Flask
from flask_pymongo import PyMongo

from backend.config import Config
from backend.factories.service_factory import ServiceFactory
from backend.models.user_model import UserModel
from shared.modules.cache.cache_store import CacheStore
from shared.modules.cache.redis_cache_store import RedisCacheStore
from shared.modules.log.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(
    config: Optional[Mapping[str, Any]] = None,
    user_model: Optional[UserModel] = None,
    cache_store: Optional[CacheStore] = None,
) -> Flask:
    """
    Build the Flask app and its long-lived store handles.

    The Mongo and Redis clients are created once here and shared by every
    request. Tests pass their own user_model / cache_store to skip both.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    configure_logging(app.config["LOG_LEVEL"])

    if user_model is None:
        mongo = PyMongo(
            app,
            connectTimeoutMS=app.config["MONGO_CONNECT_TIMEOUT_MS"],
            serverSelectionTimeoutMS=app.config["MONGO_CONNECT_TIMEOUT_MS"],
            socketTimeoutMS=app.config["MONGO_SOCKET_TIMEOUT_MS"],
        )
        user_model = UserModel(mongo.db)

    if cache_store is None:
        cache_store = RedisCacheStore(
            host=app.config["REDIS_HOST"],
            port=app.config["REDIS_PORT"],
            db=app.config["REDIS_DB"],
            socket_timeout=app.config["REDIS_SOCKET_TIMEOUT"],
        )

    ServiceFactory.init_app(app, user_model, cache_store)

    # Import and register blueprints after the services are in place
    from backend.api.user_controller import bp as user_controller_bp
    from backend.api.health_controller import bp as health_controller_bp
    app.register_blueprint(user_controller_bp)
    app.register_blueprint(health_controller_bp)

    return app


if __name__ == "__main__":
    app = create_app()
    logger.info("Starting server...")
    app.run(host="0.0.0.0", port=Config.PORT, debug=False, threaded=True)
