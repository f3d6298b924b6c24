"""
Word Learner Application Package

A browser-based word guessing game served by Flask and Flask-SocketIO, with
multi-language word lists, configurable word lengths and an offline asset
cache.
"""

import os
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config
from .config.game_settings import PRECACHE_ASSETS, WORDS_DIR


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask application, SocketIO instance) with all extensions initialized
    """
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Install the offline asset cache for the browser shell
    from .services.asset_cache import initialize_asset_cache, static_file_fetcher
    initialize_asset_cache(
        app.config['ASSET_CACHE_NAME'],
        PRECACHE_ASSETS,
        static_file_fetcher(os.path.join(app.root_path, 'static'), mounts={'/words/': WORDS_DIR})
    )

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.asset_controller import asset_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(asset_bp)

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
