"""
Word Learner Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
"""

from word_learner import create_app
from word_learner.config import Config
from word_learner.services.game_service import initialize_game_service
from word_learner.services.word_source import validate_word_list_integrity
from word_learner.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        print("✓ Word lists validated")

        game_service = initialize_game_service(max_rows=Config.MAX_ROWS)
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Learner Server Starting")

        print(f"\nStarting Word Learner Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Learner Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
