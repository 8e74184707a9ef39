"""
Latin Wordle Server - Main Entry Point

This is the main entry point for the game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from latin_wordle import create_app
from latin_wordle.config import Config, get_dictionary_statistics
from latin_wordle.services.game_service import initialize_game_service
from latin_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service()
        stats = get_dictionary_statistics(game_service.dictionary)
        print(f"✓ Game service initialized with {stats['total_words']} words")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Latin Wordle Server Starting")

        print(f"\nStarting Latin Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Latin Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
