"""
Daily Wordle Server - Main Entry Point

This is the main entry point for the Daily Wordle server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from daily_wordle import create_app
from daily_wordle.config import Config, validate_word_list_integrity
from daily_wordle.services.game_service import initialize_game_service
from daily_wordle.services.word_selection import day_of_year
from daily_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        print("✓ Word list validated")

        game_service = initialize_game_service()
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"Daily Wordle Server Starting - puzzle #{day_of_year()} of the year")

        print(f"\nStarting Daily Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
