"""
Greek Wordle Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
"""

import threading
import time
from greek_wordle import create_app
from greek_wordle.config import Config, validate_word_list_integrity, get_word_statistics
from greek_wordle.services.game_service import initialize_game_service, get_game_service
from greek_wordle.utils.game_logger import game_logger


def game_cleanup_worker(app, interval_seconds, max_idle_seconds):
    """
    Background worker that periodically drops games nobody has touched
    for ``max_idle_seconds``.
    """
    print("Game cleanup worker started")
    while True:
        try:
            with app.app_context():
                game_service = get_game_service()
                if game_service:
                    cleanup_result = game_service.cleanup_stale_games(max_idle_seconds)

                    if cleanup_result["cleaned_count"] > 0:
                        game_logger.logger.info(f"Game cleanup: Removed {cleanup_result['cleaned_count']} idle games")

                        for game_id in cleanup_result["removed_game_ids"]:
                            game_logger.log_game_event(
                                game_id,
                                'game_expired',
                                'system',
                                max_idle_seconds=max_idle_seconds
                            )

        except Exception as e:
            game_logger.logger.error(f"Error in game cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        stats = get_word_statistics()
        print(f"✓ Word list loaded ({stats['total_words']} words)")

        game_service = initialize_game_service()
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=game_cleanup_worker,
            args=(app, Config.CLEANUP_INTERVAL_SECONDS, Config.GAME_IDLE_TIMEOUT_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Game cleanup worker started - checking every {Config.CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Greek Wordle Server Starting")

        print(f"\nStarting Greek Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Greek Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
